from django import forms
from django.contrib.auth.models import User
from .models import UserProfile


class RegisterForm(forms.Form):
    phone_number = forms.CharField(max_length=32)
    password = forms.CharField(min_length=6, max_length=128)

    def clean_phone_number(self):
        phone_number = self.cleaned_data['phone_number'].strip()
        if User.objects.filter(username=phone_number).exists():
            raise forms.ValidationError("User already exists")
        return phone_number


class LoginForm(forms.Form):
    phone_number = forms.CharField(max_length=32)
    password = forms.CharField(max_length=128)

    def clean_phone_number(self):
        return self.cleaned_data['phone_number'].strip()


class DailyGoalForm(forms.ModelForm):
    class Meta:
        model = UserProfile
        fields = ['daily_goal']
