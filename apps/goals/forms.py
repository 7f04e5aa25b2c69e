from django import forms
from .models import GoalPeriod


class GoalPeriodForm(forms.ModelForm):
    class Meta:
        model = GoalPeriod
        fields = ['goal', 'start_date', 'end_date', 'is_active']

    def clean(self):
        cleaned_data = super().clean()
        start_date = cleaned_data.get('start_date')
        end_date = cleaned_data.get('end_date')

        if start_date and end_date and start_date > end_date:
            raise forms.ValidationError("Start date must not be after end date")

        return cleaned_data
