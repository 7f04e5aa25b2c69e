from django import forms

from .domain.phones import merge_phone_numbers, clamp_primary_index, apply_legacy_phone, is_valid_phone_number
from .models import Client, Lead


class ClientForm(forms.ModelForm):
    phone_numbers = forms.JSONField(required=False)
    # Stare pojedyncze pole (kompatybilność wsteczna)
    phone = forms.CharField(required=False)

    class Meta:
        model = Client
        fields = [
            'business_name', 'manager_name', 'place',
            'first_visit', 'next_visit',
            'status', 'deal', 'description', 'primary_phone_index'
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['primary_phone_index'].required = False
        self.fields['status'].required = False

    def clean_phone_numbers(self):
        numbers = self.cleaned_data.get('phone_numbers') or []
        if not isinstance(numbers, list) or not all(isinstance(n, str) for n in numbers):
            raise forms.ValidationError("Phone numbers must be a list of strings")
        return numbers

    def clean(self):
        cleaned_data = super().clean()
        if 'phone_numbers' not in cleaned_data:
            return cleaned_data

        legacy_phone = cleaned_data.get('phone', '')
        numbers = merge_phone_numbers(cleaned_data['phone_numbers'])

        if self.instance.pk and legacy_phone.strip():
            numbers, primary_index = apply_legacy_phone(numbers, legacy_phone)
        else:
            numbers = merge_phone_numbers(numbers, legacy_phone)
            primary_index = clamp_primary_index(cleaned_data.get('primary_phone_index'), len(numbers))

        if not numbers:
            raise forms.ValidationError("At least one phone number is required")

        invalid = [n for n in numbers if not is_valid_phone_number(n)]
        if invalid:
            raise forms.ValidationError(f"Invalid phone number format: {', '.join(invalid)}")

        cleaned_data['phone_numbers'] = numbers
        cleaned_data['primary_phone_index'] = primary_index
        if not cleaned_data.get('status'):
            cleaned_data['status'] = Client.StatusChoices.STARTED
        return cleaned_data

    def save(self, commit=True):
        self.instance.phone_numbers = self.cleaned_data['phone_numbers']
        self.instance.primary_phone_index = self.cleaned_data['primary_phone_index']
        self.instance.status = self.cleaned_data['status']
        return super().save(commit=commit)


class LeadForm(forms.ModelForm):
    class Meta:
        model = Lead
        fields = ['name', 'place']
