from django import forms
from django.forms import ValidationError

from woot_irrigation_backend.models import Gardener
from woot_irrigation_backend.utils import SoilType


class SignUpForm(forms.ModelForm):
    email = forms.EmailField(max_length=200, help_text='Required')
    name = forms.CharField(max_length=200)
    password = forms.CharField(min_length=4, strip=False, widget=forms.PasswordInput,
                               error_messages={'min_length': 'Password must be at least 4 characters.'})
    location = forms.CharField(max_length=256, required=False)
    soilType = forms.ChoiceField(choices=[('', '')] + SoilType.as_choices(), required=False)
    flowRate = forms.FloatField(min_value=0, required=False)
    areaSize = forms.FloatField(min_value=0, required=False)

    class Meta:
        model = Gardener
        fields = ('name', 'email', 'location', 'soilType', 'flowRate', 'areaSize')

    def clean_email(self):
        data = self.cleaned_data['email']
        if Gardener.objects.filter(email__iexact=data).exists():
            raise ValidationError("User already exists.")

        return data

    def clean_name(self):
        data = self.cleaned_data['name'].strip()
        if not data:
            raise ValidationError("Please enter your name.")
        return data

    def clean_flowRate(self):
        return self.cleaned_data['flowRate'] or 0

    def clean_areaSize(self):
        return self.cleaned_data['areaSize'] or 0

    def save(self, commit=True):
        user = super().save(commit=False)
        user.username = user.email
        user.set_password(self.cleaned_data['password'])
        if commit:
            user.save()
        return user


class LoginForm(forms.Form):
    email = forms.CharField()
    password = forms.CharField(strip=False, widget=forms.PasswordInput)
