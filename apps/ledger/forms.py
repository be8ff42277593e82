# apps/ledger/forms.py

from django import forms

from .utils import ADJUSTMENT_KINDS


class AdjustBalanceForm(forms.Form):
    kind = forms.ChoiceField(
        choices=[(key, label) for key, label in ADJUSTMENT_KINDS.items()],
        widget=forms.RadioSelect
    )
    amount = forms.IntegerField(
        min_value=1,
        widget=forms.NumberInput(attrs={
            'class': 'form-control',
            'placeholder': 'NP amount'
        })
    )
