# apps/ledger/serializers.py

from rest_framework import serializers
from .models import Transaction
from .utils import ADJUSTMENT_KINDS


class TransactionSerializer(serializers.ModelSerializer):
    sender = serializers.CharField(source='sender_label', read_only=True)
    receiver = serializers.CharField(source='receiver_label', read_only=True)

    class Meta:
        model = Transaction
        fields = ('id', 'sender', 'sender_id', 'receiver', 'receiver_id', 'amount', 'context', 'created_at')
        read_only_fields = fields


class BalanceEntrySerializer(serializers.Serializer):
    """A transaction with the balance right after it"""

    transaction = TransactionSerializer(source='record')
    balance_after = serializers.IntegerField()


class AdjustBalanceSerializer(serializers.Serializer):
    kind = serializers.ChoiceField(choices=list(ADJUSTMENT_KINDS))
    amount = serializers.IntegerField(min_value=1)
