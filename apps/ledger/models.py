# apps/ledger/models.py

from django.db import models
from django.conf import settings
from django.utils import timezone
import uuid


class ImmutableRecordError(Exception):
    pass


class Transaction(models.Model):
    """
    One NP movement between two accounts

    A null sender is the platform itself (shown as ADMIN). The amount is
    signed from the receiver's side: positive credits the receiver.
    Records are append-only.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sent_transactions'
    )
    receiver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='received_transactions'
    )
    amount = models.IntegerField()
    context = models.CharField(max_length=200, blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['sender', '-created_at'], name='ledger_sender_created_idx'),
            models.Index(fields=['receiver', '-created_at'], name='ledger_receiver_created_idx'),
        ]

    def __str__(self):
        return f"{self.sender_label} -> {self.receiver_label}: {self.amount} NP"

    @property
    def sender_label(self):
        if self.sender_id is None:
            return settings.NADA_SETTINGS['ADMIN_SENDER_LABEL']
        return self.sender.display_name if self.sender else str(self.sender_id)

    @property
    def receiver_label(self):
        return self.receiver.display_name if self.receiver else '-'

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableRecordError("Transactions cannot be modified")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableRecordError("Transactions cannot be deleted")
