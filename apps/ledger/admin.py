# apps/ledger/admin.py

from django.contrib import admin
from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ('created_at', 'sender_label', 'receiver_label', 'amount', 'context')
    list_filter = ('created_at',)
    search_fields = ('sender__nickname', 'receiver__nickname', 'context')
    date_hierarchy = 'created_at'

    # Records are append-only
    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
