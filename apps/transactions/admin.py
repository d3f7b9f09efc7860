from django.contrib import admin
from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ['id', 'type', 'amount', 'payment_method', 'client_name', 'date']
    list_filter = ['type', 'payment_method', 'date']
    search_fields = ['client_name', 'notes']
    date_hierarchy = 'date'
    readonly_fields = ['created_at', 'updated_at']
