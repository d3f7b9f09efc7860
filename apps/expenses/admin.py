from django.contrib import admin
from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['id', 'category', 'amount', 'payment_method', 'created_by', 'date']
    list_filter = ['category', 'payment_method', 'date']
    search_fields = ['description']
    date_hierarchy = 'date'
    raw_id_fields = ['created_by']
    readonly_fields = ['created_at', 'updated_at']
