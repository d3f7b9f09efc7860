from django.contrib import admin
from .models import DailyStats


@admin.register(DailyStats)
class DailyStatsAdmin(admin.ModelAdmin):
    list_display = [
        'date',
        'total_revenue',
        'entries_count',
        'subscriptions_count',
        'cafe_orders_count',
    ]
    date_hierarchy = 'date'
    ordering = ['-date']
    readonly_fields = [
        'total_revenue',
        'entries_revenue',
        'entries_count',
        'subscriptions_revenue',
        'subscriptions_count',
        'cafe_revenue',
        'cafe_orders_count',
    ]
