from rest_framework import serializers
from django.utils import timezone

from .models import DailyStats


# =============================================================================
# Input serializers
# =============================================================================

class DailyStatsQuerySerializer(serializers.Serializer):
    """Validate the ?date= parameter (defaults to today)."""
    
    date = serializers.DateField(required=False)
    
    def validate(self, attrs):
        attrs.setdefault('date', timezone.localdate())
        return attrs


# =============================================================================
# Response serializers
# =============================================================================

class DailyStatsSerializer(serializers.ModelSerializer):
    """One day of aggregated takings. Unsaved stubs serialize with id null."""
    
    totalRevenue = serializers.DecimalField(source='total_revenue', max_digits=10, decimal_places=2)
    entriesRevenue = serializers.DecimalField(source='entries_revenue', max_digits=10, decimal_places=2)
    entriesCount = serializers.IntegerField(source='entries_count')
    subscriptionsRevenue = serializers.DecimalField(source='subscriptions_revenue', max_digits=10, decimal_places=2)
    subscriptionsCount = serializers.IntegerField(source='subscriptions_count')
    cafeRevenue = serializers.DecimalField(source='cafe_revenue', max_digits=10, decimal_places=2)
    cafeOrdersCount = serializers.IntegerField(source='cafe_orders_count')
    
    class Meta:
        model = DailyStats
        fields = [
            'id',
            'date',
            'totalRevenue',
            'entriesRevenue',
            'entriesCount',
            'subscriptionsRevenue',
            'subscriptionsCount',
            'cafeRevenue',
            'cafeOrdersCount',
        ]
        read_only_fields = fields


class NetRevenueSerializer(serializers.Serializer):
    """Revenue minus expenses over a day range."""
    
    startDate = serializers.DateField(source='start_date')
    endDate = serializers.DateField(source='end_date')
    totalRevenue = serializers.DecimalField(source='total_revenue', max_digits=12, decimal_places=2)
    totalExpenses = serializers.DecimalField(source='total_expenses', max_digits=12, decimal_places=2)
    netRevenue = serializers.DecimalField(source='net_revenue', max_digits=12, decimal_places=2)
    expenseBreakdown = serializers.DictField(
        source='expense_breakdown',
        child=serializers.DecimalField(max_digits=12, decimal_places=2)
    )
