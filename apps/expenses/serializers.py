from rest_framework import serializers

from apps.common.serializers import StrictFieldsMixin
from apps.transactions.models import PaymentMethod
from .models import Expense, ExpenseCategory


class ExpenseSerializer(serializers.ModelSerializer):
    """Expense as returned by the API."""
    
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    createdBy = serializers.PrimaryKeyRelatedField(source='created_by', read_only=True)
    createdByName = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    
    class Meta:
        model = Expense
        fields = [
            'id',
            'amount',
            'category',
            'date',
            'description',
            'paymentMethod',
            'createdBy',
            'createdByName',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields
    
    def get_createdByName(self, obj) -> str:
        return obj.created_by.get_display_name() if obj.created_by else ''


class ExpenseCreateSerializer(serializers.Serializer):
    """Validate input for recording an expense."""
    
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    category = serializers.ChoiceField(choices=ExpenseCategory.choices)
    date = serializers.DateTimeField(required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    paymentMethod = serializers.ChoiceField(
        source='payment_method',
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH
    )


class ExpenseUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """Validate a partial expense update. Unknown fields are rejected."""
    
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False
    )
    category = serializers.ChoiceField(choices=ExpenseCategory.choices, required=False)
    date = serializers.DateTimeField(required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    paymentMethod = serializers.ChoiceField(
        source='payment_method',
        choices=PaymentMethod.choices,
        required=False
    )
