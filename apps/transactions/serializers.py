from rest_framework import serializers

from apps.common.serializers import StrictFieldsMixin
from .models import Transaction, TransactionType, PaymentMethod


# =============================================================================
# Input serializers
# =============================================================================

class TransactionCreateSerializer(serializers.Serializer):
    """Validate input for recording a transaction."""
    
    type = serializers.ChoiceField(choices=TransactionType.choices)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    paymentMethod = serializers.ChoiceField(
        source='payment_method',
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH
    )
    date = serializers.DateTimeField(required=False)
    clientName = serializers.CharField(
        source='client_name',
        max_length=200,
        required=False,
        allow_blank=True
    )
    notes = serializers.CharField(required=False, allow_blank=True)
    subscriptionEndDate = serializers.DateTimeField(
        source='subscription_end_date',
        required=False,
        allow_null=True
    )


class TransactionUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """Validate a partial transaction update. Unknown fields are rejected."""
    
    type = serializers.ChoiceField(choices=TransactionType.choices, required=False)
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False
    )
    paymentMethod = serializers.ChoiceField(
        source='payment_method',
        choices=PaymentMethod.choices,
        required=False
    )
    date = serializers.DateTimeField(required=False)
    clientName = serializers.CharField(
        source='client_name',
        max_length=200,
        required=False,
        allow_blank=True
    )
    notes = serializers.CharField(required=False, allow_blank=True)
    subscriptionEndDate = serializers.DateTimeField(
        source='subscription_end_date',
        required=False
    )


class TransactionListQuerySerializer(serializers.Serializer):
    """Validate limit/offset pagination parameters."""
    
    limit = serializers.IntegerField(required=False, min_value=1, max_value=1000)
    offset = serializers.IntegerField(required=False, min_value=0, default=0)


# =============================================================================
# Response serializers
# =============================================================================

class TransactionSerializer(serializers.ModelSerializer):
    """Transaction as returned by the API."""
    
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    clientName = serializers.CharField(source='client_name', read_only=True)
    subscriptionEndDate = serializers.DateTimeField(source='subscription_end_date', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    
    class Meta:
        model = Transaction
        fields = [
            'id',
            'type',
            'amount',
            'date',
            'paymentMethod',
            'clientName',
            'notes',
            'subscriptionEndDate',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields
