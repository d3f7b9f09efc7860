from rest_framework import serializers
from django.conf import settings

from apps.common.serializers import StrictFieldsMixin
from .models import Inventory, StockMovement


# =============================================================================
# Response serializers
# =============================================================================

class InventorySerializer(serializers.ModelSerializer):
    """Inventory row with its product name and low-stock flag."""
    
    productId = serializers.IntegerField(source='product_id', read_only=True)
    productName = serializers.CharField(source='product.name', read_only=True)
    minThreshold = serializers.IntegerField(source='min_threshold', read_only=True)
    purchasePrice = serializers.DecimalField(
        source='purchase_price',
        max_digits=10,
        decimal_places=2,
        read_only=True
    )
    expirationDate = serializers.DateTimeField(source='expiration_date', read_only=True)
    lastRestockDate = serializers.DateTimeField(source='last_restock_date', read_only=True)
    isLowStock = serializers.BooleanField(source='is_low_stock', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    
    class Meta:
        model = Inventory
        fields = [
            'id',
            'productId',
            'productName',
            'quantity',
            'minThreshold',
            'purchasePrice',
            'expirationDate',
            'lastRestockDate',
            'isLowStock',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class StockMovementSerializer(serializers.ModelSerializer):
    """One entry of the stock movement log."""
    
    inventoryId = serializers.IntegerField(source='inventory_id', read_only=True)
    productId = serializers.IntegerField(source='product_id', read_only=True)
    productName = serializers.CharField(source='product.name', read_only=True)
    actionType = serializers.CharField(source='action_type', read_only=True)
    performedBy = serializers.IntegerField(source='performed_by_id', read_only=True)
    transactionId = serializers.IntegerField(source='transaction_id', read_only=True)
    
    class Meta:
        model = StockMovement
        fields = [
            'id',
            'inventoryId',
            'productId',
            'productName',
            'quantity',
            'actionType',
            'reason',
            'performedBy',
            'transactionId',
            'timestamp',
        ]
        read_only_fields = fields


class StockOperationResultSerializer(serializers.Serializer):
    """Result of add/remove/adjust: the updated row and the new movement."""
    
    inventory = InventorySerializer()
    movement = StockMovementSerializer()


# =============================================================================
# Input serializers
# =============================================================================

class InventoryCreateSerializer(serializers.Serializer):
    """Validate input for creating an inventory row."""
    
    productId = serializers.IntegerField(source='product_id')
    quantity = serializers.IntegerField(min_value=0, default=0)
    minThreshold = serializers.IntegerField(source='min_threshold', min_value=0, required=False)
    purchasePrice = serializers.DecimalField(
        source='purchase_price',
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True
    )
    expirationDate = serializers.DateTimeField(
        source='expiration_date',
        required=False,
        allow_null=True
    )


class InventoryUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """
    Validate a partial inventory update.

    Quantity is not accepted here; use the stock endpoints.
    """
    
    minThreshold = serializers.IntegerField(source='min_threshold', min_value=0, required=False)
    purchasePrice = serializers.DecimalField(
        source='purchase_price',
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True
    )
    expirationDate = serializers.DateTimeField(
        source='expiration_date', required=False, allow_null=True
    )


class StockChangeSerializer(serializers.Serializer):
    """Body of stock/add and stock/remove."""
    
    productId = serializers.IntegerField(source='product_id')
    quantity = serializers.IntegerField(min_value=1)
    reason = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


class StockRemoveSerializer(StockChangeSerializer):
    
    transactionId = serializers.IntegerField(source='transaction_id', required=False, allow_null=True)


class StockAdjustSerializer(serializers.Serializer):
    """Body of stock/adjust. ``quantity`` is the counted stock level."""
    
    productId = serializers.IntegerField(source='product_id')
    quantity = serializers.IntegerField(source='new_quantity', min_value=0)
    reason = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


class ExpiringQuerySerializer(serializers.Serializer):
    
    days = serializers.IntegerField(required=False, min_value=0)
    
    def validate(self, attrs):
        attrs.setdefault('days', settings.EXPIRING_ITEMS_DEFAULT_DAYS)
        return attrs


class MovementsQuerySerializer(serializers.Serializer):
    
    productId = serializers.IntegerField(source='product_id', required=False)
