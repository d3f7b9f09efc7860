from rest_framework import serializers

from apps.common.serializers import StrictFieldsMixin
from .models import Product, ProductCategory


class ProductSerializer(serializers.ModelSerializer):
    """Product as returned by the API."""
    
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    
    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'price',
            'category',
            'isActive',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    """Validate input for product creation."""
    
    name = serializers.CharField(max_length=200)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    category = serializers.ChoiceField(
        choices=ProductCategory.choices,
        default=ProductCategory.BEVERAGE
    )
    isActive = serializers.BooleanField(source='is_active', default=True)


class ProductUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """Validate input for partial product updates."""
    
    name = serializers.CharField(max_length=200, required=False)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False
    )
    category = serializers.ChoiceField(choices=ProductCategory.choices, required=False)
    isActive = serializers.BooleanField(source='is_active', required=False)
