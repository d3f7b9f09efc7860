from rest_framework import serializers

from apps.common.serializers import StrictFieldsMixin
from .models import User, UserRole


class UserSerializer(serializers.ModelSerializer):
    """User profile as returned by the API. Never exposes the password."""
    
    fullName = serializers.CharField(source='full_name', read_only=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    lastLogin = serializers.DateTimeField(source='last_login', read_only=True)
    
    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'fullName',
            'role',
            'isActive',
            'createdAt',
            'lastLogin',
        ]
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""
    
    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserCreateSerializer(serializers.Serializer):
    """Serializer for admin-side user creation."""
    
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(
        min_length=4,
        write_only=True,
        style={'input_type': 'password'}
    )
    role = serializers.ChoiceField(choices=UserRole.choices, default=UserRole.STAFF)
    fullName = serializers.CharField(
        source='full_name',
        max_length=150,
        required=False,
        allow_blank=True,
        default=''
    )


class UserUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """Serializer for admin-side user updates (partial)."""
    
    username = serializers.CharField(max_length=150, required=False)
    password = serializers.CharField(
        min_length=4,
        write_only=True,
        required=False,
        style={'input_type': 'password'}
    )
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    fullName = serializers.CharField(
        source='full_name',
        max_length=150,
        required=False,
        allow_blank=True
    )
    isActive = serializers.BooleanField(source='is_active', required=False)
