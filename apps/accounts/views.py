from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from .permissions import IsAdminRole
from .serializers import (
    UserSerializer,
    UserLoginSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
)
from .services import (
    authenticate_user,
    list_users,
    get_user_by_id,
    create_user,
    update_user,
    delete_user,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateUsernameError,
    SelfDeletionError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(help_text="Refresh token to discard")


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with username and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = UserLoginSerializer(data=request.data)
    
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    
    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError:
        return Response({
            'error': 'Invalid credentials'
        }, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError:
        return Response({
            'error': 'Account is deactivated'
        }, status=status.HTTP_403_FORBIDDEN)
    
    # Generate tokens
    refresh = RefreshToken.for_user(user)
    
    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


@extend_schema(
    request=LogoutRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Logout. The refresh token, if given, is validated.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout and validate the refresh token."""
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token)
        except TokenError:
            return Response({
                'error': 'Invalid token'
            }, status=status.HTTP_400_BAD_REQUEST)
    
    return Response({
        'message': 'Logout successful'
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    methods=['GET'],
    responses={200: UserSerializer(many=True)},
    description="List all users (admin only).",
    tags=['users'],
)
@extend_schema(
    methods=['POST'],
    request=UserCreateSerializer,
    responses={201: UserSerializer, 400: ErrorResponseSerializer},
    description="Create a user (admin only).",
    tags=['users'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAdminRole])
def user_list(request):
    """List or create users."""
    if request.method == 'GET':
        return Response(UserSerializer(list_users(), many=True).data)
    
    serializer = UserCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    
    try:
        user = create_user(**serializer.validated_data)
    except DuplicateUsernameError as e:
        raise ValidationError({'username': str(e)})
    
    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['PATCH'],
    request=UserUpdateSerializer,
    responses={200: UserSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    tags=['users'],
)
@extend_schema(methods=['GET', 'DELETE'], tags=['users'])
@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAdminRole])
def user_detail(request, pk):
    """Retrieve, update or delete a user (admin only)."""
    try:
        if request.method == 'GET':
            return Response(UserSerializer(get_user_by_id(user_id=pk)).data)
        
        if request.method == 'PATCH':
            serializer = UserUpdateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            try:
                user = update_user(user_id=pk, **serializer.validated_data)
            except DuplicateUsernameError as e:
                raise ValidationError({'username': str(e)})
            return Response(UserSerializer(user).data)
        
        try:
            delete_user(user_id=pk, acting_user=request.user)
        except SelfDeletionError as e:
            raise ValidationError(str(e))
        return Response({'message': 'User deleted successfully'})
    
    except UserNotFoundError as e:
        raise NotFound(str(e))
