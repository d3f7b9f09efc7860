from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.products.services import ProductNotFoundError
from apps.transactions.services import TransactionNotFoundError
from .serializers import (
    InventorySerializer,
    InventoryCreateSerializer,
    InventoryUpdateSerializer,
    StockMovementSerializer,
    StockOperationResultSerializer,
    StockChangeSerializer,
    StockRemoveSerializer,
    StockAdjustSerializer,
    ExpiringQuerySerializer,
    MovementsQuerySerializer,
)
from .services import (
    add_stock,
    remove_stock,
    adjust_stock,
    create_inventory_item,
    update_inventory_item,
    get_inventory_item,
    list_inventory,
    get_product_movements,
    get_expiring_items,
    get_low_stock_items,
    InventoryNotFoundError,
    DuplicateInventoryError,
    InsufficientStockError,
    InvalidQuantityError,
)


NOT_FOUND_ERRORS = (ProductNotFoundError, InventoryNotFoundError, TransactionNotFoundError)
INVALID_REQUEST_ERRORS = (InsufficientStockError, InvalidQuantityError, DuplicateInventoryError)


class InventoryViewSet(viewsets.ViewSet):
    """
    Inventory and stock movements.

    list/create/retrieve/partial_update: Inventory rows
    stock/add, stock/remove, stock/adjust: Stock changes (logged as movements)
    expiring, low-stock, movements: Stock queries
    """

    lookup_value_regex = r'\d+'

    def _run_stock_operation(self, operation, serializer_class, request):
        serializer = serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            inventory, movement = operation(user=request.user, **serializer.validated_data)
        except NOT_FOUND_ERRORS as e:
            raise NotFound(str(e))
        except INVALID_REQUEST_ERRORS as e:
            raise ValidationError({'error': str(e)})

        result = StockOperationResultSerializer({'inventory': inventory, 'movement': movement})
        return Response(result.data)

    @extend_schema(responses={200: InventorySerializer(many=True)}, tags=['inventory'])
    def list(self, request):
        return Response(InventorySerializer(list_inventory(), many=True).data)

    @extend_schema(
        request=InventoryCreateSerializer,
        responses={201: InventorySerializer},
        tags=['inventory'],
    )
    def create(self, request):
        serializer = InventoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            inventory = create_inventory_item(user=request.user, **serializer.validated_data)
        except ProductNotFoundError as e:
            raise NotFound(str(e))
        except (DuplicateInventoryError, InvalidQuantityError) as e:
            raise ValidationError({'error': str(e)})

        return Response(InventorySerializer(inventory).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: InventorySerializer}, tags=['inventory'])
    def retrieve(self, request, pk=None):
        try:
            inventory = get_inventory_item(inventory_id=pk)
        except InventoryNotFoundError as e:
            raise NotFound(str(e))
        return Response(InventorySerializer(inventory).data)

    @extend_schema(
        request=InventoryUpdateSerializer,
        responses={200: InventorySerializer},
        tags=['inventory'],
    )
    def partial_update(self, request, pk=None):
        serializer = InventoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            inventory = update_inventory_item(inventory_id=pk, **serializer.validated_data)
        except InventoryNotFoundError as e:
            raise NotFound(str(e))
        return Response(InventorySerializer(inventory).data)

    @extend_schema(
        request=StockChangeSerializer,
        responses={200: StockOperationResultSerializer},
        tags=['inventory'],
    )
    @action(detail=False, methods=['post'], url_path='stock/add', url_name='stock-add')
    def stock_add(self, request):
        return self._run_stock_operation(add_stock, StockChangeSerializer, request)

    @extend_schema(
        request=StockRemoveSerializer,
        responses={200: StockOperationResultSerializer},
        tags=['inventory'],
    )
    @action(detail=False, methods=['post'], url_path='stock/remove', url_name='stock-remove')
    def stock_remove(self, request):
        return self._run_stock_operation(remove_stock, StockRemoveSerializer, request)

    @extend_schema(
        request=StockAdjustSerializer,
        responses={200: StockOperationResultSerializer},
        tags=['inventory'],
    )
    @action(detail=False, methods=['post'], url_path='stock/adjust', url_name='stock-adjust')
    def stock_adjust(self, request):
        return self._run_stock_operation(adjust_stock, StockAdjustSerializer, request)

    @extend_schema(
        parameters=[
            OpenApiParameter('days', OpenApiTypes.INT, description='Look-ahead window in days', default=7),
        ],
        responses={200: InventorySerializer(many=True)},
        tags=['inventory'],
    )
    @action(detail=False, methods=['get'])
    def expiring(self, request):
        query_serializer = ExpiringQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        items = get_expiring_items(days_threshold=query_serializer.validated_data['days'])
        return Response(InventorySerializer(items, many=True).data)

    @extend_schema(responses={200: InventorySerializer(many=True)}, tags=['inventory'])
    @action(detail=False, methods=['get'], url_path='low-stock', url_name='low-stock')
    def low_stock(self, request):
        return Response(InventorySerializer(get_low_stock_items(), many=True).data)

    @extend_schema(
        parameters=[
            OpenApiParameter('productId', OpenApiTypes.INT, description='Only movements of this product'),
        ],
        responses={200: StockMovementSerializer(many=True)},
        tags=['inventory'],
    )
    @action(detail=False, methods=['get'])
    def movements(self, request):
        query_serializer = MovementsQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        movements = get_product_movements(**query_serializer.validated_data)
        return Response(StockMovementSerializer(movements, many=True).data)
