from rest_framework import viewsets, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    ProductSerializer,
    ProductCreateSerializer,
    ProductUpdateSerializer,
)
from .services import (
    list_products,
    get_product_by_id,
    create_product,
    update_product,
    ProductNotFoundError,
)


class ProductViewSet(viewsets.ViewSet):
    """
    Product catalogue.

    list: All products (``?active=true`` for active only)
    create: Add a product
    retrieve: Get a product
    partial_update: Update some product fields
    """

    lookup_value_regex = r'\d+'

    @extend_schema(responses={200: ProductSerializer(many=True)}, tags=['products'])
    def list(self, request):
        active_only = request.query_params.get('active', 'false').lower() == 'true'
        products = list_products(active_only=active_only)
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
        tags=['products'],
    )
    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = create_product(**serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ProductSerializer}, tags=['products'])
    def retrieve(self, request, pk=None):
        try:
            product = get_product_by_id(product_id=pk)
        except ProductNotFoundError as e:
            raise NotFound(str(e))
        return Response(ProductSerializer(product).data)

    @extend_schema(
        request=ProductUpdateSerializer,
        responses={200: ProductSerializer},
        tags=['products'],
    )
    def partial_update(self, request, pk=None):
        serializer = ProductUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            product = update_product(product_id=pk, **serializer.validated_data)
        except ProductNotFoundError as e:
            raise NotFound(str(e))
        return Response(ProductSerializer(product).data)
