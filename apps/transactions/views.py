from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsSuperAdminRole
from apps.common.serializers import DateRangeQuerySerializer
from .models import TransactionType
from .serializers import (
    TransactionSerializer,
    TransactionCreateSerializer,
    TransactionUpdateSerializer,
    TransactionListQuerySerializer,
)
from .services import (
    create_transaction,
    update_transaction,
    delete_transaction,
    get_transaction_by_id,
    list_transactions,
    get_transactions_by_date_range,
    get_transactions_by_type,
    TransactionNotFoundError,
)


class TransactionViewSet(viewsets.ViewSet):
    """
    Transaction ledger.

    list: Transactions newest first (``?limit=&offset=``)
    create: Record a transaction (updates the day's stats)
    retrieve: Get a transaction
    partial_update: Edit a transaction (super admin only)
    destroy: Delete a transaction (super admin only)
    by_date: Transactions within a day range
    by_type: Transactions of one type
    """

    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ('partial_update', 'destroy'):
            return [IsAuthenticated(), IsSuperAdminRole()]
        return [IsAuthenticated()]

    @extend_schema(
        parameters=[
            OpenApiParameter('limit', OpenApiTypes.INT, description='Maximum number of rows'),
            OpenApiParameter('offset', OpenApiTypes.INT, description='Rows to skip', default=0),
        ],
        responses={200: TransactionSerializer(many=True)},
        tags=['transactions'],
    )
    def list(self, request):
        query_serializer = TransactionListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        transactions = list_transactions(**query_serializer.validated_data)
        return Response(TransactionSerializer(transactions, many=True).data)

    @extend_schema(
        request=TransactionCreateSerializer,
        responses={201: TransactionSerializer},
        tags=['transactions'],
    )
    def create(self, request):
        serializer = TransactionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        txn = create_transaction(**serializer.validated_data)
        return Response(TransactionSerializer(txn).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: TransactionSerializer}, tags=['transactions'])
    def retrieve(self, request, pk=None):
        try:
            txn = get_transaction_by_id(transaction_id=pk)
        except TransactionNotFoundError as e:
            raise NotFound(str(e))
        return Response(TransactionSerializer(txn).data)

    @extend_schema(
        request=TransactionUpdateSerializer,
        responses={200: TransactionSerializer},
        tags=['transactions'],
    )
    def partial_update(self, request, pk=None):
        serializer = TransactionUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            txn = update_transaction(transaction_id=pk, **serializer.validated_data)
        except TransactionNotFoundError as e:
            raise NotFound(str(e))
        return Response(TransactionSerializer(txn).data)

    @extend_schema(responses={204: None}, tags=['transactions'])
    def destroy(self, request, pk=None):
        try:
            delete_transaction(transaction_id=pk)
        except TransactionNotFoundError as e:
            raise NotFound(str(e))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('startDate', OpenApiTypes.DATE, description='First day (YYYY-MM-DD)'),
            OpenApiParameter('endDate', OpenApiTypes.DATE, description='Last day (YYYY-MM-DD)'),
        ],
        responses={200: TransactionSerializer(many=True)},
        tags=['transactions'],
    )
    @action(detail=False, methods=['get'], url_path='byDate', url_name='by-date')
    def by_date(self, request):
        query_serializer = DateRangeQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        transactions = get_transactions_by_date_range(params['start_date'], params['end_date'])
        return Response(TransactionSerializer(transactions, many=True).data)

    @extend_schema(responses={200: TransactionSerializer(many=True)}, tags=['transactions'])
    @action(
        detail=False,
        methods=['get'],
        url_path=r'byType/(?P<transaction_type>[^/.]+)',
        url_name='by-type',
    )
    def by_type(self, request, transaction_type=None):
        if transaction_type not in TransactionType.values:
            raise ValidationError({'type': f"'{transaction_type}' is not a valid transaction type"})

        transactions = get_transactions_by_type(transaction_type)
        return Response(TransactionSerializer(transactions, many=True).data)
