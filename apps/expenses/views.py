from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole
from apps.common.serializers import DateRangeQuerySerializer
from .models import ExpenseCategory
from .serializers import (
    ExpenseSerializer,
    ExpenseCreateSerializer,
    ExpenseUpdateSerializer,
)
from .services import (
    create_expense,
    get_expense_by_id,
    update_expense,
    delete_expense,
    list_expenses,
    get_expenses_by_date_range,
    get_expenses_by_category,
    ExpenseNotFoundError,
)


class ExpenseViewSet(viewsets.ViewSet):
    """
    Expense ledger.

    Reads are open to any authenticated user; writes need the admin role.
    """

    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ('create', 'partial_update', 'destroy'):
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated()]

    @extend_schema(responses={200: ExpenseSerializer(many=True)}, tags=['expenses'])
    def list(self, request):
        return Response(ExpenseSerializer(list_expenses(), many=True).data)

    @extend_schema(
        request=ExpenseCreateSerializer,
        responses={201: ExpenseSerializer},
        tags=['expenses'],
    )
    def create(self, request):
        serializer = ExpenseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expense = create_expense(created_by=request.user, **serializer.validated_data)
        return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ExpenseSerializer}, tags=['expenses'])
    def retrieve(self, request, pk=None):
        try:
            expense = get_expense_by_id(expense_id=pk)
        except ExpenseNotFoundError as e:
            raise NotFound(str(e))
        return Response(ExpenseSerializer(expense).data)

    @extend_schema(
        request=ExpenseUpdateSerializer,
        responses={200: ExpenseSerializer},
        tags=['expenses'],
    )
    def partial_update(self, request, pk=None):
        serializer = ExpenseUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = update_expense(expense_id=pk, **serializer.validated_data)
        except ExpenseNotFoundError as e:
            raise NotFound(str(e))
        return Response(ExpenseSerializer(expense).data)

    @extend_schema(responses={204: None}, tags=['expenses'])
    def destroy(self, request, pk=None):
        try:
            delete_expense(expense_id=pk)
        except ExpenseNotFoundError as e:
            raise NotFound(str(e))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('startDate', OpenApiTypes.DATE, description='First day (YYYY-MM-DD)'),
            OpenApiParameter('endDate', OpenApiTypes.DATE, description='Last day (YYYY-MM-DD)'),
        ],
        responses={200: ExpenseSerializer(many=True)},
        tags=['expenses'],
    )
    @action(detail=False, methods=['get'], url_path='byDate', url_name='by-date')
    def by_date(self, request):
        query_serializer = DateRangeQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        expenses = get_expenses_by_date_range(params['start_date'], params['end_date'])
        return Response(ExpenseSerializer(expenses, many=True).data)

    @extend_schema(responses={200: ExpenseSerializer(many=True)}, tags=['expenses'])
    @action(
        detail=False,
        methods=['get'],
        url_path=r'byCategory/(?P<category>[^/.]+)',
        url_name='by-category',
    )
    def by_category(self, request, category=None):
        if category not in ExpenseCategory.values:
            raise ValidationError({'category': f"'{category}' is not a valid expense category"})

        expenses = get_expenses_by_category(category)
        return Response(ExpenseSerializer(expenses, many=True).data)
