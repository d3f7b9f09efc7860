from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.common.serializers import DateRangeQuerySerializer
from .serializers import (
    DailyStatsQuerySerializer,
    DailyStatsSerializer,
    NetRevenueSerializer,
)
from .services import (
    get_daily_stats_or_stub,
    get_stats_range,
    get_net_revenue,
)


RANGE_PARAMETERS = [
    OpenApiParameter('startDate', OpenApiTypes.DATE, description='First day (YYYY-MM-DD), defaults to start of month'),
    OpenApiParameter('endDate', OpenApiTypes.DATE, description='Last day (YYYY-MM-DD), defaults to end of month'),
]


@extend_schema(
    parameters=[
        OpenApiParameter('date', OpenApiTypes.DATE, description='Day (YYYY-MM-DD), defaults to today'),
    ],
    responses={200: DailyStatsSerializer},
    description="Get the stats for one day. Days without activity return zeros.",
    tags=['stats'],
)
@api_view(['GET'])
def daily_stats(request):
    query_serializer = DailyStatsQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    stats = get_daily_stats_or_stub(query_serializer.validated_data['date'])
    return Response(DailyStatsSerializer(stats).data)


@extend_schema(
    parameters=RANGE_PARAMETERS,
    responses={200: DailyStatsSerializer(many=True)},
    description="Get the stored daily stats rows in a day range, oldest first.",
    tags=['stats'],
)
@api_view(['GET'])
def stats_range(request):
    query_serializer = DateRangeQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    rows = get_stats_range(params['start_date'], params['end_date'])
    return Response(DailyStatsSerializer(rows, many=True).data)


@extend_schema(
    parameters=RANGE_PARAMETERS,
    responses={200: NetRevenueSerializer},
    description="Get revenue minus expenses over a day range with an expense breakdown by category.",
    tags=['stats'],
)
@api_view(['GET'])
def net_revenue(request):
    query_serializer = DateRangeQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    report = get_net_revenue(params['start_date'], params['end_date'])
    return Response(NetRevenueSerializer(report).data)
