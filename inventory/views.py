"""
Views for egg stock.

API Endpoints:
- /api/stock/balance/ - Eggs currently in stock
- /api/stock/movements/ - Stock history / manual movement (optionally a sale)
- /api/stock/movements/{id}/ - Retrieve/delete a manual movement
"""

from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import LimitMixin, UserScopedMixin
from .models import StockMovement, StockMovementType
from .serializers import (
    StockBalanceSerializer,
    StockMovementCreateSerializer,
    StockMovementSerializer,
)
from .services import StockService


class StockBalanceView(UserScopedMixin, APIView):
    """
    GET /api/stock/balance/
    """

    def get(self, request):
        balance = StockService(request.user).get_balance()
        return Response(StockBalanceSerializer(balance).data)


class StockMovementListCreateView(UserScopedMixin, LimitMixin, generics.ListAPIView):
    """
    GET /api/stock/movements/?limit=10
    POST /api/stock/movements/
    """
    queryset = StockMovement.objects.select_related('financial_movement')
    serializer_class = StockMovementSerializer

    filterset_fields = ['movement_type', 'source_type']

    def get_queryset(self):
        return super().get_queryset().order_by('-movement_date', '-created_at')

    def post(self, request):
        serializer = StockMovementCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        service = StockService(request.user)
        if data['movement_type'] == StockMovementType.OUT and data['create_financial_record']:
            movement = service.record_sale(
                egg_count=data['egg_count'],
                movement_date=data['movement_date'],
                notes=data['notes'],
                payment_method=data['payment_method'],
                contact=data['contact'],
            )
        else:
            movement = service.record_movement(
                movement_type=data['movement_type'],
                egg_count=data['egg_count'],
                movement_date=data['movement_date'],
                notes=data['notes'],
                check_available=True,
            )

        return Response(StockMovementSerializer(movement).data, status=status.HTTP_201_CREATED)


class StockMovementDetailView(UserScopedMixin, generics.RetrieveDestroyAPIView):
    """
    GET/DELETE /api/stock/movements/{id}/

    Collection movements are protected; fix the collection instead.
    """
    queryset = StockMovement.objects.select_related('financial_movement')
    serializer_class = StockMovementSerializer
    not_found_message = 'Movimentação de estoque não encontrada'

    def perform_destroy(self, instance):
        StockService(self.request.user).delete_movement(instance)
