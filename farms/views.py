"""
Farm Settings Views

Provides endpoints for farmers to manage their farm settings:
- View farm info / rename the farm
- Update hen count (recorded in the hen count history)
- Update egg price (per dozen)
"""

from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import LimitMixin, UserScopedMixin
from .models import HenCountHistory
from .serializers import (
    EggPriceUpdateSerializer,
    FarmInfoSerializer,
    FarmRenameSerializer,
    HenCountHistorySerializer,
    HenCountUpdateSerializer,
)
from .services import FarmSettingsService


class FarmInfoView(APIView):
    """
    GET /api/farm/
    PATCH /api/farm/

    View the farm settings or rename the farm.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        service = FarmSettingsService(request.user)
        return Response(FarmInfoSerializer(service.get_farm_info()).data)

    def patch(self, request):
        serializer = FarmRenameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = FarmSettingsService(request.user)
        service.rename_farm(serializer.validated_data['name'])
        return Response(FarmInfoSerializer(service.get_farm_info()).data)


class HenCountUpdateView(APIView):
    """
    PUT /api/farm/hen-count/

    Body: {"hen_count": 150, "reason": "Compra de lote"}
    """
    permission_classes = [IsAuthenticated]

    def put(self, request):
        serializer = HenCountUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        history = FarmSettingsService(request.user).update_hen_count(
            serializer.validated_data['hen_count'],
            reason=serializer.validated_data.get('reason'),
        )
        return Response({
            'history': HenCountHistorySerializer(history).data,
            'current_hen_count': request.user.hen_count,
        })


class EggPriceUpdateView(APIView):
    """
    PUT /api/farm/egg-price/

    Body: {"egg_price": "12.50"}
    """
    permission_classes = [IsAuthenticated]

    def put(self, request):
        serializer = EggPriceUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        FarmSettingsService(request.user).update_egg_price(serializer.validated_data['egg_price'])
        return Response(EggPriceUpdateSerializer({'egg_price': request.user.egg_price}).data)


class HenCountHistoryListView(UserScopedMixin, LimitMixin, generics.ListAPIView):
    """
    GET /api/hen-count-history/?limit=10
    """
    queryset = HenCountHistory.objects.all()
    serializer_class = HenCountHistorySerializer

    def get_queryset(self):
        return super().get_queryset().order_by('-change_date')
