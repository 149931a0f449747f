"""
Views for the farm's cash book.

API Endpoints:
- /api/financial/balance/ - Net balance (income minus expense)
- /api/financial/movements/ - List/create income and expense entries
- /api/financial/movements/{id}/ - Retrieve/update/delete an entry
- /api/financial/summary/?year=&month= - Monthly totals
- /api/financial/categories/ - Income and expense categories (constants)
"""

from django.utils import timezone
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import LimitMixin, UserScopedMixin
from .models import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    FinancialMovement,
    PaymentMethod,
)
from .serializers import (
    FinancialBalanceSerializer,
    FinancialMovementSerializer,
    FinancialMovementWriteSerializer,
    MonthlySummaryQuerySerializer,
)
from .services import FinanceService


class FinancialBalanceView(UserScopedMixin, APIView):
    """
    GET /api/financial/balance/
    """

    def get(self, request):
        balance = FinanceService(request.user).get_balance()
        return Response(FinancialBalanceSerializer(balance).data)


class FinancialMovementListCreateView(UserScopedMixin, LimitMixin, generics.ListAPIView):
    """
    GET /api/financial/movements/?limit=10
    POST /api/financial/movements/
    """
    queryset = FinancialMovement.objects.all()
    serializer_class = FinancialMovementSerializer

    filterset_fields = ['movement_type', 'category', 'payment_method']

    def get_queryset(self):
        return super().get_queryset().order_by('-movement_date', '-created_at')

    def post(self, request):
        serializer = FinancialMovementWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        movement = FinanceService(request.user).record_movement(**serializer.validated_data)
        return Response(FinancialMovementSerializer(movement).data, status=status.HTTP_201_CREATED)


class FinancialMovementDetailView(UserScopedMixin, generics.RetrieveDestroyAPIView):
    """
    GET/PUT/PATCH/DELETE /api/financial/movements/{id}/
    """
    queryset = FinancialMovement.objects.all()
    serializer_class = FinancialMovementSerializer
    not_found_message = 'Movimentação financeira não encontrada'

    def update(self, request, partial):
        movement = self.get_object()
        serializer = FinancialMovementWriteSerializer(movement, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        movement = FinanceService(request.user).update_movement(movement, **serializer.validated_data)
        return Response(FinancialMovementSerializer(movement).data)

    def put(self, request, *args, **kwargs):
        return self.update(request, partial=False)

    def patch(self, request, *args, **kwargs):
        return self.update(request, partial=True)

    def perform_destroy(self, instance):
        FinanceService(self.request.user).delete_movement(instance)


class MonthlySummaryView(UserScopedMixin, APIView):
    """
    GET /api/financial/summary/?year=2024&month=5

    Defaults to the current month.
    """

    def get(self, request):
        query = MonthlySummaryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        today = timezone.localdate()
        year = query.validated_data.get('year', today.year)
        month = query.validated_data.get('month', today.month)

        return Response(FinanceService(request.user).monthly_summary(year, month))


class FinancialCategoryListView(APIView):
    """
    GET /api/financial/categories/

    Category and payment method constants for the movement form.
    """

    def get(self, request):
        return Response({
            'income': INCOME_CATEGORIES,
            'expense': EXPENSE_CATEGORIES,
            'payment_methods': [value for value, _ in PaymentMethod.choices],
        })
