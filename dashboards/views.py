"""
Dashboard API Views

Provides the REST endpoint behind the farm owner's home screen.
"""

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAuthenticated

from .serializers import DashboardStatsSerializer
from .services import FarmerDashboardService


class FarmerDashboardStatsView(APIView):
    """
    Farmer Dashboard Stats

    GET /api/dashboard/stats/

    Returns today's collection, stock, cash and farm settings in one call.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        service = FarmerDashboardService(request.user)
        data = DashboardStatsSerializer(service.get_stats()).data
        return Response(data, status=status.HTTP_200_OK)
