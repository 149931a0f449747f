"""
Views for egg collections.

API Endpoints:
- /api/collections/ - List recent collections / record a collection
- /api/collections/today/ - Today's collections with per-period totals
- /api/collections/{id}/ - Retrieve/update/delete a collection

Writes go through CollectionService so stock follows every change.
"""

from django.utils import timezone
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import LimitMixin, UserScopedMixin
from .models import EggCollection
from .serializers import (
    DaySummarySerializer,
    EggCollectionSerializer,
    EggCollectionWriteSerializer,
)
from .services import CollectionService


class EggCollectionListCreateView(UserScopedMixin, LimitMixin, generics.ListAPIView):
    """
    GET /api/collections/?limit=10
    POST /api/collections/
    """
    queryset = EggCollection.objects.all()
    serializer_class = EggCollectionSerializer

    filterset_fields = {
        'collection_date': ['exact', 'gte', 'lte'],
        'period': ['exact'],
    }

    def get_queryset(self):
        return super().get_queryset().order_by('-collection_date', '-period')

    def post(self, request):
        serializer = EggCollectionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        collection = CollectionService(request.user).create_collection(**serializer.validated_data)
        return Response(EggCollectionSerializer(collection).data, status=status.HTTP_201_CREATED)


class TodayCollectionsView(UserScopedMixin, APIView):
    """
    GET /api/collections/today/

    Today's collections plus totals per period.
    """

    def get(self, request):
        today = timezone.localdate()
        result = CollectionService(request.user).day_summary(today)

        return Response({
            'collections': EggCollectionSerializer(result['collections'], many=True).data,
            'summary': DaySummarySerializer(result['summary']).data,
        })


class EggCollectionDetailView(UserScopedMixin, generics.RetrieveAPIView):
    """
    GET/PUT/PATCH/DELETE /api/collections/{id}/

    Changing egg_count books the difference in stock; deleting books the
    eggs back out.
    """
    queryset = EggCollection.objects.all()
    serializer_class = EggCollectionSerializer
    not_found_message = 'Coleta não encontrada'

    def update(self, request, partial):
        collection = self.get_object()
        serializer = EggCollectionWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        collection = CollectionService(request.user).update_collection(
            collection, **serializer.validated_data
        )
        return Response(EggCollectionSerializer(collection).data)

    def put(self, request, *args, **kwargs):
        return self.update(request, partial=False)

    def patch(self, request, *args, **kwargs):
        return self.update(request, partial=True)

    def delete(self, request, *args, **kwargs):
        collection = self.get_object()
        CollectionService(request.user).delete_collection(collection)
        return Response(status=status.HTTP_204_NO_CONTENT)
