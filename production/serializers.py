"""
Serializers for egg collections.
"""

from django.conf import settings
from rest_framework import serializers

from .models import CollectionPeriod, EggCollection


class EggCollectionSerializer(serializers.ModelSerializer):
    """Read serializer for collections"""
    period_display = serializers.CharField(source='get_period_display', read_only=True)

    class Meta:
        model = EggCollection
        fields = [
            'id', 'collection_date', 'period', 'period_display', 'egg_count',
            'posture_percentage', 'notes', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class EggCollectionWriteSerializer(serializers.Serializer):
    """
    Input for creating (all fields) or updating (partial=True) a collection.

    posture_percentage is always derived, never accepted.
    """
    collection_date = serializers.DateField()
    period = serializers.ChoiceField(choices=CollectionPeriod.choices)
    egg_count = serializers.IntegerField(min_value=0, max_value=settings.MAX_EGG_COUNT)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def validate_notes(self, value):
        return value or ''


class DaySummarySerializer(serializers.Serializer):
    """Totals block of the today endpoint"""
    date = serializers.CharField()
    total = serializers.IntegerField()
    morning = serializers.IntegerField()
    afternoon = serializers.IntegerField()
    posture_percentage = serializers.DecimalField(max_digits=None, decimal_places=2)
