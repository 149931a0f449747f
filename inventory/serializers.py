"""
Serializers for egg stock.
"""

from django.conf import settings
from rest_framework import serializers

from finances.models import PaymentMethod
from .models import StockBalance, StockMovement, StockMovementType


class StockBalanceSerializer(serializers.ModelSerializer):
    class Meta:
        model = StockBalance
        fields = ['egg_count', 'updated_at']
        read_only_fields = fields


class StockMovementSerializer(serializers.ModelSerializer):
    """Read serializer for the stock history"""
    movement_type_display = serializers.CharField(source='get_movement_type_display', read_only=True)
    financial_movement_amount = serializers.DecimalField(
        source='financial_movement.amount',
        max_digits=10,
        decimal_places=2,
        read_only=True,
        allow_null=True
    )

    class Meta:
        model = StockMovement
        fields = [
            'id', 'movement_type', 'movement_type_display', 'egg_count',
            'movement_date', 'financial_movement', 'financial_movement_amount',
            'source_type', 'source_id', 'notes', 'created_at'
        ]
        read_only_fields = fields


class StockMovementCreateSerializer(serializers.Serializer):
    """
    Input for a manual stock movement.

    create_financial_record only applies to 'out' movements: the eggs are
    sold and an income entry is booked at the farm's egg price.
    """
    movement_type = serializers.ChoiceField(choices=StockMovementType.choices)
    egg_count = serializers.IntegerField(min_value=0, max_value=settings.MAX_EGG_COUNT)
    movement_date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    create_financial_record = serializers.BooleanField(required=False, default=False)
    payment_method = serializers.ChoiceField(
        choices=PaymentMethod.choices,
        required=False,
        allow_blank=True,
        default=''
    )
    contact = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def validate(self, attrs):
        attrs['notes'] = attrs.get('notes') or ''
        attrs['contact'] = attrs.get('contact') or ''
        return attrs
