"""
Serializers for the farm's cash book.
"""

from rest_framework import serializers

from core.money import amount_field, validate_money

from .models import FinancialBalance, FinancialMovement, PaymentMethod

AMOUNT_ERROR = 'Valor deve ser positivo'


class FinancialBalanceSerializer(serializers.ModelSerializer):
    class Meta:
        model = FinancialBalance
        fields = ['balance', 'updated_at']
        read_only_fields = fields


class FinancialMovementSerializer(serializers.ModelSerializer):
    """Read serializer for income/expense entries"""
    movement_type_display = serializers.CharField(source='get_movement_type_display', read_only=True)

    class Meta:
        model = FinancialMovement
        fields = [
            'id', 'movement_type', 'movement_type_display', 'category', 'amount',
            'movement_date', 'payment_method', 'contact', 'notes',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class FinancialMovementWriteSerializer(serializers.ModelSerializer):
    """
    Input for creating or editing an entry.

    amount accepts a number or a numeric string; it is rounded to cents and
    must not be negative.
    """
    amount = amount_field(AMOUNT_ERROR)
    payment_method = serializers.ChoiceField(
        choices=PaymentMethod.choices,
        required=False,
        allow_blank=True
    )
    contact = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=150)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = FinancialMovement
        fields = [
            'movement_type', 'category', 'amount', 'movement_date',
            'payment_method', 'contact', 'notes'
        ]

    def validate_amount(self, value):
        return validate_money(value, AMOUNT_ERROR)

    def validate_contact(self, value):
        return value or ''

    def validate_notes(self, value):
        return value or ''


class MonthlySummaryQuerySerializer(serializers.Serializer):
    """?year=&month= for the summary endpoint"""
    year = serializers.IntegerField(min_value=1900, max_value=9999, required=False)
    month = serializers.IntegerField(min_value=1, max_value=12, required=False)
