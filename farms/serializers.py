"""
Serializers for farm settings.
"""

from rest_framework import serializers

from core.money import amount_field, validate_money

from .models import HenCountHistory

EGG_PRICE_ERROR = 'Preço inválido'


class FarmInfoSerializer(serializers.Serializer):
    name = serializers.CharField()
    hen_count = serializers.IntegerField()
    egg_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    subscription_status = serializers.CharField()


class FarmRenameSerializer(serializers.Serializer):
    name = serializers.CharField(
        min_length=2,
        max_length=150,
        error_messages={'min_length': 'Nome da granja deve ter pelo menos 2 caracteres'}
    )


class HenCountHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = HenCountHistory
        fields = ['id', 'hen_count', 'change_date', 'reason', 'created_at']
        read_only_fields = fields


class HenCountUpdateSerializer(serializers.Serializer):
    hen_count = serializers.IntegerField(
        min_value=0,
        error_messages={
            'invalid': 'Número de galinhas inválido',
            'min_value': 'Número de galinhas inválido',
            'required': 'Número de galinhas inválido',
            'null': 'Número de galinhas inválido',
        }
    )
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)


class EggPriceUpdateSerializer(serializers.Serializer):
    """Price per dozen; accepts a number or a numeric string, rounded to cents."""
    egg_price = amount_field(EGG_PRICE_ERROR)

    def validate_egg_price(self, value):
        return validate_money(value, EGG_PRICE_ERROR)
