"""
Money amounts in reais.

Prices and cash-book amounts are stored as NUMERIC(10, 2). Input may carry
any number of decimals (``'12.345'``, JSON floats such as ``0.30000000000000004``)
and is rounded half-up to cents, the way the database column would.
"""

from decimal import Decimal, ROUND_HALF_UP

from rest_framework import serializers

CENTS = Decimal('0.01')
MAX_AMOUNT = Decimal('99999999.99')


def to_cents(value) -> Decimal:
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def amount_field(error_message, **kwargs):
    """
    DecimalField without digit limits; pair it with ``validate_money``.
    """
    return serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        error_messages={
            'invalid': error_message,
            'required': error_message,
            'null': error_message,
        },
        **kwargs
    )


def validate_money(value, error_message):
    """
    Round ``value`` to cents and check it fits a non-negative NUMERIC(10, 2).

    Raises ValidationError(error_message) otherwise.
    """
    # Range check before quantize: huge exponents overflow the decimal context
    if value < 0 or value > MAX_AMOUNT:
        raise serializers.ValidationError(error_message)

    rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    if rounded > MAX_AMOUNT:
        raise serializers.ValidationError(error_message)
    return rounded.copy_abs()
