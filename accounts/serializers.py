from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from core.money import amount_field, validate_money

User = get_user_model()

EGG_PRICE_ERROR = 'Preço dos ovos deve ser positivo'


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Serializer for farm owner registration.
    Validates the input only; the account is created by FarmRegistrationService.
    """
    username = serializers.CharField(
        min_length=3,
        max_length=150,
        error_messages={'min_length': 'Nome de usuário deve ter pelo menos 3 caracteres'}
    )
    password = serializers.CharField(
        write_only=True,
        required=True,
        min_length=6,
        validators=[validate_password],
        style={'input_type': 'password'},
        error_messages={'min_length': 'Senha deve ter pelo menos 6 caracteres'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=False,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(
        min_length=2,
        max_length=150,
        error_messages={'min_length': 'Nome deve ter pelo menos 2 caracteres'}
    )
    farm_name = serializers.CharField(
        min_length=2,
        max_length=150,
        error_messages={'min_length': 'Nome da granja deve ter pelo menos 2 caracteres'}
    )
    hen_count = serializers.IntegerField(
        min_value=0,
        required=False,
        default=0,
        error_messages={'min_value': 'Número de galinhas deve ser positivo'}
    )
    egg_price = amount_field(EGG_PRICE_ERROR, required=False)

    class Meta:
        model = User
        fields = (
            'username', 'password', 'password_confirm', 'name', 'farm_name',
            'hen_count', 'egg_price'
        )

    def validate_egg_price(self, value):
        return validate_money(value, EGG_PRICE_ERROR)

    def validate_username(self, value):
        if User.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError('Nome de usuário já existe')
        return value

    def validate(self, attrs):
        """Validate that passwords match when a confirmation is sent."""
        confirm = attrs.pop('password_confirm', None)
        if confirm is not None and attrs['password'] != confirm:
            raise serializers.ValidationError(
                {'password_confirm': 'As senhas não coincidem'}
            )
        return attrs


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for the logged in farm owner.
    Never exposes the password hash.
    """

    class Meta:
        model = User
        fields = (
            'id', 'username', 'name', 'farm_name', 'hen_count', 'egg_price',
            'subscription_status', 'created_at'
        )
        read_only_fields = fields
