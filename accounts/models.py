from decimal import Decimal
import uuid

from django.contrib.auth.models import AbstractUser
from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models


class User(AbstractUser):
    """
    Farm owner account.

    Each user is one tenant: the farm settings (name, hen count, egg price)
    live on the account and every collection, movement and balance row is
    owned by exactly one user.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class SubscriptionStatus(models.TextChoices):
        FREE = 'free', 'Gratuito'
        PREMIUM = 'premium', 'Premium'

    name = models.CharField(
        max_length=150,
        validators=[MinLengthValidator(2)],
        help_text="Owner's display name"
    )

    # Farm settings
    farm_name = models.CharField(
        max_length=150,
        validators=[MinLengthValidator(2)],
        help_text="Name of the farm (granja)"
    )

    hen_count = models.PositiveIntegerField(
        default=0,
        help_text="Current number of laying hens; used for posture percentage"
    )

    egg_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Sale price per dozen eggs"
    )

    subscription_status = models.CharField(
        max_length=20,
        choices=SubscriptionStatus.choices,
        default=SubscriptionStatus.FREE,
        help_text="Subscription tier"
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.get_full_name()} ({self.farm_name})"

    def get_full_name(self):
        """Return the owner's name or username if name is not set."""
        return self.name or self.username
