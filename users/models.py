from decimal import Decimal

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    STATUS_INACTIVE = 'inactive'
    STATUS_ACTIVE = 'active'
    STATUS_CHOICES = (
        (STATUS_INACTIVE, 'Inactive'),
        (STATUS_ACTIVE, 'Active'),
    )

    email = models.EmailField(unique=True)

    # Referral program fields
    coins = models.DecimalField(max_digits=20, decimal_places=2, default=Decimal('0.00'))
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_INACTIVE)
    account_level = models.PositiveSmallIntegerField(default=0, help_text="0 = not activated, 1-10 otherwise")
    # No database constraint: a referrer id may point at a record that no longer exists
    referrer = models.ForeignKey(
        'self', on_delete=models.DO_NOTHING, db_constraint=False,
        null=True, blank=True, related_name='referrals'
    )

    # Profile fields
    name = models.CharField(max_length=150, blank=True, default='')
    bio = models.TextField(blank=True, default='')
    facebook_link = models.CharField(max_length=255, blank=True, default='')
    linkedin_link = models.CharField(max_length=255, blank=True, default='')
    profile_image_url = models.CharField(max_length=500, blank=True, default='')
    cover_image_url = models.CharField(max_length=500, blank=True, default='')

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    class Meta:
        constraints = [
            models.CheckConstraint(condition=models.Q(coins__gte=0), name='user_coins_non_negative'),
            models.CheckConstraint(
                condition=~models.Q(status='active') | models.Q(account_level__gte=1),
                name='user_active_requires_level',
            ),
        ]

    def __str__(self):
        return self.email

    @property
    def is_level_active(self):
        return self.status == self.STATUS_ACTIVE
