from django.db import models
from django.conf import settings


class Transaction(models.Model):
    """One coin movement caused by an activation or upgrade."""

    TRANSACTION_TYPES = (
        ('ACTIVATION', 'Activation'),
        ('UPGRADE', 'Upgrade'),
        ('ADMIN_FEE', 'Admin Fee'),
        ('REFERRAL_COMMISSION', 'Referral Commission'),
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.DO_NOTHING, db_constraint=False,
        related_name='transactions'
    )
    amount = models.DecimalField(max_digits=20, decimal_places=2, help_text="Negative for debits")
    transaction_type = models.CharField(max_length=20, choices=TRANSACTION_TYPES)
    level = models.PositiveSmallIntegerField(help_text="Account level that was bought")
    generation = models.PositiveSmallIntegerField(null=True, blank=True, help_text="Upline position (1 = direct referrer)")
    source_user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.DO_NOTHING, db_constraint=False,
        null=True, blank=True, related_name='generated_transactions'
    )
    description = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-created_at', '-id')

    def __str__(self):
        return f"{self.user_id} - {self.transaction_type} - {self.amount}"
