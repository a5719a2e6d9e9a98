from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from authentication.models import CustomUser
from tariffs.cost import compute_cost
from tariffs.exceptions import InvalidAmount, UnknownTariff
from tariffs.table import TransactionType


class Transaction(models.Model):
    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='transactions')
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    transaction_type = models.CharField(max_length=10, choices=TransactionType.choices)
    category = models.CharField(max_length=50)
    # derived from amount, transaction_type and category on every save
    cost = models.DecimalField(max_digits=12, decimal_places=2, editable=False)
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date', '-id']

    def clean(self):
        # fields that failed their own validation are left to report that error
        if self.amount is None or not self.transaction_type:
            return
        try:
            self.cost = compute_cost(self.amount, self.transaction_type, self.category)
        except InvalidAmount as e:
            raise ValidationError({'amount': str(e)})
        except UnknownTariff as e:
            raise ValidationError({'category': str(e)})

    def save(self, *args, **kwargs):
        self.cost = compute_cost(self.amount, self.transaction_type, self.category)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None:
            kwargs['update_fields'] = set(update_fields) | {'cost'}
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.transaction_type} - {self.amount} ({self.category}) on {self.date:%Y-%m-%d}"
