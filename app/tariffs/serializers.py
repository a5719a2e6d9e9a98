from rest_framework import serializers

from tariffs.cost import compute_cost, to_amount
from tariffs.exceptions import InvalidAmount, UnknownTariff
from tariffs.table import TransactionType


class CostFieldsMixin:
    """
    Validation shared by every serializer that prices a transaction.
    """

    def validate_amount(self, value):
        try:
            return to_amount(value)
        except InvalidAmount as e:
            raise serializers.ValidationError(str(e))

    def price(self, amount, transaction_type, category):
        try:
            return compute_cost(amount, transaction_type, category)
        except InvalidAmount as e:
            raise serializers.ValidationError({'amount': str(e)})
        except UnknownTariff as e:
            raise serializers.ValidationError({'category': str(e)})


class QuoteSerializer(CostFieldsMixin, serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    transaction_type = serializers.ChoiceField(choices=TransactionType.choices)
    category = serializers.CharField(max_length=50)

    def validate(self, attrs):
        attrs['cost'] = self.price(attrs['amount'], attrs['transaction_type'], attrs['category'])
        return attrs

    def to_representation(self, instance):
        return {
            'amount': str(instance['amount']),
            'transaction_type': instance['transaction_type'],
            'category': instance['category'],
            'cost': str(instance['cost']),
        }
