from django.utils import timezone
from rest_framework import serializers

from tariffs.cost import is_valid_category
from tariffs.serializers import CostFieldsMixin
from transactions.models import Transaction
from utils import time_ago


class TransactionSerializer(CostFieldsMixin, serializers.ModelSerializer):
    time_ago = serializers.SerializerMethodField()

    class Meta:
        model = Transaction
        fields = ['id', 'amount', 'transaction_type', 'category', 'cost', 'date', 'time_ago']
        read_only_fields = ['cost', 'date']

    def get_time_ago(self, obj):
        return time_ago(obj.date)

    def validate(self, attrs):
        # PATCH only sends the changed fields; price the merged record
        merged = {
            name: attrs.get(name, getattr(self.instance, name, None))
            for name in ('amount', 'transaction_type', 'category')
        }
        if not is_valid_category(merged['transaction_type'], merged['category']):
            raise serializers.ValidationError({
                'category': f"'{merged['category']}' is not a valid {merged['transaction_type']} category"
            })

        attrs['cost'] = self.price(**merged)
        return attrs

    def update(self, instance, validated_data):
        validated_data['date'] = timezone.now()
        return super().update(instance, validated_data)
