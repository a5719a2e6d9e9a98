"""
Per-user transaction storage.

Every write goes through TransactionSerializer, so the cost is recomputed
from the tariff table whenever a transaction is created or edited. Lookups
are always scoped to the owning user; another user's transaction behaves as
if it did not exist.
"""
import logging

from transactions.models import Transaction
from transactions.serializers import TransactionSerializer

logger = logging.getLogger(__name__)


def list_transactions(user, search=None):
    transactions = Transaction.objects.filter(user=user)
    if search and search.strip():
        transactions = transactions.filter(category__icontains=search.strip())
    return transactions.order_by('-date', '-id')


def get_transaction(user, pk):
    return Transaction.objects.get(pk=pk, user=user)


def create_transaction(user, fields):
    serializer = TransactionSerializer(data=fields)
    serializer.is_valid(raise_exception=True)
    transaction = serializer.save(user=user)
    logger.info("User %s added transaction %s (cost %s)", user.id, transaction.id, transaction.cost)
    return transaction.id


def update_transaction(user, pk, fields, partial=True):
    transaction = get_transaction(user, pk)
    serializer = TransactionSerializer(transaction, data=fields, partial=partial)
    serializer.is_valid(raise_exception=True)
    transaction = serializer.save()
    logger.info("User %s updated transaction %s (cost %s)", user.id, transaction.id, transaction.cost)
    return transaction


def delete_transaction(user, pk):
    transaction = get_transaction(user, pk)
    transaction.delete()
    logger.info("User %s deleted transaction %s", user.id, pk)
