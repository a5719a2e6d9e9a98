from decimal import Decimal, InvalidOperation

from tariffs.exceptions import InvalidAmount, UnknownTariff
from tariffs.table import CATEGORIES, TARIFFS, TransactionType


def to_amount(value):
    """
    Normalise a user supplied amount to a positive, finite Decimal.
    """
    if isinstance(value, bool):
        raise InvalidAmount(value)
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmount(value) from None

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount(value)
    return amount


def to_transaction_type(value):
    try:
        return TransactionType(value)
    except ValueError:
        raise UnknownTariff(value) from None


def categories_for(transaction_type):
    return CATEGORIES[to_transaction_type(transaction_type)]


def is_valid_category(transaction_type, category):
    try:
        return category in categories_for(transaction_type)
    except UnknownTariff:
        return False


def get_policy(transaction_type, category):
    kind = to_transaction_type(transaction_type)
    if not isinstance(category, str):
        raise UnknownTariff(kind.value, category)
    try:
        return TARIFFS[(kind, category)]
    except KeyError:
        raise UnknownTariff(kind.value, category) from None


def compute_cost(amount, transaction_type, category):
    """
    Return the fee billed for a transaction.

    Raises InvalidAmount for a non-numeric, non-positive or non-finite amount
    and UnknownTariff when the type/category pair has no tariff.
    """
    amount = to_amount(amount)
    return get_policy(transaction_type, category).price(amount)
