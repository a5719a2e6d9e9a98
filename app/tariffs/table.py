from decimal import Decimal

from django.db import models

from tariffs.policies import FlatFee, Percentage, SteppedTable


class TransactionType(models.TextChoices):
    RECEIVING = 'Receiving', 'Receiving'
    SENDING = 'Sending', 'Sending'
    WITHDRAWAL = 'Withdrawal', 'Withdrawal'


CATEGORIES = {
    TransactionType.RECEIVING: (
        'Till customer payment',
        'Paybill(Mgao Tariff)',
        'Paybill (Bouquet tariff)',
    ),
    TransactionType.SENDING: (
        'Till to till payment',
        'Till to number payment',
        'B2C(Registered users)',
        'B2C(Unregistered users)',
    ),
    TransactionType.WITHDRAWAL: (
        'Normal',
        'B2C charges',
    ),
}

# All amounts in KES. (up_to, fee), last band open-ended.
CUSTOMER_TRANSFER = SteppedTable([
    (100, 0),
    (500, 7),
    (1000, 13),
    (1500, 23),
    (2500, 33),
    (3500, 53),
    (5000, 57),
    (7500, 78),
    (10000, 90),
    (15000, 100),
    (20000, 105),
    (None, 108),
])

UNREGISTERED_TRANSFER = SteppedTable([
    (500, 45),
    (1000, 49),
    (1500, 59),
    (2500, 74),
    (3500, 112),
    (5000, 135),
    (7500, 166),
    (10000, 205),
    (15000, 265),
    (20000, 288),
    (None, 309),
])

TILL_TO_NUMBER = SteppedTable([
    (100, 0),
    (500, 5),
    (1000, 10),
    (1500, 15),
    (2500, 20),
    (3500, 25),
    (5000, 30),
    (7500, 40),
    (10000, 45),
    (15000, 50),
    (20000, 55),
    (None, 60),
])

# Business share of the customer transfer charge
MGAO_SHARE = SteppedTable([
    (100, 0),
    (500, 3),
    (1000, 6),
    (1500, 11),
    (2500, 16),
    (3500, 26),
    (5000, 28),
    (7500, 39),
    (10000, 45),
    (15000, 50),
    (20000, 52),
    (None, 54),
])

AGENT_WITHDRAWAL = SteppedTable([
    (100, 11),
    (2500, 29),
    (3500, 52),
    (5000, 69),
    (7500, 87),
    (10000, 115),
    (15000, 167),
    (20000, 185),
    (35000, 197),
    (50000, 278),
    (None, 309),
])

B2C_WITHDRAWAL = SteppedTable([
    (100, 10),
    (2500, 27),
    (3500, 49),
    (5000, 66),
    (7500, 82),
    (10000, 110),
    (15000, 159),
    (20000, 176),
    (35000, 187),
    (50000, 275),
    (None, 300),
])

TARIFFS = {
    (TransactionType.RECEIVING, 'Till customer payment'): Percentage(Decimal('0.0055'), cap=Decimal('200')),
    (TransactionType.RECEIVING, 'Paybill(Mgao Tariff)'): MGAO_SHARE,
    # Bouquet: the business pays the whole customer charge
    (TransactionType.RECEIVING, 'Paybill (Bouquet tariff)'): CUSTOMER_TRANSFER,
    (TransactionType.SENDING, 'Till to till payment'): FlatFee(Decimal('0')),
    (TransactionType.SENDING, 'Till to number payment'): TILL_TO_NUMBER,
    (TransactionType.SENDING, 'B2C(Registered users)'): CUSTOMER_TRANSFER,
    (TransactionType.SENDING, 'B2C(Unregistered users)'): UNREGISTERED_TRANSFER,
    (TransactionType.WITHDRAWAL, 'Normal'): AGENT_WITHDRAWAL,
    (TransactionType.WITHDRAWAL, 'B2C charges'): B2C_WITHDRAWAL,
}


def _check_totality():
    expected = {(kind, category) for kind, categories in CATEGORIES.items() for category in categories}
    if set(CATEGORIES) != set(TransactionType):
        raise ValueError("Every transaction type needs a category list")
    if expected != set(TARIFFS):
        missing = expected - set(TARIFFS)
        extra = set(TARIFFS) - expected
        raise ValueError(f"Tariff table out of sync with categories (missing={missing}, extra={extra})")


_check_totality()
