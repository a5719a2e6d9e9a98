class TariffError(ValueError):
    """Base class for errors raised while pricing a transaction."""


class InvalidAmount(TariffError):
    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Amount must be a positive number, got {amount!r}")


class UnknownTariff(TariffError):
    def __init__(self, transaction_type, category=None):
        self.transaction_type = transaction_type
        self.category = category
        if category is None:
            message = f"Unknown transaction type {transaction_type!r}"
        else:
            message = f"No tariff for category {category!r} of type {transaction_type!r}"
        super().__init__(message)
