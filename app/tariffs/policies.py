"""
Pricing policies used by the tariff table.

Every policy exposes ``price(amount)`` taking a positive ``Decimal`` and
returning a non-negative ``Decimal`` rounded to cents.

Stepped tables use lower-exclusive, upper-inclusive bands: a band with
``up_to=500`` that follows a band ending at ``100`` covers ``100 < amount <= 500``.
The first band starts just above zero and the last band is open-ended.
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal('0.01')


def to_cents(value):
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class FlatFee:
    fee: Decimal

    def __post_init__(self):
        if Decimal(self.fee) < 0:
            raise ValueError("Flat fee cannot be negative")

    def price(self, amount):
        return to_cents(self.fee)


@dataclass(frozen=True)
class Percentage:
    rate: Decimal
    cap: Decimal = None
    minimum: Decimal = Decimal('0')

    def __post_init__(self):
        if Decimal(self.rate) < 0 or Decimal(self.minimum) < 0:
            raise ValueError("Rate and minimum cannot be negative")
        if self.cap is not None and Decimal(self.cap) < Decimal(self.minimum):
            raise ValueError("Cap cannot be lower than the minimum fee")

    def price(self, amount):
        fee = amount * Decimal(self.rate)
        if self.cap is not None:
            fee = min(fee, Decimal(self.cap))
        return to_cents(max(fee, Decimal(self.minimum)))


@dataclass(frozen=True)
class Band:
    up_to: Decimal
    fee: Decimal


class SteppedTable:
    def __init__(self, bands):
        self.bands = tuple(Band(None if up_to is None else Decimal(up_to), Decimal(fee)) for up_to, fee in bands)
        self._check()

    def _check(self):
        if not self.bands:
            raise ValueError("A stepped table needs at least one band")

        previous = Decimal('0')
        for index, band in enumerate(self.bands):
            last = index == len(self.bands) - 1
            if band.fee < 0:
                raise ValueError("Band fee cannot be negative")
            if band.up_to is None:
                if not last:
                    raise ValueError("Only the last band can be open-ended")
                continue
            if band.up_to <= previous:
                raise ValueError("Band upper bounds must be strictly ascending")
            previous = band.up_to

        if self.bands[-1].up_to is not None:
            raise ValueError("The last band must be open-ended")

    def band_for(self, amount):
        for band in self.bands:
            if band.up_to is None or amount <= band.up_to:
                return band
        # _check guarantees an open-ended last band
        raise AssertionError("unreachable")

    def price(self, amount):
        return to_cents(self.band_for(amount).fee)

    def boundaries(self):
        return [band.up_to for band in self.bands if band.up_to is not None]

    def __repr__(self):
        return f"SteppedTable({len(self.bands)} bands)"
