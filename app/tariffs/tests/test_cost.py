from decimal import Decimal

from django.test import SimpleTestCase

from tariffs.cost import categories_for, compute_cost, get_policy, is_valid_category, to_amount
from tariffs.exceptions import InvalidAmount, TariffError, UnknownTariff
from tariffs.policies import FlatFee, Percentage, SteppedTable
from tariffs.table import AGENT_WITHDRAWAL, CATEGORIES, TARIFFS, TransactionType

ALL_PAIRS = [(kind, category) for kind, categories in CATEGORIES.items() for category in categories]
SAMPLE_AMOUNTS = ['0.01', '1', '99.99', '100', '100.01', '500', '1000', '2500', '5000', '20000', '36363.64', '50000', '250000']


class TestComputeCost(SimpleTestCase):
    def test_examples(self):
        self.assertEqual(compute_cost(1000, 'Receiving', 'Till customer payment'), Decimal('5.50'))
        self.assertEqual(compute_cost(50000, 'Sending', 'B2C(Registered users)'), Decimal('108.00'))
        self.assertEqual(compute_cost(100, 'Sending', 'B2C(Registered users)'), Decimal('0.00'))
        self.assertEqual(compute_cost(200, 'Withdrawal', 'Normal'), Decimal('29.00'))

    def test_unknown_category(self):
        with self.assertRaises(UnknownTariff):
            compute_cost(200, 'Withdrawal', 'NonexistentCategory')

    def test_category_of_another_type(self):
        with self.assertRaises(UnknownTariff):
            compute_cost(200, 'Withdrawal', 'Till to till payment')

    def test_unknown_type(self):
        with self.assertRaises(UnknownTariff):
            compute_cost(200, 'Deposit', 'Normal')

    def test_non_string_category(self):
        with self.assertRaises(UnknownTariff):
            compute_cost(200, 'Withdrawal', ['Normal'])

    def test_negative_amount(self):
        with self.assertRaises(InvalidAmount):
            compute_cost(-5, 'Sending', 'Till to till payment')

    def test_invalid_amounts(self):
        for amount in [0, '0', '0.00', -0.01, 'abc', '', None, float('nan'), float('inf'), '-inf', 'NaN', True]:
            with self.subTest(amount=amount):
                with self.assertRaises(InvalidAmount):
                    compute_cost(amount, 'Sending', 'B2C(Registered users)')

    def test_amount_checked_before_tariff(self):
        with self.assertRaises(InvalidAmount):
            compute_cost(-5, 'Withdrawal', 'NonexistentCategory')

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(InvalidAmount, TariffError))
        self.assertTrue(issubclass(UnknownTariff, ValueError))

    def test_accepts_numeric_types(self):
        expected = Decimal('13.00')
        for amount in [750, 750.0, '750', ' 750 ', Decimal('750')]:
            with self.subTest(amount=amount):
                self.assertEqual(compute_cost(amount, 'Sending', 'B2C(Registered users)'), expected)

    def test_accepts_enum_member(self):
        self.assertEqual(
            compute_cost(200, TransactionType.WITHDRAWAL, 'Normal'),
            compute_cost(200, 'Withdrawal', 'Normal'),
        )

    def test_deterministic_and_non_negative(self):
        for kind, category in ALL_PAIRS:
            for amount in SAMPLE_AMOUNTS:
                with self.subTest(kind=kind, category=category, amount=amount):
                    first = compute_cost(amount, kind, category)
                    self.assertEqual(first, compute_cost(amount, kind, category))
                    self.assertGreaterEqual(first, 0)
                    self.assertEqual(first, first.quantize(Decimal('0.01')))

    def test_monotonic_in_amount(self):
        amounts = [Decimal(amount) for amount in SAMPLE_AMOUNTS]
        for kind, category in ALL_PAIRS:
            costs = [compute_cost(amount, kind, category) for amount in amounts]
            with self.subTest(kind=kind, category=category):
                self.assertEqual(costs, sorted(costs))

    def test_higher_band_costs_more(self):
        self.assertGreater(
            compute_cost(50000, 'Sending', 'B2C(Registered users)'),
            compute_cost(100, 'Sending', 'B2C(Registered users)'),
        )


class TestBandBoundaries(SimpleTestCase):
    """
    Bands are lower-exclusive and upper-inclusive.
    """

    def test_every_boundary_of_every_stepped_table(self):
        for (kind, category), policy in TARIFFS.items():
            if not isinstance(policy, SteppedTable):
                continue
            bands = policy.bands
            for index, band in enumerate(bands[:-1]):
                following = bands[index + 1]
                with self.subTest(kind=kind, category=category, boundary=band.up_to):
                    self.assertEqual(compute_cost(band.up_to, kind, category), band.fee)
                    self.assertEqual(compute_cost(band.up_to + Decimal('0.01'), kind, category), following.fee)
                    self.assertEqual(compute_cost(band.up_to - Decimal('0.01'), kind, category), band.fee)

    def test_agent_withdrawal_boundaries(self):
        expected = [
            ('1', '11.00'),
            ('100', '11.00'),
            ('100.01', '29.00'),
            ('2500', '29.00'),
            ('2501', '52.00'),
            ('3500', '52.00'),
            ('3501', '69.00'),
            ('50000', '278.00'),
            ('50001', '309.00'),
            ('1000000', '309.00'),
        ]
        for amount, cost in expected:
            with self.subTest(amount=amount):
                self.assertEqual(compute_cost(amount, 'Withdrawal', 'Normal'), Decimal(cost))

    def test_smallest_amount_lands_in_first_band(self):
        self.assertEqual(AGENT_WITHDRAWAL.band_for(Decimal('0.01')).fee, Decimal('11'))

    def test_unregistered_first_band(self):
        self.assertEqual(compute_cost(50, 'Sending', 'B2C(Unregistered users)'), Decimal('45.00'))
        self.assertEqual(compute_cost(500, 'Sending', 'B2C(Unregistered users)'), Decimal('45.00'))
        self.assertEqual(compute_cost('500.01', 'Sending', 'B2C(Unregistered users)'), Decimal('49.00'))


class TestPolicies(SimpleTestCase):
    def test_till_customer_payment_percentage(self):
        self.assertEqual(compute_cost(100, 'Receiving', 'Till customer payment'), Decimal('0.55'))
        # 0.0055 * 1.50 = 0.00825
        self.assertEqual(compute_cost('1.50', 'Receiving', 'Till customer payment'), Decimal('0.01'))

    def test_till_customer_payment_cap(self):
        self.assertEqual(compute_cost('36363.63', 'Receiving', 'Till customer payment'), Decimal('200.00'))
        self.assertEqual(compute_cost(36000, 'Receiving', 'Till customer payment'), Decimal('198.00'))
        self.assertEqual(compute_cost(100000, 'Receiving', 'Till customer payment'), Decimal('200.00'))

    def test_till_to_till_is_flat(self):
        for amount in ['1', '999', '250000']:
            with self.subTest(amount=amount):
                self.assertEqual(compute_cost(amount, 'Sending', 'Till to till payment'), Decimal('0.00'))

    def test_percentage_minimum(self):
        policy = Percentage(Decimal('0.01'), cap=Decimal('50'), minimum=Decimal('5'))
        self.assertEqual(policy.price(Decimal('10')), Decimal('5.00'))
        self.assertEqual(policy.price(Decimal('1000')), Decimal('10.00'))
        self.assertEqual(policy.price(Decimal('100000')), Decimal('50.00'))

    def test_percentage_rejects_cap_below_minimum(self):
        with self.assertRaises(ValueError):
            Percentage(Decimal('0.01'), cap=Decimal('1'), minimum=Decimal('5'))

    def test_flat_fee_rejects_negative(self):
        with self.assertRaises(ValueError):
            FlatFee(Decimal('-1'))

    def test_stepped_table_rejects_overlapping_bands(self):
        with self.assertRaises(ValueError):
            SteppedTable([(500, 5), (100, 1), (None, 10)])

    def test_stepped_table_rejects_duplicate_bounds(self):
        with self.assertRaises(ValueError):
            SteppedTable([(100, 5), (100, 6), (None, 10)])

    def test_stepped_table_needs_open_last_band(self):
        with self.assertRaises(ValueError):
            SteppedTable([(100, 5), (500, 6)])

    def test_stepped_table_only_last_band_open(self):
        with self.assertRaises(ValueError):
            SteppedTable([(None, 5), (500, 6)])

    def test_stepped_table_rejects_negative_fee(self):
        with self.assertRaises(ValueError):
            SteppedTable([(100, -1), (None, 6)])

    def test_stepped_table_boundaries(self):
        table = SteppedTable([(100, 1), (500, 2), (None, 3)])
        self.assertEqual(table.boundaries(), [Decimal('100'), Decimal('500')])


class TestTariffTable(SimpleTestCase):
    def test_table_is_total(self):
        self.assertEqual(set(TARIFFS), set(ALL_PAIRS))
        for kind, category in ALL_PAIRS:
            with self.subTest(kind=kind, category=category):
                self.assertIs(get_policy(kind.value, category), TARIFFS[(kind, category)])

    def test_categories_for(self):
        self.assertEqual(
            categories_for('Receiving'),
            ('Till customer payment', 'Paybill(Mgao Tariff)', 'Paybill (Bouquet tariff)'),
        )
        self.assertEqual(categories_for(TransactionType.WITHDRAWAL), ('Normal', 'B2C charges'))
        with self.assertRaises(UnknownTariff):
            categories_for('Deposit')

    def test_is_valid_category(self):
        self.assertTrue(is_valid_category('Sending', 'Till to number payment'))
        self.assertFalse(is_valid_category('Receiving', 'Till to number payment'))
        self.assertFalse(is_valid_category('Deposit', 'Normal'))
        self.assertFalse(is_valid_category(None, None))

    def test_to_amount(self):
        self.assertEqual(to_amount('12.50'), Decimal('12.50'))
        with self.assertRaises(InvalidAmount):
            to_amount('12,50')
