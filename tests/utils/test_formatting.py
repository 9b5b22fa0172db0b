import unittest
from datetime import date, datetime
from decimal import Decimal

from invoice_template.exceptions import FormattingError
from invoice_template.models import Address
from invoice_template.utils.formatting import flat_address_text, format_amount, format_date, join_location


class TestFormatAmount(unittest.TestCase):

    def test_two_decimals(self):
        self.assertEqual(format_amount(3), '3.00')
        self.assertEqual(format_amount(2.5), '2.50')
        self.assertEqual(format_amount(Decimal('19.999')), '20.00')
        self.assertEqual(format_amount(-4.25), '-4.25')

    def test_half_way_values_round_away_from_zero(self):
        self.assertEqual(format_amount(1.125), '1.13')
        self.assertEqual(format_amount(-1.125), '-1.13')
        self.assertEqual(format_amount(12.625), '12.63')
        self.assertEqual(format_amount(0.375), '0.38')
        self.assertEqual(format_amount(Decimal('2.345')), '2.35')

    def test_rounding_uses_exact_binary_value(self):
        # 1.005 is stored as 1.00499999999999989...
        self.assertEqual(format_amount(1.005), '1.00')

    def test_rejects_non_numbers(self):
        for value in ('12', None, [], object()):
            with self.assertRaises(FormattingError):
                format_amount(value)

    def test_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            format_amount('abc', 'quantity')


class TestFormatDate(unittest.TestCase):

    def test_day_month_year(self):
        self.assertEqual(format_date(date(2024, 2, 9)), '09.02.2024')
        self.assertEqual(format_date(datetime(2023, 12, 31, 23, 59)), '31.12.2023')

    def test_rejects_strings(self):
        with self.assertRaises(FormattingError):
            format_date('2024-02-09')


class TestAddressText(unittest.TestCase):

    def test_join_location(self):
        self.assertEqual(join_location('8000', 'Zurich'), '8000 Zurich')
        self.assertEqual(join_location(None, 'Zurich'), 'Zurich')
        self.assertEqual(join_location('8000', None), '8000')
        self.assertEqual(join_location(None, None), '')

    def test_flat_address(self):
        address = Address(name='Muster GmbH', attn='ignored', street='Weg 1', post_code='8000', city='Zurich')
        self.assertEqual(flat_address_text(address), 'Muster GmbH, Weg 1, 8000 Zurich')

    def test_flat_address_skips_empty_pieces(self):
        self.assertEqual(flat_address_text(Address(name='Muster GmbH', city='Zurich')), 'Muster GmbH, Zurich')
        self.assertEqual(flat_address_text(Address()), '')
        self.assertEqual(flat_address_text(None), '')

    def test_flat_address_rejects_other_shapes(self):
        with self.assertRaises(FormattingError):
            flat_address_text('Muster GmbH, Zurich')


if __name__ == '__main__':
    unittest.main()
