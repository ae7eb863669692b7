#   Copyright 2026 UCP Authors
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.

"""Tests for minor-unit amount conversion."""

from decimal import Decimal

from absl.testing import absltest
from absl.testing import parameterized

from payorder import amounts
from payorder.exceptions import AmountOverflowError


class AmountsTest(parameterized.TestCase):

  @parameterized.parameters("0", "0.01", "1.5", "19.99", "-42.10", "1000000.00")
  def test_round_trip(self, value: str) -> None:
    """Amounts with at most two decimals survive a round trip."""
    amount = Decimal(value)
    self.assertEqual(
        amounts.to_major_units(amounts.to_minor_units(amount)), amount
    )

  @parameterized.named_parameters(
      ("decimal", Decimal("123.45"), 12345),
      ("string", "19.99", 1999),
      ("integer", 5, 500),
      ("negative", Decimal("-1.25"), -125),
      ("half_down_to_even", Decimal("0.005"), 0),
      ("half_up_to_even", Decimal("0.015"), 2),
      ("half_stays_even", Decimal("0.025"), 2),
  )
  def test_to_minor_units(self, amount, expected: int) -> None:
    """Major amounts convert to minor units with half-even rounding."""
    self.assertEqual(amounts.to_minor_units(amount), expected)

  def test_to_major_units(self) -> None:
    """Minor units convert back to a two-decimal Decimal."""
    self.assertEqual(amounts.to_major_units(12345), Decimal("123.45"))
    self.assertEqual(str(amounts.to_major_units(100)), "1.00")

  def test_largest_amount_is_accepted(self) -> None:
    """The largest signed 64-bit amount is still representable."""
    self.assertEqual(
        amounts.to_minor_units(Decimal("92233720368547758.07")),
        amounts.MAX_MINOR_UNITS,
    )

  @parameterized.parameters(
      Decimal("92233720368547758.08"),
      Decimal("1E+30"),
      Decimal("Infinity"),
      Decimal("NaN"),
  )
  def test_to_minor_units_overflow(self, amount: Decimal) -> None:
    """Amounts beyond the integer representation are rejected."""
    with self.assertRaises(AmountOverflowError):
      amounts.to_minor_units(amount)

  def test_to_major_units_overflow(self) -> None:
    with self.assertRaises(AmountOverflowError):
      amounts.to_major_units(2**63)

  @parameterized.parameters(
      (Decimal(25), 2500), (Decimal("12.5"), 1250), (0, 0), ("6", 600)
  )
  def test_percent_to_basis_points(self, percentage, expected: int) -> None:
    self.assertEqual(amounts.percent_to_basis_points(percentage), expected)

  def test_round_money(self) -> None:
    self.assertEqual(amounts.round_money(Decimal("19.998")), Decimal("20.00"))
    self.assertEqual(amounts.round_money(Decimal("0.125")), Decimal("0.12"))

  def test_sum_minor_units_overflow(self) -> None:
    with self.assertRaises(AmountOverflowError):
      amounts.sum_minor_units([amounts.MAX_MINOR_UNITS, 1])


if __name__ == "__main__":
  absltest.main()
