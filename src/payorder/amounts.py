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

"""Conversion between major currency amounts and integer minor units.

Every amount that leaves this package is an integer number of minor units
(for example cents). Conversions round with ROUND_HALF_EVEN in both
directions so that `to_major_units(to_minor_units(x)) == x` holds for any
amount with at most two decimal places.
"""

import decimal
from decimal import Decimal
from typing import Iterable, Union

from payorder.exceptions import AmountOverflowError

ROUNDING = decimal.ROUND_HALF_EVEN

MINOR_UNIT_EXPONENT = 2

# Largest amount the gateway accepts (signed 64-bit).
MAX_MINOR_UNITS = 2**63 - 1

_CENT = Decimal(1).scaleb(-MINOR_UNIT_EXPONENT)

Number = Union[Decimal, int, str]


def to_decimal(value: Number) -> Decimal:
  """Builds a Decimal without going through binary floating point."""
  if isinstance(value, Decimal):
    return value
  return Decimal(str(value))


def round_money(value: Number) -> Decimal:
  """Rounds a major-unit amount to the precision of the minor unit."""
  return to_decimal(value).quantize(_CENT, rounding=ROUNDING)


def to_minor_units(amount: Number) -> int:
  """Converts a major-unit amount (e.g. 123.45) to minor units (12345).

  Raises:
    AmountOverflowError: if the amount is not finite or does not fit the
      gateway's integer representation.
  """
  value = to_decimal(amount)
  if not value.is_finite():
    raise AmountOverflowError(f"Amount {value} is not a finite number")
  try:
    minor = int(
        value.scaleb(MINOR_UNIT_EXPONENT).to_integral_value(rounding=ROUNDING)
    )
  except decimal.InvalidOperation as e:
    raise AmountOverflowError(f"Amount {value} cannot be converted") from e
  if abs(minor) > MAX_MINOR_UNITS:
    raise AmountOverflowError(
        f"Amount {value} exceeds the largest supported amount"
    )
  return minor


def to_major_units(minor_amount: int) -> Decimal:
  """Converts minor units (12345) back to a major-unit Decimal (123.45)."""
  if abs(minor_amount) > MAX_MINOR_UNITS:
    raise AmountOverflowError(
        f"Amount {minor_amount} exceeds the largest supported amount"
    )
  return Decimal(minor_amount).scaleb(-MINOR_UNIT_EXPONENT)


def percent_to_basis_points(percentage: Number) -> int:
  """Converts a percentage (25, 12.5) to basis points (2500, 1250)."""
  basis_points = to_decimal(percentage) * 100
  return int(basis_points.to_integral_value(rounding=ROUNDING))


def sum_minor_units(values: Iterable[int]) -> int:
  total = sum(values)
  if abs(total) > MAX_MINOR_UNITS:
    raise AmountOverflowError(
        "Total amount exceeds the largest supported amount"
    )
  return total
