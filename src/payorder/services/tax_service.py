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

"""Rate-table backed tax, shipping and return pricing.

This module provides `RateTableTaxCalculator`, a default implementation of the
tax, shipping and return-pricing collaborators for deployments that keep their
tax rates in configuration rather than in a commerce platform.

Rates are looked up by the two-letter country of the shipping address (or the
market's country when the order has no address yet) and the line's tax
category, falling back to the country's `default` category.
"""

from decimal import Decimal
import logging
from typing import Iterable, Optional

from payorder import amounts
from payorder.collaborators import get_extended_price
from payorder.collaborators import ReturnLineItemCalculator
from payorder.collaborators import ShippingCalculator
from payorder.collaborators import TaxCalculator
from payorder.context import LineItem
from payorder.context import Market
from payorder.context import OrderAddress
from payorder.context import Shipment
from payorder.context import TaxRate
from payorder.countries import to_two_letter_country_code

logger = logging.getLogger(__name__)

DEFAULT_TAX_CATEGORY = "default"


def calculate_tax(
    price: Decimal, percentage: Decimal, prices_include_tax: bool
) -> Decimal:
  """Returns the tax in (inclusive) or on top of (exclusive) `price`."""
  if not percentage:
    return Decimal(0)
  rate = percentage / 100
  if prices_include_tax:
    return amounts.round_money(price * rate / (1 + rate))
  return amounts.round_money(price * rate)


class RateTableTaxCalculator(
    TaxCalculator, ShippingCalculator, ReturnLineItemCalculator
):
  """Tax, shipping tax and return pricing from a static table of rates."""

  def __init__(self, tax_rates: Iterable[TaxRate]):
    self._rates: dict[tuple[str, str], Decimal] = {}
    for tax_rate in tax_rates:
      country = to_two_letter_country_code(tax_rate.country_code)
      if not country:
        logger.warning("Ignoring tax rate for unknown country %s", tax_rate)
        continue
      self._rates[(country, tax_rate.tax_category)] = tax_rate.percentage

  def lookup_rate(
      self,
      market: Market,
      shipping_address: Optional[OrderAddress],
      tax_category: str,
  ) -> Decimal:
    """Returns the rate in percent, or zero when no rate applies."""
    country_code = None
    if shipping_address and shipping_address.country_code:
      country_code = shipping_address.country_code
    else:
      country_code = market.first_country
    country = to_two_letter_country_code(country_code)
    if not country:
      return Decimal(0)

    rate = self._rates.get((country, tax_category))
    if rate is None:
      rate = self._rates.get((country, DEFAULT_TAX_CATEGORY), Decimal(0))
    return rate

  def get_sales_tax(
      self,
      line_item: LineItem,
      market: Market,
      shipping_address: Optional[OrderAddress],
      extended_price: Decimal,
  ) -> Decimal:
    percentage = self.get_tax_percentage(line_item, market, shipping_address)
    return calculate_tax(extended_price, percentage, market.prices_include_tax)

  def get_tax_percentage(
      self,
      line_item: LineItem,
      market: Market,
      shipping_address: Optional[OrderAddress],
  ) -> Decimal:
    return self.lookup_rate(market, shipping_address, line_item.tax_category)

  def get_shipping_cost(
      self, shipment: Shipment, market: Market, currency: str
  ) -> Decimal:
    del market, currency  # Unused.
    return shipment.shipping_cost

  def get_shipping_tax(
      self, shipment: Shipment, market: Market, currency: str
  ) -> Decimal:
    return calculate_tax(
        self.get_shipping_cost(shipment, market, currency),
        self.get_shipping_tax_percentage(shipment, market),
        market.prices_include_tax,
    )

  def get_shipping_tax_percentage(
      self, shipment: Shipment, market: Market
  ) -> Decimal:
    return self.lookup_rate(
        market, shipment.shipping_address, shipment.shipping_tax_category
    )

  def get_extended_price(self, line_item: LineItem, currency: str) -> Decimal:
    """Pro-rates the line's extended price to the returned quantity."""
    del currency  # Unused.
    if not line_item.quantity:
      return line_item.placed_price * line_item.return_quantity
    return (
        get_extended_price(line_item)
        * line_item.return_quantity
        / line_item.quantity
    )
