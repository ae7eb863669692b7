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

"""Interfaces of the commerce services request assembly depends on.

Tax rates, shipping charges, return pricing, order totals and merchant
configuration are owned by the commerce platform. The request factory only
sees them through these interfaces, which are passed in explicitly.
"""

from abc import ABC
from abc import abstractmethod
from decimal import Decimal
from typing import NamedTuple, Optional

from payorder.context import CheckoutConfiguration
from payorder.context import LineItem
from payorder.context import Market
from payorder.context import OrderAddress
from payorder.context import OrderGroup
from payorder.context import Shipment


class OrderTotals(NamedTuple):
  total: Decimal
  tax_total: Decimal


class TaxCalculator(ABC):
  """Sales tax of order lines."""

  @abstractmethod
  def get_sales_tax(
      self,
      line_item: LineItem,
      market: Market,
      shipping_address: Optional[OrderAddress],
      extended_price: Decimal,
  ) -> Decimal:
    """Returns the sales tax contained in or added to `extended_price`."""

  @abstractmethod
  def get_tax_percentage(
      self,
      line_item: LineItem,
      market: Market,
      shipping_address: Optional[OrderAddress],
  ) -> Decimal:
    """Returns the applicable tax rate in percent (25 for 25%)."""


class ShippingCalculator(ABC):
  """Shipping charges of a shipment."""

  @abstractmethod
  def get_shipping_cost(
      self, shipment: Shipment, market: Market, currency: str
  ) -> Decimal:
    """Returns the shipping charge as listed in the market's prices."""

  @abstractmethod
  def get_shipping_tax(
      self, shipment: Shipment, market: Market, currency: str
  ) -> Decimal:
    """Returns the tax on the shipping charge."""

  @abstractmethod
  def get_shipping_tax_percentage(
      self, shipment: Shipment, market: Market
  ) -> Decimal:
    """Returns the tax rate on shipping in percent."""


class ReturnLineItemCalculator(ABC):

  @abstractmethod
  def get_extended_price(self, line_item: LineItem, currency: str) -> Decimal:
    """Returns the extended price of the returned quantity of `line_item`."""


class OrderTotalsCalculator(ABC):

  @abstractmethod
  def get_totals(self, order_group: OrderGroup, market: Market) -> OrderTotals:
    """Returns the order total (tax included) and its tax total."""


class ConfigurationLoader(ABC):

  @abstractmethod
  def get_configuration(self, market_id: str) -> CheckoutConfiguration:
    """Returns the merchant configuration for a market.

    Raises:
      ConfigurationError: if the market is not configured.
    """


def get_extended_price(line_item: LineItem) -> Decimal:
  """Placed price times quantity, less line discounts."""
  return line_item.placed_price * line_item.quantity - line_item.discount_amount
