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

"""Maps order lines to gateway order items with price and tax breakdowns.

For every line the mapper computes the unit price, the extended price (from
return data for returned lines), the sales tax and the VAT percentage, and
the final amount: the extended price itself in markets whose prices include
tax, or the extended price plus sales tax otherwise.

The VAT percentage always comes from the authoritative tax rate. It is never
recovered by dividing the tax amount by the price, which is undefined for
free lines.
"""

import logging
from typing import Iterable, Optional

from payorder import amounts
from payorder.collaborators import get_extended_price
from payorder.collaborators import ReturnLineItemCalculator
from payorder.collaborators import TaxCalculator
from payorder.context import LineItem
from payorder.context import Market
from payorder.context import OrderAddress
from payorder.enums import OrderItemType
from payorder.models import OrderItem

logger = logging.getLogger(__name__)


class LineItemMapper:
  """Builds one OrderItem per order line, preserving input order."""

  def __init__(
      self,
      tax_calculator: TaxCalculator,
      return_line_item_calculator: ReturnLineItemCalculator,
  ):
    self.tax_calculator = tax_calculator
    self.return_line_item_calculator = return_line_item_calculator

  def map_line_items(
      self,
      market: Market,
      currency: str,
      shipping_address: Optional[OrderAddress],
      line_items: Iterable[LineItem],
  ) -> list[OrderItem]:
    return [
        self.map_line_item(market, currency, shipping_address, line_item)
        for line_item in line_items
    ]

  def map_line_item(
      self,
      market: Market,
      currency: str,
      shipping_address: Optional[OrderAddress],
      line_item: LineItem,
  ) -> OrderItem:
    """Computes the price and tax breakdown of a single line."""
    if line_item.is_return:
      extended_price = self.return_line_item_calculator.get_extended_price(
          line_item, currency
      )
    else:
      extended_price = get_extended_price(line_item)

    sales_tax = amounts.round_money(
        self.tax_calculator.get_sales_tax(
            line_item, market, shipping_address, extended_price
        )
    )
    tax_percentage = self.tax_calculator.get_tax_percentage(
        line_item, market, shipping_address
    )
    vat_percent = amounts.percent_to_basis_points(tax_percentage)

    if market.prices_include_tax:
      amount = extended_price
    else:
      amount = extended_price + sales_tax

    # Discounted unit price, before tax.
    discount_price = None
    if (
        not line_item.is_return
        and line_item.discount_amount > 0
        and line_item.quantity > 0
    ):
      discount_price = amounts.to_minor_units(
          extended_price / line_item.quantity
      )

    logger.debug(
        "Line %s: extended=%s tax=%s vat_percent=%d",
        line_item.line_item_id,
        extended_price,
        sales_tax,
        vat_percent,
    )

    return OrderItem(
        reference=line_item.line_item_id,
        name=line_item.display_name or line_item.code or line_item.line_item_id,
        type=OrderItemType.PRODUCT,
        class_=line_item.classification,
        quantity=line_item.effective_quantity,
        unit_price=amounts.to_minor_units(line_item.placed_price),
        amount=amounts.to_minor_units(amount),
        vat_amount=amounts.to_minor_units(sales_tax),
        vat_percent=vat_percent,
        discount_price=discount_price,
        image_url=line_item.image_url,
        item_url=line_item.item_url,
        description=line_item.description,
    )
