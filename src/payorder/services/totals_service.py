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

"""Order totals for payment order updates."""

from decimal import Decimal

from payorder import amounts
from payorder.collaborators import get_extended_price
from payorder.collaborators import OrderTotals
from payorder.collaborators import OrderTotalsCalculator
from payorder.collaborators import ShippingCalculator
from payorder.collaborators import TaxCalculator
from payorder.context import Market
from payorder.context import OrderGroup


class OrderGroupTotalsCalculator(OrderTotalsCalculator):
  """Sums line, shipping and tax totals across all shipments of an order."""

  def __init__(
      self,
      tax_calculator: TaxCalculator,
      shipping_calculator: ShippingCalculator,
  ):
    self.tax_calculator = tax_calculator
    self.shipping_calculator = shipping_calculator

  def get_totals(self, order_group: OrderGroup, market: Market) -> OrderTotals:
    total = Decimal(0)
    tax_total = Decimal(0)

    for shipment in order_group.shipments:
      for line_item in shipment.line_items:
        extended_price = get_extended_price(line_item)
        sales_tax = amounts.round_money(
            self.tax_calculator.get_sales_tax(
                line_item, market, shipment.shipping_address, extended_price
            )
        )
        total += amounts.round_money(extended_price)
        tax_total += sales_tax
        if not market.prices_include_tax:
          total += sales_tax

      shipping_cost = self.shipping_calculator.get_shipping_cost(
          shipment, market, order_group.currency
      )
      shipping_tax = amounts.round_money(
          self.shipping_calculator.get_shipping_tax(
              shipment, market, order_group.currency
          )
      )
      total += amounts.round_money(shipping_cost)
      tax_total += shipping_tax
      if not market.prices_include_tax:
        total += shipping_tax

    return OrderTotals(
        total=amounts.round_money(total),
        tax_total=amounts.round_money(tax_total),
    )
