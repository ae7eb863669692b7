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

"""Synthesizes the order item that represents a shipment's shipping fee."""

from payorder import amounts
from payorder.collaborators import ShippingCalculator
from payorder.context import Market
from payorder.context import Shipment
from payorder.enums import OrderItemType
from payorder.models import OrderItem

SHIPPING_REFERENCE = "SHIPPING"
SHIPPING_NAME = "SHIPPINGFEE"
SHIPPING_CLASS = "NOTAPPLICABLE"


class ShippingItemSynthesizer:
  """Builds exactly one SHIPPING_FEE item per shipment, even when free."""

  def __init__(self, shipping_calculator: ShippingCalculator):
    self.shipping_calculator = shipping_calculator

  def build_shipping_item(
      self, shipment: Shipment, market: Market, currency: str
  ) -> OrderItem:
    shipping_cost = self.shipping_calculator.get_shipping_cost(
        shipment, market, currency
    )
    shipping_tax = amounts.round_money(
        self.shipping_calculator.get_shipping_tax(shipment, market, currency)
    )

    if market.prices_include_tax:
      amount = shipping_cost
    else:
      amount = shipping_cost + shipping_tax

    # Free shipping carries no VAT rate.
    if shipping_cost == 0:
      vat_percent = 0
    else:
      vat_percent = amounts.percent_to_basis_points(
          self.shipping_calculator.get_shipping_tax_percentage(shipment, market)
      )

    return OrderItem(
        reference=SHIPPING_REFERENCE,
        name=SHIPPING_NAME,
        type=OrderItemType.SHIPPING_FEE,
        class_=SHIPPING_CLASS,
        quantity=1,
        unit_price=amounts.to_minor_units(shipping_cost),
        amount=amounts.to_minor_units(amount),
        vat_amount=amounts.to_minor_units(shipping_tax),
        vat_percent=vat_percent,
    )
