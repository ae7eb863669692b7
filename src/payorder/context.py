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

"""Order, market and merchant context handed in by the commerce platform.

These models describe the in-progress order a payment order is built from.
Money is held as `Decimal` in major units; conversion to minor units happens
only when outbound requests are assembled.
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from payorder.exceptions import MissingRequiredFieldError


class Market(BaseModel):
  """A commerce market: country, pricing convention and language."""

  market_id: str
  market_name: Optional[str] = None
  countries: list[str] = Field(default_factory=list)
  prices_include_tax: bool = False
  default_language: str = "en-US"

  @property
  def first_country(self) -> Optional[str]:
    return self.countries[0] if self.countries else None


class OrderAddress(BaseModel):
  address_id: Optional[str] = None
  first_name: Optional[str] = None
  last_name: Optional[str] = None
  line1: Optional[str] = None
  line2: Optional[str] = None
  city: Optional[str] = None
  postal_code: Optional[str] = None
  region_code: Optional[str] = None
  country_code: Optional[str] = None
  email: Optional[str] = None
  phone: Optional[str] = None


class LineItem(BaseModel):
  """A single order line, or the returned part of one."""

  line_item_id: str
  code: Optional[str] = None
  display_name: str = ""
  quantity: int = Field(1, ge=0)
  placed_price: Decimal = Decimal(0)
  discount_amount: Decimal = Decimal(0)
  return_quantity: int = Field(0, ge=0)
  tax_category: str = "default"
  classification: str = "PRODUCT"
  image_url: Optional[str] = None
  item_url: Optional[str] = None
  description: Optional[str] = None

  @property
  def is_return(self) -> bool:
    return self.return_quantity > 0

  @property
  def effective_quantity(self) -> int:
    """Returned quantity for return lines, ordered quantity otherwise."""
    return self.return_quantity if self.is_return else self.quantity


class Shipment(BaseModel):
  shipment_id: Optional[str] = None
  shipping_address: Optional[OrderAddress] = None
  line_items: list[LineItem] = Field(default_factory=list)
  shipping_cost: Decimal = Decimal(0)
  shipping_tax_category: str = "shipping"


class OrderGroup(BaseModel):
  """The cart or purchase order a payment order is created for."""

  order_group_id: str
  market_id: Optional[str] = None
  currency: str
  shipments: list[Shipment] = Field(default_factory=list)
  properties: dict[str, Any] = Field(default_factory=dict)

  def first_shipment(self) -> Shipment:
    if not self.shipments:
      raise MissingRequiredFieldError("order_group.shipments")
    return self.shipments[0]


class RequestContext(BaseModel):
  """Per-request values the caller reads from the inbound HTTP request."""

  user_agent: Optional[str] = None
  culture: Optional[str] = None
  site_url: Optional[str] = None


class TaxRate(BaseModel):
  country_code: str
  tax_category: str = "default"
  percentage: Decimal


class CheckoutConfiguration(BaseModel):
  """Merchant configuration for one market."""

  model_config = ConfigDict(extra="ignore")

  merchant_id: str
  callback_url: Optional[str] = None
  payment_url: Optional[str] = None
  cancel_url: Optional[str] = None
  complete_url: Optional[str] = None
  terms_of_service_url: Optional[str] = None
  logo_url: Optional[str] = None
  host_urls: list[str] = Field(default_factory=list)
  use_anonymous_checkout: bool = False
  generate_payment_token: bool = False


class PaymentMethodConfig(BaseModel):
  """Settings of the checkout payment method selected for the order."""

  system_keyword: str = "SwedbankPayCheckout"
  description: str = "Purchase"
  generate_payment_token: Optional[bool] = None
