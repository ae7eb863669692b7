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

"""Outbound request models for the payment-order gateway.

Field names are snake_case in Python and serialize to the gateway's camelCase
names. All amounts are integers in minor currency units and all VAT
percentages are basis points (percent * 100).
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_camel

from payorder.enums import AbortReason
from payorder.enums import Operation
from payorder.enums import OrderItemType


class GatewayModel(BaseModel):
  """Base class for everything sent to the gateway."""

  model_config = ConfigDict(
      alias_generator=to_camel, populate_by_name=True, serialize_by_alias=True
  )

  def to_json_dict(self) -> dict[str, Any]:
    return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GatewayRequest(GatewayModel):
  """A request with an envelope key, e.g. {"paymentorder": {...}}."""

  envelope: ClassVar[Optional[str]] = None

  def to_payload(self) -> dict[str, Any]:
    body = self.to_json_dict()
    if self.envelope is None:
      return body
    return {self.envelope: body}


class OrderItem(GatewayModel):
  reference: str
  name: str
  type: OrderItemType
  class_: str = Field(alias="class")
  quantity: int
  quantity_unit: str = "PCS"
  unit_price: int
  amount: int
  vat_amount: int
  vat_percent: int
  discount_price: Optional[int] = None
  discount_description: Optional[str] = None
  image_url: Optional[str] = None
  item_url: Optional[str] = None
  description: Optional[str] = None


class Urls(GatewayModel):
  host_urls: list[str] = Field(default_factory=list)
  complete_url: Optional[str] = None
  cancel_url: Optional[str] = None
  payment_url: Optional[str] = None
  callback_url: Optional[str] = None
  terms_of_service_url: Optional[str] = None
  logo_url: Optional[str] = None


class PayeeInfo(GatewayModel):
  payee_id: str
  payee_reference: str
  order_reference: Optional[str] = None


class Payer(GatewayModel):
  consumer_profile_ref: str


class PaymentOrderRequest(GatewayRequest):
  """Creates a payment order (operation Purchase)."""

  envelope: ClassVar[Optional[str]] = "paymentorder"

  operation: Operation = Operation.PURCHASE
  currency: str
  amount: int
  vat_amount: int
  description: str
  user_agent: Optional[str] = None
  language: Optional[str] = None
  generate_payment_token: bool = False
  urls: Urls
  payee_info: PayeeInfo
  payer: Optional[Payer] = None
  metadata: Optional[dict[str, Any]] = Field(default=None, alias="metaData")
  order_items: list[OrderItem] = Field(default_factory=list)


class CaptureRequest(GatewayRequest):
  envelope: ClassVar[Optional[str]] = "transaction"

  operation: Operation = Operation.CAPTURE
  amount: int
  vat_amount: int
  description: str
  payee_reference: str
  order_items: list[OrderItem] = Field(default_factory=list)


class ReversalRequest(GatewayRequest):
  envelope: ClassVar[Optional[str]] = "transaction"

  operation: Operation = Operation.REVERSAL
  amount: int
  vat_amount: int
  description: str
  payee_reference: str
  order_items: list[OrderItem] = Field(default_factory=list)


class CancelRequest(GatewayRequest):
  envelope: ClassVar[Optional[str]] = "transaction"

  operation: Operation = Operation.CANCEL
  description: str
  payee_reference: str


class AbortRequest(GatewayRequest):
  envelope: ClassVar[Optional[str]] = "paymentorder"

  operation: Operation = Operation.ABORT
  abort_reason: AbortReason = AbortReason.CANCELLED_BY_CONSUMER


class UpdateRequest(GatewayRequest):
  """Updates the amounts of an existing payment order."""

  envelope: ClassVar[Optional[str]] = "paymentorder"

  operation: Operation = Operation.UPDATE
  amount: int
  vat_amount: int


class NationalIdentifier(GatewayModel):
  social_security_number: str
  country_code: Optional[str] = None


class ConsumerSessionRequest(GatewayRequest):
  """Initiates a consumer identification session (check-in)."""

  operation: Operation = Operation.INITIATE_CONSUMER_SESSION
  msisdn: Optional[str] = None
  email: Optional[str] = None
  consumer_country_code: str
  language: Optional[str] = None
  shipping_address_restricted_to_country_codes: list[str] = Field(
      default_factory=list
  )
  national_identifier: Optional[NationalIdentifier] = None
