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

"""Payment order routes."""

from typing import Any, Optional

from fastapi import APIRouter
from fastapi import Body
from fastapi import Depends
from pydantic import BaseModel

from payorder import dependencies
from payorder.context import Market
from payorder.context import OrderGroup
from payorder.context import PaymentMethodConfig
from payorder.context import RequestContext
from payorder.request_factory import RequestFactory
from payorder.shipping_details import normalize_shipping_details
from payorder.shipping_details import ShippingDetailsClient

router = APIRouter(prefix="/payorder")


class PaymentOrderQuery(BaseModel):
  order_group: OrderGroup
  market: Market
  payment_method: Optional[PaymentMethodConfig] = None
  consumer_profile_ref: Optional[str] = None
  description: Optional[str] = None
  metadata: Optional[dict[str, Any]] = None


class ShippingDetailsQuery(BaseModel):
  url: str


@router.post(
    "/payment-order-requests",
    response_model=dict[str, Any],
    operation_id="build_payment_order_request",
)
async def build_payment_order_request(
    query: PaymentOrderQuery = Body(...),
    request_context: RequestContext = Depends(
        dependencies.get_request_context
    ),
    request_factory: RequestFactory = Depends(
        dependencies.get_request_factory
    ),
) -> dict[str, Any]:
  """Build the payment order creation payload for an order."""
  request = request_factory.build_payment_order_request(
      query.order_group,
      query.market,
      payment_method=query.payment_method,
      consumer_profile_ref=query.consumer_profile_ref,
      request_context=request_context,
      description=query.description,
      metadata=query.metadata,
  )
  return request.to_payload()


@router.post(
    "/shipping-details",
    response_model=dict[str, Any],
    operation_id="get_shipping_details",
)
def get_shipping_details(
    query: ShippingDetailsQuery = Body(...),
    client: ShippingDetailsClient = Depends(
        dependencies.get_shipping_details_client
    ),
) -> dict[str, Any]:
  """Fetch a consumer's shipping details with a three-letter country code."""
  details = normalize_shipping_details(client.get_shipping_details(query.url))
  return details.model_dump(mode="json", by_alias=True, exclude_none=True)
