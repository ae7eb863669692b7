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

"""Shipping details returned by the gateway after consumer identification.

The gateway reports the consumer's shipping country as a two-letter code;
the commerce platform stores three-letter codes, so details are normalized
before they are handed upstream.
"""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from payorder.countries import to_three_letter_country_code
from payorder.exceptions import GatewayError

logger = logging.getLogger(__name__)


class ShippingAddress(BaseModel):
  model_config = ConfigDict(
      alias_generator=to_camel,
      populate_by_name=True,
      serialize_by_alias=True,
      extra="allow",
  )

  addressee: Optional[str] = None
  co_address: Optional[str] = None
  street_address: Optional[str] = None
  zip_code: Optional[str] = None
  city: Optional[str] = None
  country_code: Optional[str] = None


class ShippingDetails(BaseModel):
  model_config = ConfigDict(
      alias_generator=to_camel,
      populate_by_name=True,
      serialize_by_alias=True,
      extra="allow",
  )

  email: Optional[str] = None
  msisdn: Optional[str] = None
  shipping_address: Optional[ShippingAddress] = None


def normalize_shipping_details(details: ShippingDetails) -> ShippingDetails:
  """Returns a copy with the shipping country as a three-letter code.

  Empty or unknown country codes are left as they are.
  """
  address = details.shipping_address
  if address is None or not (address.country_code or "").strip():
    return details

  three_letter = to_three_letter_country_code(address.country_code)
  if not three_letter:
    logger.warning(
        "Unknown shipping country code %s; leaving it unchanged",
        address.country_code,
    )
    return details

  return details.model_copy(
      update={
          "shipping_address": address.model_copy(
              update={"country_code": three_letter}
          )
      }
  )


class ShippingDetailsClient:
  """Fetches shipping details from the gateway."""

  def __init__(
      self,
      base_url: str = "",
      token: Optional[str] = None,
      client: Optional[httpx.Client] = None,
      timeout: float = 8.0,
  ):
    headers = {"Accept": "application/json"}
    if token:
      headers["Authorization"] = f"Bearer {token}"
    self.client = client or httpx.Client(base_url=base_url, timeout=timeout)
    self.headers = headers

  def close(self) -> None:
    self.client.close()

  def _check_gateway_url(self, url: str) -> None:
    try:
      target = httpx.URL(url)
    except httpx.InvalidURL as e:
      raise GatewayError(f"Invalid shipping details URL: {e}", 400) from e
    if not target.is_absolute_url:
      return

    base = self.client.base_url
    if not base.host or (target.scheme, target.host, target.port) != (
        base.scheme,
        base.host,
        base.port,
    ):
      logger.warning(
          "Refusing to fetch shipping details from %s: not the gateway",
          target.host,
      )
      raise GatewayError(
          f"Shipping details URL is not on the gateway: {target.host}", 400
      )

  def get_shipping_details(self, url: str) -> ShippingDetails:
    """Retrieves the shipping details at `url`.

    Relative URLs are resolved against the client's gateway base URL.
    Absolute URLs must be on that same gateway.

    Raises:
      GatewayError: if the URL is not on the gateway, the gateway cannot be
        reached, answers with an error status or returns a malformed
        document.
    """
    self._check_gateway_url(url)
    try:
      response = self.client.get(url, headers=self.headers)
      response.raise_for_status()
    except httpx.HTTPStatusError as e:
      logger.error(
          "Gateway returned %d for shipping details at %s",
          e.response.status_code,
          url,
      )
      raise GatewayError(
          f"Gateway returned status {e.response.status_code}"
      ) from e
    except httpx.RequestError as e:
      logger.error(
          "Network error fetching shipping details from %s: %s", url, e
      )
      raise GatewayError(f"Cannot reach gateway: {e}") from e

    try:
      return ShippingDetails.model_validate(response.json())
    except ValueError as e:
      logger.error("Malformed shipping details from %s: %s", url, e)
      raise GatewayError("Malformed shipping details from gateway") from e
