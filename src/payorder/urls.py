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

"""Resolves configured merchant URLs into order-scoped absolute URLs.

A configured URL may contain the `{orderGroupId}` placeholder, which is
replaced by the order group id. Absolute results are used as they are;
relative ones are appended to the site's base URL.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit

from payorder.context import CheckoutConfiguration
from payorder.exceptions import ConfigurationError
from payorder.models import Urls

logger = logging.getLogger(__name__)

ORDER_ID_PLACEHOLDER = "{orderGroupId}"


def is_absolute_url(url: str) -> bool:
  parts = urlsplit(url)
  return bool(parts.scheme and parts.netloc)


def resolve_url(
    url: Optional[str],
    order_group_id: str,
    site_url: Optional[str],
    market_id: Optional[str] = None,
) -> Optional[str]:
  """Resolves one configured URL; returns None when it is not configured.

  Raises:
    ConfigurationError: if the URL is relative and no site URL is known.
  """
  if not url or not url.strip():
    return None

  resolved = url.strip().replace(ORDER_ID_PLACEHOLDER, str(order_group_id))
  if is_absolute_url(resolved):
    return resolved

  if not site_url:
    raise ConfigurationError(
        f"Merchant URL '{url}' is relative but no site URL is configured"
        f" for market {market_id}",
        market_id=market_id,
    )
  return f"{site_url.rstrip('/')}/{resolved.lstrip('/')}"


def resolve_merchant_urls(
    configuration: CheckoutConfiguration,
    order_group_id: str,
    site_url: Optional[str],
    market_id: Optional[str] = None,
) -> Urls:
  """Builds the Urls block of a payment order.

  The cancel URL is only sent when no payment URL is configured; a merchant
  hosting the payment UI in its own page handles cancellation there.
  """

  def resolve(url: Optional[str]) -> Optional[str]:
    return resolve_url(url, order_group_id, site_url, market_id)

  payment_url = resolve(configuration.payment_url)
  cancel_url = None if payment_url else resolve(configuration.cancel_url)

  urls = Urls(
      host_urls=[u for u in configuration.host_urls if u and u.strip()],
      complete_url=resolve(configuration.complete_url),
      cancel_url=cancel_url,
      payment_url=payment_url,
      callback_url=resolve(configuration.callback_url),
      terms_of_service_url=resolve(configuration.terms_of_service_url),
      logo_url=resolve(configuration.logo_url),
  )
  logger.debug("Resolved merchant URLs for order %s: %s", order_group_id, urls)
  return urls
