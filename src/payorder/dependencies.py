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

"""FastAPI dependencies for the payment order server.

This module wires request-scoped objects for the endpoints:
- The merchant configuration loader and the RequestFactory built on it.
- The RequestContext (user agent, culture, site URL) of the inbound request.
- The gateway client used to fetch shipping details.
"""

from typing import Generator, Optional

from fastapi import Depends
from fastapi import Header
from fastapi import Request

from payorder import config
from payorder.context import RequestContext
from payorder.exceptions import ConfigurationError
from payorder.request_factory import create_request_factory
from payorder.request_factory import RequestFactory
from payorder.services.tax_service import RateTableTaxCalculator
from payorder.shipping_details import ShippingDetailsClient


def preferred_culture(accept_language: Optional[str]) -> Optional[str]:
  """Returns the first language tag of an Accept-Language header."""
  if not accept_language:
    return None
  first = accept_language.split(",")[0].split(";")[0].strip()
  if not first or first == "*":
    return None
  return first


def get_configuration_loader() -> config.JsonConfigurationLoader:
  """Dependency provider for the merchant configuration."""
  path = config.FLAGS.checkout_config_path
  if not path:
    raise ConfigurationError("--checkout_config_path is not set")
  return config.JsonConfigurationLoader(path=path)


def get_request_factory(
    configuration_loader: config.JsonConfigurationLoader = Depends(
        get_configuration_loader
    ),
) -> RequestFactory:
  """Dependency provider for RequestFactory."""
  tax_calculator = RateTableTaxCalculator(configuration_loader.get_tax_rates())
  return create_request_factory(configuration_loader, tax_calculator)


def get_site_url(request: Request) -> str:
  return config.FLAGS.site_url or str(request.base_url)


def get_request_context(
    site_url: str = Depends(get_site_url),
    user_agent: Optional[str] = Header(None),
    accept_language: Optional[str] = Header(None),
) -> RequestContext:
  """Captures the per-request values the request factory needs."""
  return RequestContext(
      user_agent=user_agent,
      culture=preferred_culture(accept_language),
      site_url=site_url,
  )


def get_shipping_details_client() -> (
    Generator[ShippingDetailsClient, None, None]
):
  """Dependency provider for the gateway shipping-details client."""
  client = ShippingDetailsClient(
      base_url=config.FLAGS.gateway_base_url,
      token=config.FLAGS.gateway_token,
  )
  try:
    yield client
  finally:
    client.close()
