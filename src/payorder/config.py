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

"""Configuration for payment order request assembly.

Command-line flags configure the server entry point. Merchant configuration
(merchant id and URLs per market) is read from a JSON file of the form:

  {
    "markets": {
      "SWE": {"merchant_id": "...", "complete_url": "/checkout/{orderGroupId}"}
    },
    "tax_rates": [
      {"country_code": "SE", "tax_category": "default", "percentage": 25}
    ]
  }
"""

import json
import logging
from typing import Any, Optional

from absl import flags

from payorder.collaborators import ConfigurationLoader
from payorder.context import CheckoutConfiguration
from payorder.context import TaxRate
from payorder.exceptions import ConfigurationError

FLAGS = flags.FLAGS

logger = logging.getLogger(__name__)

_CONFIG_FILE_CACHE: dict[str, dict[str, Any]] = {}

# Define flags only if they haven't been defined yet (to avoid duplicates
# during tests or re-imports)
try:
  flags.DEFINE_string(
      "checkout_config_path", None, "Path to the merchant configuration JSON"
  )
  flags.DEFINE_string(
      "site_url", None, "Base URL relative merchant URLs are resolved against"
  )
  flags.DEFINE_string(
      "gateway_base_url",
      "https://api.externalintegration.payex.com",
      "Base URL of the payment-order gateway",
  )
  flags.DEFINE_string("gateway_token", None, "Bearer token for the gateway")
  flags.DEFINE_integer("port", 8182, "Port to run the server on")
except flags.DuplicateFlagError:
  pass


def load_config_file(path: str) -> dict[str, Any]:
  """Reads and caches a merchant configuration file."""
  if path in _CONFIG_FILE_CACHE:
    return _CONFIG_FILE_CACHE[path]

  try:
    with open(path, "r", encoding="utf-8") as f:
      data = json.load(f)
  except (OSError, json.JSONDecodeError) as e:
    raise ConfigurationError(
        f"Cannot read merchant configuration from {path}: {e}"
    ) from e

  _CONFIG_FILE_CACHE[path] = data
  return data


class JsonConfigurationLoader(ConfigurationLoader):
  """Merchant configuration per market from a JSON document."""

  def __init__(
      self,
      path: Optional[str] = None,
      data: Optional[dict[str, Any]] = None,
  ):
    if data is None:
      if not path:
        raise ConfigurationError("No merchant configuration file given")
      data = load_config_file(path)
    self._markets = data.get("markets") or {}
    self._tax_rates = data.get("tax_rates") or []

  def get_configuration(self, market_id: str) -> CheckoutConfiguration:
    market_config = self._markets.get(market_id)
    if market_config is None:
      raise ConfigurationError(
          f"No checkout configuration found for market {market_id}",
          market_id=market_id,
      )
    try:
      return CheckoutConfiguration.model_validate(market_config)
    except ValueError as e:
      raise ConfigurationError(
          f"Invalid checkout configuration for market {market_id}: {e}",
          market_id=market_id,
      ) from e

  def get_tax_rates(self) -> list[TaxRate]:
    """Returns the tax rates listed under "tax_rates", if any."""
    try:
      return [TaxRate.model_validate(rate) for rate in self._tax_rates]
    except ValueError as e:
      raise ConfigurationError(f"Invalid tax rate configuration: {e}") from e
