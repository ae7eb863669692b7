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

"""Custom exceptions for payment order request assembly."""

from typing import Optional


class PayOrderError(Exception):
  """Base class for all payment order request exceptions."""

  def __init__(
      self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500
  ):
    self.message = message
    self.code = code
    self.status_code = status_code
    super().__init__(self.message)


class MissingRequiredFieldError(PayOrderError):
  """Raised when a required order, market or shipment input is missing."""

  def __init__(self, field: str):
    self.field = field
    super().__init__(
        f"Missing required field: {field}",
        code="MISSING_REQUIRED_FIELD",
        status_code=400,
    )


class ConfigurationError(PayOrderError):
  """Raised when a market cannot be served with the current configuration."""

  def __init__(self, message: str, market_id: Optional[str] = None):
    self.market_id = market_id
    super().__init__(message, code="CONFIGURATION_ERROR", status_code=500)


class AmountOverflowError(PayOrderError):
  """Raised when an amount does not fit the gateway's integer representation."""

  def __init__(self, message: str):
    super().__init__(message, code="AMOUNT_OVERFLOW", status_code=400)


class GatewayError(PayOrderError):
  """Raised when the payment gateway cannot be reached or rejects a call."""

  def __init__(self, message: str, status_code: int = 502):
    super().__init__(message, code="GATEWAY_ERROR", status_code=status_code)
