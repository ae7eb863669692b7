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

"""Enumerations for payment order requests.

These mirror the string constants the payment-order gateway expects in the
`operation`, `type` and `class` fields of outbound requests.
"""

import enum


class Operation(str, enum.Enum):
  PURCHASE = "Purchase"
  CAPTURE = "Capture"
  REVERSAL = "Reversal"
  CANCEL = "Cancel"
  ABORT = "Abort"
  UPDATE = "Update"
  INITIATE_CONSUMER_SESSION = "InitiateConsumerSession"


class OrderItemType(str, enum.Enum):
  PRODUCT = "PRODUCT"
  SERVICE = "SERVICE"
  SHIPPING_FEE = "SHIPPING_FEE"
  PAYMENT_FEE = "PAYMENT_FEE"
  DISCOUNT = "DISCOUNT"
  VALUE_CODE = "VALUE_CODE"
  OTHER = "OTHER"


class AbortReason(str, enum.Enum):
  CANCELLED_BY_CONSUMER = "CancelledByConsumer"
  CANCELLED_BY_CUSTOMER = "CancelledByCustomer"
