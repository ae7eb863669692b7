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

"""Payee reference generation.

A payee reference identifies one request to the gateway and must never repeat,
even for two requests on the same order issued in the same clock tick.
"""

import uuid

# Longest payee reference the gateway accepts.
MAX_PAYEE_REFERENCE_LENGTH = 30


def new_payee_reference() -> str:
  """Returns a random alphanumeric reference (uuid4 based)."""
  return uuid.uuid4().hex[:MAX_PAYEE_REFERENCE_LENGTH]
