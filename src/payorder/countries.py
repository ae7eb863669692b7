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

"""ISO 3166 country and culture code helpers."""

from typing import Optional

import pycountry


def _find_country(code: Optional[str]):
  """Looks up a country by its alpha-2 or alpha-3 code."""
  code = (code or "").strip().upper()
  if len(code) == 2:
    return pycountry.countries.get(alpha_2=code)
  if len(code) == 3:
    return pycountry.countries.get(alpha_3=code)
  return None


def to_two_letter_country_code(code: Optional[str]) -> Optional[str]:
  """Returns the alpha-2 code for an alpha-2 or alpha-3 code, else None."""
  country = _find_country(code)
  return country.alpha_2 if country else None


def to_three_letter_country_code(code: Optional[str]) -> Optional[str]:
  """Returns the alpha-3 code for an alpha-2 or alpha-3 code, else None."""
  country = _find_country(code)
  return country.alpha_3 if country else None


def region_from_culture(culture: Optional[str]) -> Optional[str]:
  """Extracts the two-letter region of a culture tag ("sv-SE" -> "SE")."""
  if not culture:
    return None
  for part in reversed(culture.replace("_", "-").split("-")[1:]):
    if len(part) == 2 and part.isalpha():
      return part.upper()
  return None
