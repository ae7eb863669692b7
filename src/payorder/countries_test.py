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

"""Tests for country and culture code helpers."""

from absl.testing import absltest
from absl.testing import parameterized

from payorder import countries


class CountriesTest(parameterized.TestCase):

  @parameterized.parameters(
      ("SWE", "SE"), ("SE", "SE"), ("se", "SE"), (" nor ", "NO")
  )
  def test_to_two_letter_country_code(self, code: str, expected: str) -> None:
    self.assertEqual(countries.to_two_letter_country_code(code), expected)

  @parameterized.parameters(("SE", "SWE"), ("NO", "NOR"), ("DNK", "DNK"))
  def test_to_three_letter_country_code(
      self, code: str, expected: str
  ) -> None:
    self.assertEqual(countries.to_three_letter_country_code(code), expected)

  @parameterized.parameters(None, "", "XX", "SWEDEN", "S")
  def test_unknown_codes(self, code) -> None:
    """Unknown or malformed codes resolve to None."""
    self.assertIsNone(countries.to_two_letter_country_code(code))
    self.assertIsNone(countries.to_three_letter_country_code(code))

  @parameterized.parameters(
      ("sv-SE", "SE"),
      ("en_US", "US"),
      ("zh-Hant-TW", "TW"),
      ("nb-no", "NO"),
      ("en", None),
      (None, None),
  )
  def test_region_from_culture(self, culture, expected) -> None:
    self.assertEqual(countries.region_from_culture(culture), expected)


if __name__ == "__main__":
  absltest.main()
