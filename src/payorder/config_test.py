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

"""Tests for merchant configuration loading."""

from decimal import Decimal
import json
import os
import tempfile

from absl.testing import absltest

from payorder import config
from payorder.exceptions import ConfigurationError

CONFIG_DATA = {
    "markets": {
        "SWE": {
            "merchant_id": "merchant-1",
            "payment_url": "/pay/{orderGroupId}",
            "host_urls": ["https://shop.example"],
            "generate_payment_token": True,
            "unused_setting": "ignored",
        },
        "BAD": {"payment_url": "/pay"},
    },
    "tax_rates": [
        {"country_code": "SE", "percentage": 25},
        {"country_code": "SE", "tax_category": "food", "percentage": "12"},
    ],
}


class JsonConfigurationLoaderTest(absltest.TestCase):

  def setUp(self) -> None:
    super().setUp()
    config._CONFIG_FILE_CACHE.clear()

  def _write_config(self, contents: str) -> str:
    fd, path = tempfile.mkstemp(suffix=".json")
    with os.fdopen(fd, "w", encoding="utf-8") as f:
      f.write(contents)
    self.addCleanup(os.remove, path)
    return path

  def test_get_configuration(self) -> None:
    loader = config.JsonConfigurationLoader(data=CONFIG_DATA)
    configuration = loader.get_configuration("SWE")
    self.assertEqual(configuration.merchant_id, "merchant-1")
    self.assertEqual(configuration.payment_url, "/pay/{orderGroupId}")
    self.assertEqual(configuration.host_urls, ["https://shop.example"])
    self.assertTrue(configuration.generate_payment_token)
    self.assertIsNone(configuration.cancel_url)

  def test_load_from_file(self) -> None:
    path = self._write_config(json.dumps(CONFIG_DATA))
    loader = config.JsonConfigurationLoader(path=path)
    self.assertEqual(loader.get_configuration("SWE").merchant_id, "merchant-1")

  def test_file_is_cached(self) -> None:
    path = self._write_config(json.dumps(CONFIG_DATA))
    first = config.load_config_file(path)
    second = config.load_config_file(path)
    self.assertIs(first, second)

  def test_unknown_market(self) -> None:
    loader = config.JsonConfigurationLoader(data=CONFIG_DATA)
    with self.assertRaises(ConfigurationError) as ctx:
      loader.get_configuration("DNK")
    self.assertEqual(ctx.exception.market_id, "DNK")
    self.assertEqual(ctx.exception.code, "CONFIGURATION_ERROR")

  def test_invalid_market_configuration(self) -> None:
    """A market without a merchant id cannot be used."""
    loader = config.JsonConfigurationLoader(data=CONFIG_DATA)
    with self.assertRaises(ConfigurationError) as ctx:
      loader.get_configuration("BAD")
    self.assertEqual(ctx.exception.market_id, "BAD")

  def test_missing_file(self) -> None:
    with self.assertRaises(ConfigurationError):
      config.JsonConfigurationLoader(path="/nonexistent/payorder.json")

  def test_malformed_file(self) -> None:
    path = self._write_config("{not json")
    with self.assertRaises(ConfigurationError):
      config.JsonConfigurationLoader(path=path)

  def test_no_source(self) -> None:
    with self.assertRaises(ConfigurationError):
      config.JsonConfigurationLoader()

  def test_get_tax_rates(self) -> None:
    loader = config.JsonConfigurationLoader(data=CONFIG_DATA)
    rates = loader.get_tax_rates()
    self.assertLen(rates, 2)
    self.assertEqual(rates[0].tax_category, "default")
    self.assertEqual(rates[0].percentage, Decimal(25))
    self.assertEqual(rates[1].tax_category, "food")
    self.assertEqual(rates[1].percentage, Decimal(12))

  def test_invalid_tax_rates(self) -> None:
    loader = config.JsonConfigurationLoader(
        data={"tax_rates": [{"country_code": "SE"}]}
    )
    with self.assertRaises(ConfigurationError):
      loader.get_tax_rates()

  def test_no_tax_rates(self) -> None:
    loader = config.JsonConfigurationLoader(data={"markets": {}})
    self.assertEqual(loader.get_tax_rates(), [])


if __name__ == "__main__":
  absltest.main()
