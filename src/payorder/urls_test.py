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

"""Tests for merchant URL resolution."""

from absl.testing import absltest
from absl.testing import parameterized

from payorder.context import CheckoutConfiguration
from payorder.exceptions import ConfigurationError
from payorder import urls

SITE_URL = "https://shop.example"


class ResolveUrlTest(parameterized.TestCase):

  @parameterized.named_parameters(
      (
          "absolute",
          "https://pay.example/{orderGroupId}",
          "https://pay.example/42",
      ),
      ("relative", "/checkout/{orderGroupId}", SITE_URL + "/checkout/42"),
      ("relative_no_slash", "checkout/done", SITE_URL + "/checkout/done"),
      (
          "placeholder_in_query",
          "/complete?order={orderGroupId}",
          SITE_URL + "/complete?order=42",
      ),
      ("no_placeholder", "https://pay.example/cb", "https://pay.example/cb"),
  )
  def test_resolve(self, url, expected):
    self.assertEqual(urls.resolve_url(url, "42", SITE_URL), expected)

  def test_trailing_slash_on_site_url(self):
    self.assertEqual(
        urls.resolve_url("/done", "42", "https://shop.example/"),
        "https://shop.example/done",
    )

  @parameterized.parameters(None, "", "   ")
  def test_unconfigured_url(self, url):
    self.assertIsNone(urls.resolve_url(url, "42", SITE_URL))

  def test_relative_url_without_site_url(self):
    """A relative URL cannot be resolved without a base to resolve against."""
    with self.assertRaises(ConfigurationError) as ctx:
      urls.resolve_url("/checkout", "42", None, market_id="SWE")
    self.assertEqual(ctx.exception.market_id, "SWE")
    self.assertEqual(ctx.exception.status_code, 500)

  def test_absolute_url_without_site_url(self):
    self.assertEqual(
        urls.resolve_url("https://pay.example/{orderGroupId}", "7", None),
        "https://pay.example/7",
    )


class ResolveMerchantUrlsTest(absltest.TestCase):

  def test_payment_url_suppresses_cancel_url(self):
    """The cancel URL is only sent for redirect-style checkouts."""
    configuration = CheckoutConfiguration(
        merchant_id="m1",
        payment_url="/pay/{orderGroupId}",
        cancel_url="/cancel/{orderGroupId}",
        complete_url="/complete/{orderGroupId}",
    )
    resolved = urls.resolve_merchant_urls(configuration, "42", SITE_URL)
    self.assertEqual(resolved.payment_url, SITE_URL + "/pay/42")
    self.assertIsNone(resolved.cancel_url)
    self.assertEqual(resolved.complete_url, SITE_URL + "/complete/42")

  def test_cancel_url_without_payment_url(self):
    configuration = CheckoutConfiguration(
        merchant_id="m1",
        cancel_url="/cancel/{orderGroupId}",
    )
    resolved = urls.resolve_merchant_urls(configuration, "42", SITE_URL)
    self.assertIsNone(resolved.payment_url)
    self.assertEqual(resolved.cancel_url, SITE_URL + "/cancel/42")

  def test_all_urls(self):
    configuration = CheckoutConfiguration(
        merchant_id="m1",
        host_urls=["https://shop.example", ""],
        complete_url="/complete",
        callback_url="https://hooks.example/cb/{orderGroupId}",
        terms_of_service_url="/terms",
        logo_url="https://cdn.example/logo.png",
    )
    resolved = urls.resolve_merchant_urls(configuration, "42", SITE_URL)
    self.assertEqual(resolved.host_urls, ["https://shop.example"])
    self.assertEqual(resolved.callback_url, "https://hooks.example/cb/42")
    self.assertEqual(resolved.terms_of_service_url, SITE_URL + "/terms")
    self.assertEqual(resolved.logo_url, "https://cdn.example/logo.png")


if __name__ == "__main__":
  absltest.main()
