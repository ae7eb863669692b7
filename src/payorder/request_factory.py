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

"""Request factory for the payment-order gateway.

This module provides the `RequestFactory` class, which turns an in-progress
order into the requests that create, capture, reverse, cancel, abort and
update a payment order, and that initiate a consumer session.

Each build operation is a pure function of its inputs. Collaborators (tax,
shipping, return pricing, totals, merchant configuration, payee reference
generation) are injected through the constructor, and per-request values
(user agent, culture, site URL) are passed in a `RequestContext`.
"""

import logging
from typing import Any, Callable, Iterable, Optional

from payorder import amounts
from payorder.collaborators import ConfigurationLoader
from payorder.collaborators import OrderTotalsCalculator
from payorder.context import LineItem
from payorder.context import Market
from payorder.context import OrderGroup
from payorder.context import PaymentMethodConfig
from payorder.context import RequestContext
from payorder.context import Shipment
from payorder.countries import region_from_culture
from payorder.countries import to_two_letter_country_code
from payorder.enums import AbortReason
from payorder.exceptions import ConfigurationError
from payorder.exceptions import MissingRequiredFieldError
from payorder.line_items import LineItemMapper
from payorder.models import AbortRequest
from payorder.models import CancelRequest
from payorder.models import CaptureRequest
from payorder.models import ConsumerSessionRequest
from payorder.models import NationalIdentifier
from payorder.models import OrderItem
from payorder.models import PayeeInfo
from payorder.models import Payer
from payorder.models import PaymentOrderRequest
from payorder.models import ReversalRequest
from payorder.models import UpdateRequest
from payorder.references import new_payee_reference
from payorder.services.tax_service import RateTableTaxCalculator
from payorder.services.totals_service import OrderGroupTotalsCalculator
from payorder.shipping import ShippingItemSynthesizer
from payorder.urls import resolve_merchant_urls

logger = logging.getLogger(__name__)


def _require(value: Any, field: str) -> None:
  if value is None:
    raise MissingRequiredFieldError(field)


def _sum_amounts(order_items: list[OrderItem]) -> tuple[int, int]:
  """Returns (amount, vat_amount) totals of the items in minor units."""
  return (
      amounts.sum_minor_units(item.amount for item in order_items),
      amounts.sum_minor_units(item.vat_amount for item in order_items),
  )


class RequestFactory:
  """Builds gateway requests from orders."""

  def __init__(
      self,
      configuration_loader: ConfigurationLoader,
      line_item_mapper: LineItemMapper,
      shipping_item_synthesizer: ShippingItemSynthesizer,
      order_totals_calculator: OrderTotalsCalculator,
      reference_generator: Callable[[], str] = new_payee_reference,
  ):
    self.configuration_loader = configuration_loader
    self.line_item_mapper = line_item_mapper
    self.shipping_item_synthesizer = shipping_item_synthesizer
    self.order_totals_calculator = order_totals_calculator
    self.reference_generator = reference_generator

  def build_payment_order_request(
      self,
      order_group: OrderGroup,
      market: Market,
      payment_method: Optional[PaymentMethodConfig] = None,
      consumer_profile_ref: Optional[str] = None,
      request_context: Optional[RequestContext] = None,
      description: Optional[str] = None,
      metadata: Optional[dict[str, Any]] = None,
  ) -> PaymentOrderRequest:
    """Builds the Purchase request creating a payment order for an order.

    Args:
      order_group: The cart or order to pay for. Its first shipment supplies
        the order items.
      market: The market the order is placed in.
      payment_method: Settings of the selected payment method.
      consumer_profile_ref: Reference of an identified consumer; adds a
        payer block when given.
      request_context: User agent, culture and site URL of the request.
      description: Payment order description; defaults to the payment
        method's description.
      metadata: Extra key/values to associate with the payment order.

    Returns:
      The PaymentOrderRequest.

    Raises:
      MissingRequiredFieldError: if the order, market or shipment is missing.
      ConfigurationError: if the market has no country or no merchant
        configuration.
    """
    _require(order_group, "order_group")
    _require(market, "market")

    market_country = to_two_letter_country_code(market.first_country)
    if not market_country:
      raise ConfigurationError(
          f"Please select a country for market {market.market_id}",
          market_id=market.market_id,
      )

    payment_method = payment_method or PaymentMethodConfig()
    request_context = request_context or RequestContext()
    configuration = self.configuration_loader.get_configuration(
        market.market_id
    )

    shipment = order_group.first_shipment()
    order_items = self.line_item_mapper.map_line_items(
        market,
        order_group.currency,
        shipment.shipping_address,
        shipment.line_items,
    )
    order_items.append(
        self.shipping_item_synthesizer.build_shipping_item(
            shipment, market, order_group.currency
        )
    )
    amount, vat_amount = _sum_amounts(order_items)

    generate_payment_token = payment_method.generate_payment_token
    if generate_payment_token is None:
      generate_payment_token = configuration.generate_payment_token

    payer = None
    if consumer_profile_ref:
      payer = Payer(consumer_profile_ref=consumer_profile_ref)

    request = PaymentOrderRequest(
        currency=order_group.currency,
        amount=amount,
        vat_amount=vat_amount,
        description=description or payment_method.description,
        user_agent=request_context.user_agent,
        language=request_context.culture or market.default_language,
        generate_payment_token=generate_payment_token,
        urls=resolve_merchant_urls(
            configuration,
            order_group.order_group_id,
            request_context.site_url,
            market.market_id,
        ),
        payee_info=PayeeInfo(
            payee_id=configuration.merchant_id,
            payee_reference=self.reference_generator(),
            order_reference=order_group.order_group_id,
        ),
        payer=payer,
        metadata=metadata or None,
        order_items=order_items,
    )
    logger.info(
        "Built %s request for order %s: %d items, amount %d %s",
        request.operation.value,
        order_group.order_group_id,
        len(order_items),
        amount,
        order_group.currency,
    )
    return request

  def build_consumer_session_request(
      self,
      market: Market,
      email: Optional[str] = None,
      msisdn: Optional[str] = None,
      national_identifier: Optional[str] = None,
  ) -> ConsumerSessionRequest:
    """Builds the request initiating a consumer identification session."""
    _require(market, "market")

    region = region_from_culture(market.default_language)
    if not region:
      region = to_two_letter_country_code(market.first_country)
    if not region:
      raise ConfigurationError(
          f"Cannot determine the consumer country of market {market.market_id}",
          market_id=market.market_id,
      )

    restricted_country_codes = []
    for country in market.countries:
      code = to_two_letter_country_code(country)
      if code and code not in restricted_country_codes:
        restricted_country_codes.append(code)

    identifier = None
    if national_identifier:
      identifier = NationalIdentifier(
          social_security_number=national_identifier, country_code=region
      )

    logger.info(
        "Built consumer session request for market %s", market.market_id
    )
    return ConsumerSessionRequest(
        msisdn=msisdn or None,
        email=email or None,
        consumer_country_code=region,
        language=market.default_language,
        shipping_address_restricted_to_country_codes=restricted_country_codes,
        national_identifier=identifier,
    )

  def build_capture_request(
      self,
      line_items: Optional[Iterable[LineItem]],
      market: Market,
      shipment: Shipment,
      currency: str,
      include_shipping: bool = True,
      description: str = "Capturing payment.",
  ) -> CaptureRequest:
    """Builds a (possibly partial) capture of the given lines.

    When `line_items` is None, all lines of the shipment are captured.
    """
    order_items = self._transaction_items(
        line_items, market, shipment, currency, include_shipping
    )
    amount, vat_amount = _sum_amounts(order_items)
    logger.info(
        "Built Capture request: %d items, amount %d", len(order_items), amount
    )
    return CaptureRequest(
        amount=amount,
        vat_amount=vat_amount,
        description=description,
        payee_reference=self.reference_generator(),
        order_items=order_items,
    )

  def build_reversal_request(
      self,
      line_items: Optional[Iterable[LineItem]],
      market: Market,
      shipment: Shipment,
      currency: str,
      include_shipping: bool = True,
      description: str = "Reversing payment.",
  ) -> ReversalRequest:
    """Builds a reversal (refund) of the given, typically returned, lines."""
    order_items = self._transaction_items(
        line_items, market, shipment, currency, include_shipping
    )
    amount, vat_amount = _sum_amounts(order_items)
    logger.info(
        "Built Reversal request: %d items, amount %d", len(order_items), amount
    )
    return ReversalRequest(
        amount=amount,
        vat_amount=vat_amount,
        description=description,
        payee_reference=self.reference_generator(),
        order_items=order_items,
    )

  def build_cancel_request(
      self, description: str = "Cancelling purchase order."
  ) -> CancelRequest:
    return CancelRequest(
        description=description, payee_reference=self.reference_generator()
    )

  def build_abort_request(
      self, abort_reason: AbortReason = AbortReason.CANCELLED_BY_CONSUMER
  ) -> AbortRequest:
    return AbortRequest(abort_reason=abort_reason)

  def build_update_request(
      self, order_group: OrderGroup, market: Market
  ) -> UpdateRequest:
    """Builds an amount update from the order's current totals."""
    _require(order_group, "order_group")
    _require(market, "market")

    totals = self.order_totals_calculator.get_totals(order_group, market)
    request = UpdateRequest(
        amount=amounts.to_minor_units(totals.total),
        vat_amount=amounts.to_minor_units(totals.tax_total),
    )
    logger.info(
        "Built Update request for order %s: amount %d",
        order_group.order_group_id,
        request.amount,
    )
    return request

  def _transaction_items(
      self,
      line_items: Optional[Iterable[LineItem]],
      market: Market,
      shipment: Shipment,
      currency: str,
      include_shipping: bool,
  ) -> list[OrderItem]:
    _require(market, "market")
    _require(shipment, "shipment")
    _require(currency, "currency")

    if line_items is None:
      line_items = shipment.line_items
    order_items = self.line_item_mapper.map_line_items(
        market, currency, shipment.shipping_address, line_items
    )
    if include_shipping:
      order_items.append(
          self.shipping_item_synthesizer.build_shipping_item(
              shipment, market, currency
          )
      )
    return order_items


def create_request_factory(
    configuration_loader: ConfigurationLoader,
    tax_calculator: RateTableTaxCalculator,
    reference_generator: Callable[[], str] = new_payee_reference,
) -> RequestFactory:
  """Wires a RequestFactory around a rate-table tax calculator."""
  return RequestFactory(
      configuration_loader=configuration_loader,
      line_item_mapper=LineItemMapper(tax_calculator, tax_calculator),
      shipping_item_synthesizer=ShippingItemSynthesizer(tax_calculator),
      order_totals_calculator=OrderGroupTotalsCalculator(
          tax_calculator, tax_calculator
      ),
      reference_generator=reference_generator,
  )
