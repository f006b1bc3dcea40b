"""
Billing configuration schema and loader.

Provides immutable Pydantic models for the billing configuration tree
(provider -> products -> plans -> line items) and a process-wide loader.
Field aliases match the camelCase JSON documents used by the web app.
"""

import json
import logging
import os
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from common.aws_client import get_parameter_value
from common.exceptions import ConfigurationException

logger = logging.getLogger(__name__)

DEFAULT_MONTHLY_PRICE_ID = "price_test_mock_monthly"
DEFAULT_ANNUAL_PRICE_ID = "price_test_mock_annual"


class PaymentType(str, Enum):
    """How a plan is charged."""

    ONE_TIME = "one-time"
    RECURRING = "recurring"


class LineItem(BaseModel):
    """A single provider price attached to a plan."""

    id: str = Field(description="Provider-assigned price identifier")
    name: Optional[str] = None
    cost: Optional[float] = None
    type: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Plan(BaseModel):
    """A purchasable plan within a product."""

    id: str
    name: str
    payment_type: PaymentType = Field(alias="paymentType")
    interval: Optional[str] = None
    line_items: Tuple[LineItem, ...] = Field(default=(), alias="lineItems")

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, use_enum_values=True
    )


class Product(BaseModel):
    """A product grouping one or more plans."""

    id: Optional[str] = None
    name: Optional[str] = None
    plans: Tuple[Plan, ...] = ()

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class BillingConfig(BaseModel):
    """Process-wide billing configuration, loaded once at startup."""

    provider: str
    products: Tuple[Product, ...] = ()

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def all_plans(self) -> Tuple[Plan, ...]:
        """Plans in product order, then plan order within each product."""
        return tuple(plan for product in self.products for plan in product.plans)


def default_billing_config() -> BillingConfig:
    """
    Built-in configuration: one Stripe product with monthly and annual plans.

    Price ids come from the environment so each deployment can point at its
    own Stripe prices.
    """
    return BillingConfig(
        provider="stripe",
        products=[
            {
                "id": "premium",
                "name": "HushPixel Premium",
                "plans": [
                    {
                        "id": "premium-monthly",
                        "name": "Premium Monthly - Only $0.83/day!",
                        "paymentType": "recurring",
                        "interval": "month",
                        "lineItems": [
                            {
                                "id": os.environ.get("HUSHPIXEL_PREMIUM_PRICE_ID")
                                or DEFAULT_MONTHLY_PRICE_ID,
                                "name": "Premium Monthly",
                                "cost": 24.99,
                                "type": "flat",
                            }
                        ],
                    },
                    {
                        "id": "premium-annual",
                        "name": "Premium Annual - Only $0.55/day! Save 33%",
                        "paymentType": "recurring",
                        "interval": "year",
                        "lineItems": [
                            {
                                "id": os.environ.get(
                                    "HUSHPIXEL_PREMIUM_ANNUAL_PRICE_ID"
                                )
                                or DEFAULT_ANNUAL_PRICE_ID,
                                "name": "Premium Annual (Save 33%)",
                                "cost": 199.99,
                                "type": "flat",
                            }
                        ],
                    },
                ],
            }
        ],
    )


def parse_billing_config(document: str, source: str = "document") -> BillingConfig:
    """
    Parse a JSON billing configuration document.

    Raises:
        ConfigurationException: If the document is not valid JSON or does not
            match the billing schema
    """
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        raise ConfigurationException(
            f"Billing configuration in {source} is not valid JSON: {e}"
        ) from e

    try:
        return BillingConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationException(
            f"Billing configuration in {source} is invalid: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e


def load_billing_config() -> BillingConfig:
    """
    Load the billing configuration.

    Sources, in order: SSM parameter (BILLING_CONFIG_SSM_PARAMETER),
    JSON file (BILLING_CONFIG_PATH), then the built-in default.
    """
    parameter = os.environ.get("BILLING_CONFIG_SSM_PARAMETER")
    if parameter:
        logger.info(f"Loading billing configuration from SSM: {parameter}")
        return parse_billing_config(get_parameter_value(parameter), source=parameter)

    path = os.environ.get("BILLING_CONFIG_PATH")
    if path:
        logger.info(f"Loading billing configuration from file: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                document = f.read()
        except OSError as e:
            raise ConfigurationException(
                f"Unable to read billing configuration file {path}: {e}"
            ) from e
        return parse_billing_config(document, source=path)

    logger.info("Using built-in billing configuration")
    return default_billing_config()


@lru_cache(maxsize=1)
def get_billing_config() -> BillingConfig:
    """Process-wide billing configuration (loaded on first use)."""
    return load_billing_config()
