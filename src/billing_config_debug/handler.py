"""
Billing Configuration Debug Handler

Reports a redacted view of the billing configuration and whether the
billing secrets are configured, without exposing secret values.

Triggers:
- API Gateway GET /api/debug/billing-config
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from common.base_handler import BaseLambdaHandler
from common.environment import Environment

MISSING = "missing"
CONFIGURATION_ERROR = "Configuration error"
UNKNOWN_ERROR = "Unknown error"

STRIPE_PUBLISHABLE_KEY_VAR = "NEXT_PUBLIC_STRIPE_PUBLISHABLE_KEY"
STRIPE_SECRET_KEY_VAR = "STRIPE_SECRET_KEY"
STRIPE_WEBHOOK_SECRET_VAR = "STRIPE_WEBHOOK_SECRET"
SUPABASE_URL_VAR = "NEXT_PUBLIC_SUPABASE_URL"
NODE_ENV_VAR = "NODE_ENV"


class PlanDescriptor(BaseModel):
    """Redacted view of a single plan."""

    id: str
    name: str
    payment_type: str = Field(serialization_alias="paymentType")
    interval: Optional[str] = None
    line_items_count: int = Field(serialization_alias="lineItemsCount")
    price_id: str = Field(serialization_alias="priceId")

    model_config = ConfigDict(frozen=True)


class EnvironmentReport(BaseModel):
    """Secret presence flags plus non-secret passthrough values."""

    has_stripe_publishable_key: bool = Field(
        serialization_alias="hasStripePublishableKey"
    )
    has_stripe_secret_key: bool = Field(serialization_alias="hasStripeSecretKey")
    has_webhook_secret: bool = Field(serialization_alias="hasWebhookSecret")
    supabase_url: str = Field(serialization_alias="supabaseUrl")
    node_env: Optional[str] = Field(default=None, serialization_alias="nodeEnv")

    model_config = ConfigDict(frozen=True)


class DebugSummary(BaseModel):
    """Derived, never persisted."""

    provider: str
    product_count: int = Field(serialization_alias="productCount")
    plans: List[PlanDescriptor]
    environment: EnvironmentReport

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        """JSON form; an unset interval or nodeEnv is omitted, not null."""
        data = self.model_dump(mode="json", by_alias=True)
        for plan in data["plans"]:
            if plan["interval"] is None:
                del plan["interval"]
        if data["environment"]["nodeEnv"] is None:
            del data["environment"]["nodeEnv"]
        return data


def describe_plan(plan) -> PlanDescriptor:
    """Redact a plan down to its identifying fields and first price id."""
    line_items = list(plan.line_items)
    price_id = line_items[0].id if line_items else None

    return PlanDescriptor(
        id=plan.id,
        name=plan.name,
        payment_type=plan.payment_type,
        interval=plan.interval,
        line_items_count=len(line_items),
        price_id=price_id or MISSING,
    )


def build_environment_report(environment: Environment) -> EnvironmentReport:
    return EnvironmentReport(
        has_stripe_publishable_key=environment.has_value(STRIPE_PUBLISHABLE_KEY_VAR),
        has_stripe_secret_key=environment.has_value(STRIPE_SECRET_KEY_VAR),
        has_webhook_secret=environment.has_value(STRIPE_WEBHOOK_SECRET_VAR),
        supabase_url=environment.get_or_missing(SUPABASE_URL_VAR),
        node_env=environment.get(NODE_ENV_VAR),
    )


def build_debug_summary(billing_config, environment: Environment) -> DebugSummary:
    """
    Derive the debug summary for a billing configuration.

    Plans are listed in product order, then plan order within each product.

    Args:
        billing_config: Provider plus products -> plans -> line items tree
        environment: Read-only environment view

    Returns:
        DebugSummary with no secret values
    """
    products = list(billing_config.products)

    return DebugSummary(
        provider=billing_config.provider,
        product_count=len(products),
        plans=[describe_plan(plan) for product in products for plan in product.plans],
        environment=build_environment_report(environment),
    )


class BillingConfigDebugHandler(BaseLambdaHandler):
    """Handler reporting sanitized billing configuration state."""

    def _execute(self, event: dict, context: dict) -> dict:
        """
        Build the debug summary.

        Configuration faults are answered with a 500 so the endpoint stays
        usable while the configuration is broken.

        Args:
            event: API Gateway event
            context: Lambda context

        Returns:
            HTTP response
        """
        try:
            summary = build_debug_summary(self.billing_config, self.environment)
        except Exception as e:
            self.logger.error(f"Billing configuration error: {e}", exc_info=True)
            return self._error_response(
                CONFIGURATION_ERROR, 500, message=str(e) or UNKNOWN_ERROR
            )

        self.logger.info(
            f"Billing config summary: provider={summary.provider}, "
            f"products={summary.product_count}, plans={len(summary.plans)}"
        )
        return self._success_response(summary.to_dict())


def lambda_handler(event: dict, context: dict) -> dict:
    """Lambda handler entry point."""
    return BillingConfigDebugHandler().handle(event, context)
