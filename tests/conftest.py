"""
Pytest configuration — adds src/ to the path so all modules can be imported.
"""

import sys
import os

import pytest

# Add the src directory so Lambda modules can be imported without packaging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

# Pre-import handler modules so @patch decorators can resolve dotted paths
import webhook_health.handler  # noqa: F401,E402
import billing_config_debug.handler  # noqa: F401,E402
import env_debug.handler  # noqa: F401,E402

from common.billing_config import BillingConfig, get_billing_config  # noqa: E402


@pytest.fixture(autouse=True)
def clear_billing_config_cache():
    """Each test starts without a cached process-wide billing configuration."""
    get_billing_config.cache_clear()
    yield
    get_billing_config.cache_clear()


@pytest.fixture
def sample_billing_config():
    """Two products with three plans, one of them without line items."""
    return BillingConfig.model_validate(
        {
            "provider": "stripe",
            "products": [
                {
                    "id": "premium",
                    "name": "Premium",
                    "plans": [
                        {
                            "id": "premium-monthly",
                            "name": "Premium Monthly",
                            "paymentType": "recurring",
                            "interval": "month",
                            "lineItems": [
                                {"id": "price_monthly", "name": "Monthly", "cost": 24.99},
                                {"id": "price_monthly_addon", "name": "Add-on"},
                            ],
                        },
                        {
                            "id": "premium-annual",
                            "name": "Premium Annual",
                            "paymentType": "recurring",
                            "interval": "year",
                            "lineItems": [{"id": "price_annual"}],
                        },
                    ],
                },
                {
                    "id": "credits",
                    "name": "Credit Pack",
                    "plans": [
                        {
                            "id": "credits-100",
                            "name": "100 Credits",
                            "paymentType": "one-time",
                            "lineItems": [],
                        }
                    ],
                },
            ],
        }
    )
