"""
AWS client factory for the diagnostic handlers.
Billing configuration documents may be stored in SSM Parameter Store.
"""

import logging
import os

import boto3

from common.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


def get_ssm_client(region: str = None):
    """Return a boto3 SSM client for the configured region."""
    region = region or os.environ.get("AWS_REGION", "us-east-1")
    return boto3.client("ssm", region_name=region)


def get_parameter_value(name: str, region: str = None) -> str:
    """
    Fetch a (possibly encrypted) parameter from SSM Parameter Store.

    Args:
        name: Parameter name, e.g. /billing/config
        region: AWS region override

    Returns:
        The decrypted parameter value

    Raises:
        ConfigurationException: If the parameter cannot be fetched
    """
    client = get_ssm_client(region)
    logger.info(f"Fetching SSM parameter: {name}")

    try:
        response = client.get_parameter(Name=name, WithDecryption=True)
    except Exception as e:
        raise ConfigurationException(
            f"Unable to read SSM parameter {name}: {e}", details={"parameter": name}
        ) from e

    return response["Parameter"]["Value"]
