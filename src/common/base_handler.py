"""
Base handler class implementing Template Method pattern for Lambda functions.
Provides consistent error handling, collaborator initialization, and logging.
"""

from abc import ABC, abstractmethod
import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Optional

from common.environment import Environment


def resolve_log_level(default: int = logging.INFO) -> int:
    """LOG_LEVEL as a logging level, falling back to default when unknown."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else default


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with a Z suffix."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class BaseLambdaHandler(ABC):
    """
    Abstract base class for Lambda handlers with common functionality.

    Subclasses must implement _execute() method with their specific logic.
    """

    def __init__(self, billing_config=None, environment: Optional[Environment] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.setLevel(resolve_log_level())
        self._billing_config = billing_config
        self._environment = environment

    @property
    def billing_config(self):
        """Lazy initialization of the process-wide billing configuration"""
        if self._billing_config is None:
            from common.billing_config import get_billing_config

            self._billing_config = get_billing_config()
        return self._billing_config

    @property
    def environment(self) -> Environment:
        """Lazy initialization of the environment view"""
        if self._environment is None:
            from common.environment import get_environment

            self._environment = get_environment()
        return self._environment

    def handle(self, event: dict, context: dict) -> dict:
        """
        Main entry point for Lambda handler (Template Method).

        Args:
            event: Lambda event dict
            context: Lambda context

        Returns:
            HTTP response dict with statusCode and body
        """
        try:
            self.logger.info(
                f"Received request: {self._http_method(event)} {self._path(event)}"
            )
            result = self._execute(event, context)
            self.logger.info("Handler completed successfully")
            return result
        except Exception as e:
            self.logger.error(f"Handler error: {e}", exc_info=True)
            return self._error_response(str(e), 500)

    @abstractmethod
    def _execute(self, event: dict, context: dict) -> dict:
        """
        Subclasses implement their specific logic here.

        Args:
            event: Lambda event dict
            context: Lambda context

        Returns:
            HTTP response dict
        """
        pass

    def _success_response(self, data: Any, status_code: int = 200) -> dict:
        """Standard success response format"""
        return {
            "statusCode": status_code,
            "headers": {
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": "*",
            },
            "body": json.dumps(data, default=str),
        }

    def _error_response(self, error: str, status_code: int, message: str = None) -> dict:
        """Standard error response format"""
        body = {"error": error}
        if message is not None:
            body["message"] = message

        return {
            "statusCode": status_code,
            "headers": {
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": "*",
            },
            "body": json.dumps(body),
        }

    def _http_method(self, event: dict) -> str:
        """HTTP method for REST (v1) and HTTP API (v2) payloads"""
        method = event.get("httpMethod")
        if not method:
            method = (event.get("requestContext") or {}).get("http", {}).get("method", "")
        return method.upper()

    def _path(self, event: dict) -> str:
        """Request path for REST (v1) and HTTP API (v2) payloads"""
        return event.get("path") or event.get("rawPath") or ""

    def _caller_id(self, event: dict) -> Optional[str]:
        """Authenticated caller id from the API Gateway authorizer, if any"""
        authorizer = (event.get("requestContext") or {}).get("authorizer") or {}

        claims = authorizer.get("claims") or (authorizer.get("jwt") or {}).get("claims") or {}
        if claims.get("sub"):
            return claims["sub"]

        return authorizer.get("principalId") or None
