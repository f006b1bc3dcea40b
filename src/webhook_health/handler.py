"""Webhook Health Check - Confirm the billing webhook URL is reachable and logging works"""

from common.base_handler import BaseLambdaHandler, utc_timestamp
from common.exceptions import LoggerException
from common.structured_logging import acquire_logger

WEBHOOK_HEALTH_ENDPOINT = "/api/billing/webhook/health"

HEALTH_EVENTS = {
    "GET": (
        "webhook-health-check",
        "Webhook health check endpoint accessed",
        "Webhook endpoint is accessible and logging is working",
    ),
    "POST": (
        "webhook-health-check-post",
        "Webhook health check POST endpoint accessed",
        "Webhook POST endpoint is accessible and logging is working",
    ),
}


class WebhookHealthHandler(BaseLambdaHandler):
    """Handler for webhook health checks."""

    def _execute(self, event: dict, context: dict) -> dict:
        """
        Handle webhook health check.

        Emits one structured log record, then echoes a healthy status.
        Any method other than POST is answered as a GET probe.

        Args:
            event: Lambda event
            context: Lambda context

        Returns:
            HTTP response
        """
        method = "POST" if self._http_method(event) == "POST" else "GET"
        event_name, log_message, message = HEALTH_EVENTS[method]

        self._log_health_check(event_name, log_message)

        payload = {"status": "healthy"}
        if method == "POST":
            payload["method"] = "POST"
        payload.update(
            {
                "timestamp": utc_timestamp(),
                "endpoint": WEBHOOK_HEALTH_ENDPOINT,
                "message": message,
            }
        )
        return self._success_response(payload)

    def _log_health_check(self, event_name: str, log_message: str) -> None:
        # Logging failures never fail the probe
        try:
            with acquire_logger("webhook-health") as logger:
                logger.info(
                    {
                        "name": event_name,
                        "timestamp": utc_timestamp(),
                        "endpoint": WEBHOOK_HEALTH_ENDPOINT,
                    },
                    log_message,
                )
        except LoggerException as e:
            self.logger.warning(f"Health check logging unavailable: {e}")


def lambda_handler(event: dict, context: dict) -> dict:
    """Lambda handler entry point."""
    handler = WebhookHealthHandler()
    return handler.handle(event, context)
