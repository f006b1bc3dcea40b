"""
Environment Debug Handler

Reports deployment environment values for an authenticated caller and
checks that both Supabase clients can reach their APIs. Secret values are
reported only as SET / MISSING.

Triggers:
- API Gateway GET /api/debug/env (behind an authorizer)
"""

from typing import Optional

from common.base_handler import BaseLambdaHandler, utc_timestamp
from common.environment import Environment
from common.exceptions import UnauthorizedException
from common.supabase_client import SupabaseProbeClient


class EnvDebugHandler(BaseLambdaHandler):
    """Handler for environment diagnostics."""

    def __init__(
        self,
        environment: Optional[Environment] = None,
        supabase_client: Optional[SupabaseProbeClient] = None,
    ):
        super().__init__(environment=environment)
        self._supabase_client = supabase_client

    @property
    def supabase_client(self) -> SupabaseProbeClient:
        """Lazy initialization of the Supabase probe client"""
        if self._supabase_client is None:
            env = self.environment
            self._supabase_client = SupabaseProbeClient(
                url=env.get("NEXT_PUBLIC_SUPABASE_URL", ""),
                anon_key=env.get("NEXT_PUBLIC_SUPABASE_ANON_KEY", ""),
                service_role_key=env.get("SUPABASE_SERVICE_ROLE_KEY", ""),
            )
        return self._supabase_client

    def _execute(self, event: dict, context: dict) -> dict:
        try:
            user_id = self._require_caller(event)
        except UnauthorizedException as e:
            self.logger.warning(f"Rejected environment debug request: {e}")
            return self._error_response("Unauthorized", 401)

        env = self.environment
        environment = {
            "NODE_ENV": env.get("NODE_ENV"),
            "NEXT_PUBLIC_SITE_URL": env.get("NEXT_PUBLIC_SITE_URL"),
            "NEXT_PUBLIC_SUPABASE_URL": env.get("NEXT_PUBLIC_SUPABASE_URL"),
            "NEXT_PUBLIC_SUPABASE_ANON_KEY": env.set_or_missing(
                "NEXT_PUBLIC_SUPABASE_ANON_KEY"
            ),
            "SUPABASE_SERVICE_ROLE_KEY": env.set_or_missing(
                "SUPABASE_SERVICE_ROLE_KEY"
            ),
            "timestamp": utc_timestamp(),
            "userId": user_id,
        }

        client = self.supabase_client
        return self._success_response(
            {
                "environment": environment,
                "supabaseClient": client.probe_rest(),
                "adminClient": client.probe_admin(),
                "timestamp": utc_timestamp(),
            }
        )

    def _require_caller(self, event: dict) -> str:
        user_id = self._caller_id(event)
        if not user_id:
            raise UnauthorizedException("No authenticated caller on request")
        return user_id


def lambda_handler(event: dict, context: dict) -> dict:
    """Lambda handler entry point."""
    return EnvDebugHandler().handle(event, context)
