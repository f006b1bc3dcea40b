"""
Supabase reachability probes for the environment debug endpoint.

Each probe issues one small read against Supabase and reports the outcome
as "SUCCESS" or "ERROR: <message>" rather than raising.
"""

import logging
import os
from typing import Optional

import requests

logger = logging.getLogger(__name__)

SUCCESS = "SUCCESS"
DEFAULT_TIMEOUT = 5.0


class SupabaseProbeClient:
    """
    Minimal client for the Supabase REST and GoTrue admin APIs.
    Only performs read-only probes.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        anon_key: Optional[str] = None,
        service_role_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the probe client.

        Args:
            url: Supabase project URL. Defaults to NEXT_PUBLIC_SUPABASE_URL.
            anon_key: Public anon key. Defaults to NEXT_PUBLIC_SUPABASE_ANON_KEY.
            service_role_key: Service role key. Defaults to SUPABASE_SERVICE_ROLE_KEY.
            timeout: Per-request timeout in seconds. Defaults to SUPABASE_PROBE_TIMEOUT.
        """
        # Only None falls back to os.environ; "" means explicitly unset
        if url is None:
            url = os.environ.get("NEXT_PUBLIC_SUPABASE_URL", "")
        if anon_key is None:
            anon_key = os.environ.get("NEXT_PUBLIC_SUPABASE_ANON_KEY")
        if service_role_key is None:
            service_role_key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")
        if timeout is None:
            timeout = float(os.environ.get("SUPABASE_PROBE_TIMEOUT", DEFAULT_TIMEOUT))

        self.base_url = url.rstrip("/")
        self.anon_key = anon_key
        self.service_role_key = service_role_key
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def probe_rest(self) -> str:
        """Select one account id through PostgREST with the anon key."""
        return self._probe(
            "/rest/v1/accounts",
            self.anon_key,
            "NEXT_PUBLIC_SUPABASE_ANON_KEY",
            params={"select": "id", "limit": 1},
        )

    def probe_admin(self) -> str:
        """List a single user through the admin API with the service role key."""
        return self._probe(
            "/auth/v1/admin/users",
            self.service_role_key,
            "SUPABASE_SERVICE_ROLE_KEY",
            params={"page": 1, "per_page": 1},
        )

    def _probe(self, path: str, key: Optional[str], key_name: str, params: dict) -> str:
        if not self.base_url:
            return "ERROR: NEXT_PUBLIC_SUPABASE_URL is not configured"
        if not key:
            return f"ERROR: {key_name} is not configured"

        headers = {"apikey": key, "Authorization": f"Bearer {key}"}
        try:
            response = self.session.get(
                f"{self.base_url}{path}",
                headers=headers,
                params=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Supabase probe %s failed: %s", path, e)
            return f"ERROR: {e}"

        logger.info("Supabase probe %s succeeded", path)
        return SUCCESS
