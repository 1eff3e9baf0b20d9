# ingestion/rpc_client.py
from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Optional

import requests

from common.settings import Settings

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}


class RpcClient:
    """
    Single-endpoint JSON-RPC 2.0 client.

    call() returns the `result` member of the response, or None when the
    request failed. HTTP 429 is retried with exponential backoff
    (initial_delay_ms, doubled after every attempt) up to max_attempts;
    every other failure is logged and not retried.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 30.0,
        max_attempts: int = 5,
        initial_delay_ms: float = 1000,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.url = url
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.initial_delay_ms = initial_delay_ms
        self._sleep = sleep

    @classmethod
    def from_settings(cls, st: Settings, **kwargs) -> "RpcClient":
        return cls(
            st.rpc.url,
            timeout=st.rpc.timeout,
            max_attempts=st.retry.max_attempts,
            initial_delay_ms=st.retry.initial_delay_ms,
            **kwargs,
        )

    @staticmethod
    def payload(method: str, params: List[Any]) -> dict:
        return {"jsonrpc": "2.0", "id": 1, "method": method, "params": list(params)}

    def call(self, method: str, params: List[Any]) -> Optional[Any]:
        payload = self.payload(method, params)
        delay_ms = self.initial_delay_ms
        for attempt in range(1, self.max_attempts + 1):
            try:
                resp = requests.post(self.url, json=payload, headers=HEADERS, timeout=self.timeout)
                if resp.status_code == 429:
                    logger.warning(
                        "Rate limited on %s (attempt %d/%d), retrying in %.1fs",
                        method, attempt, self.max_attempts, delay_ms / 1000,
                    )
                    self._sleep(delay_ms / 1000)
                    delay_ms *= 2
                    continue
                resp.raise_for_status()
                data = resp.json()
            except requests.JSONDecodeError as e:
                logger.error("RPC response for %s is not JSON: %s", method, e)
                return None
            except requests.RequestException as e:
                logger.error("RPC transport failed for %s url=%s: %s", method, self.url, e)
                return None

            if not isinstance(data, dict):
                logger.error("RPC response for %s is not an object: %r", method, data)
                return None
            if "error" in data:
                logger.error("RPC error for %s: %s", method, data["error"])
                return None
            if "result" not in data:
                logger.error("RPC response for %s has no result", method)
                return None
            return data["result"]

        logger.error("RPC %s still rate limited after %d attempts, giving up", method, self.max_attempts)
        return None
