"""
Bearer-token REST client for the Users resource
Returns raw response envelopes, never interprets them
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import BaseModel

from users_contract.config import TestConfig, get_config
from users_contract.errors import TransportError

logger = logging.getLogger(__name__)

USERS_ENDPOINT = "/users"

Payload = Union[BaseModel, Dict[str, Any]]


@dataclass
class ApiResponse:
    """Raw (status code, body) envelope of one remote call"""
    method: str
    url: str
    status_code: int
    text: str
    elapsed: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


class RestClient:
    """Lightweight REST client with bearer authentication"""

    def __init__(self, config: Optional[TestConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or get_config()
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_token}",
        }

    @staticmethod
    def _body(data: Optional[Payload]) -> Optional[Dict[str, Any]]:
        if isinstance(data, BaseModel):
            return data.model_dump()
        return data

    async def request(self, method: str, endpoint: str, data: Optional[Payload] = None,
                      params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Make one REST request; httpx transport errors become TransportError"""
        method = method.upper()
        if method not in ("GET", "POST", "PUT", "PATCH", "DELETE"):
            raise ValueError(f"Unsupported method: {method}")

        url = f"{self.config.api_base_url.rstrip('/')}{endpoint}"
        body = self._body(data)

        logger.debug(f"{method} {url} payload={body}")
        start_time = time.time()
        try:
            async with httpx.AsyncClient(timeout=self.config.request_timeout, transport=self._transport) as client:
                response = await client.request(method, url, headers=self._headers(), json=body, params=params)
        except httpx.RequestError as e:
            logger.error(f"{method} {url} failed before a response arrived: {e}")
            raise TransportError(method, url, e) from e
        elapsed = time.time() - start_time

        logger.info(f"{method} {url} -> {response.status_code} ({elapsed:.3f}s)")
        return ApiResponse(
            method=method,
            url=url,
            status_code=response.status_code,
            text=response.text,
            elapsed=elapsed,
        )

    async def list_users(self, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.request("GET", USERS_ENDPOINT, params=params)

    async def create_user(self, payload: Payload) -> ApiResponse:
        return await self.request("POST", USERS_ENDPOINT, data=payload)

    async def get_user(self, user_id: int) -> ApiResponse:
        return await self.request("GET", f"{USERS_ENDPOINT}/{user_id}")

    async def update_user_put(self, user_id: int, payload: Payload) -> ApiResponse:
        return await self.request("PUT", f"{USERS_ENDPOINT}/{user_id}", data=payload)

    async def update_user_patch(self, user_id: int, payload: Payload) -> ApiResponse:
        return await self.request("PATCH", f"{USERS_ENDPOINT}/{user_id}", data=payload)

    async def delete_user(self, user_id: int) -> ApiResponse:
        return await self.request("DELETE", f"{USERS_ENDPOINT}/{user_id}")
