from dataclasses import dataclass, field
from typing import Any

import httpx

from contact_manager.core.dto.contact import ContactModel, FieldErrorModel
from contact_manager.infrastructure.config.config import CLIENT_CONFIG
from contact_manager.infrastructure.logging import get_logger


logger = get_logger(__name__)


class NetworkFault(Exception):
    """Запрос к API не удалось выполнить (нет соединения, таймаут, не-JSON ответ)"""


@dataclass
class ApiResult:
    success: bool
    message: str = ""
    data: Any = None
    errors: list[FieldErrorModel] = field(default_factory=list)
    count: int | None = None

    @classmethod
    def from_envelope(cls, payload: dict) -> "ApiResult":
        data = payload.get("data")
        if isinstance(data, list):
            data = [ContactModel.model_validate(item) for item in data]
        elif isinstance(data, dict):
            data = ContactModel.model_validate(data)
        return cls(
            success=bool(payload.get("success")),
            message=payload.get("message") or "",
            data=data,
            errors=[FieldErrorModel.model_validate(error) for error in payload.get("errors") or []],
            count=payload.get("count"),
        )


class ContactsApiClient:

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or CLIENT_CONFIG.CONTACTS_API_URL,
            timeout=timeout or CLIENT_CONFIG.CONTACTS_API_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "ContactsApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, json: dict | None = None) -> ApiResult:
        try:
            response = await self._client.request(method, url, json=json)
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("api_request_failed", method=method, url=url, error=str(exc))
            raise NetworkFault(str(exc)) from exc

        if not isinstance(payload, dict):
            raise NetworkFault(f"Unexpected response from {method} {url}")
        return ApiResult.from_envelope(payload)

    async def list_contacts(self) -> ApiResult:
        return await self._request("GET", "/api/contacts")

    async def create_contact(self, payload: dict[str, str]) -> ApiResult:
        return await self._request("POST", "/api/contacts", json=payload)

    async def update_contact(self, contact_id: str, payload: dict[str, str]) -> ApiResult:
        return await self._request("PUT", f"/api/contacts/{contact_id}", json=payload)

    async def delete_contact(self, contact_id: str) -> ApiResult:
        return await self._request("DELETE", f"/api/contacts/{contact_id}")

    async def health(self) -> ApiResult:
        return await self._request("GET", "/api/health")
