from typing import Any, Optional
from config import Settings
from core.schemas import NookalAppointmentRequest
import httpx
import logging

logger = logging.getLogger(__name__)


class NookalApiError(Exception):
    """Nookal answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Nookal API returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class NookalApi:

    def __init__(self, api_key: str, base_url: str = "https://au-apiv3.nookal.com",
                 timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json"
        }

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "NookalApi":
        if not settings.nookal_api_key:
            raise ValueError("Nookal API key not configured")
        return cls(
            api_key=settings.nookal_api_key,
            base_url=settings.nookal_api_url,
            timeout=settings.nookal_timeout_seconds,
            transport=transport,
        )

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        url = f"{self.base_url}{endpoint}"

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport, follow_redirects=True) as client:
            response = await client.request(method, url, headers=self.headers, **kwargs)

        if not response.is_success:
            raise NookalApiError(response.status_code, response.text)
        return response.json()

    async def create_appointment(self, appointment: NookalAppointmentRequest) -> Any:
        endpoint = "/appointments"
        return await self._request("POST", endpoint, json=appointment.model_dump())
