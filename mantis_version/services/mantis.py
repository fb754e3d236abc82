# services/mantis.py

import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from mantis_version.core.errors import NetworkError, ResponseFormatError, TransportError
from mantis_version.models.schemas import (
    CreatedVersion,
    InputRecord,
    ProjectId,
    ProjectList,
    VersionRequest,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def build_async_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Shared AsyncClient for one run. Timeout stays at the httpx default."""
    return httpx.AsyncClient(headers={"Accept": "application/json"}, transport=transport)


class MantisService:
    def __init__(self, client: httpx.AsyncClient, inputs: InputRecord):
        self.client = client
        self.base_url = inputs.url.rstrip("/")
        # MantisHub takes the raw API token, no "Bearer" prefix
        self.headers = {
            "Authorization": inputs.api_key,
            "Content-Type": "application/json",
        }

    async def request(self, url: str, method: str = "GET", body: Optional[dict] = None) -> str:
        """Send one request and return the buffered response text.

        Raises NetworkError when no response arrives and TransportError for
        any status outside 2xx. There is exactly one attempt.
        """
        logger.info("Making request: %s %s", method, url)
        try:
            r = await self.client.request(method, url, headers=self.headers, json=body)
        except httpx.RequestError as exc:
            raise NetworkError(f"{method} {url} failed: {exc}") from exc

        if not 200 <= r.status_code < 300:
            raise TransportError(r.status_code, r.text)
        return r.text

    async def get_projects(self) -> ProjectList:
        text = await self.request(f"{self.base_url}/api/rest/projects")
        return self._parse(ProjectList, text)

    async def create_version(self, project_id: ProjectId, payload: VersionRequest) -> CreatedVersion:
        text = await self.request(
            f"{self.base_url}/api/rest/projects/{project_id}/versions",
            method="POST",
            body=payload.to_payload(),
        )
        return self._parse(CreatedVersion, text)

    @staticmethod
    def _parse(model: Type[M], text: str) -> M:
        try:
            parsed = model.model_validate_json(text)
        except SchemaError as exc:
            raise ResponseFormatError(f"Unexpected response from MantisHub: {text}") from exc
        logger.debug("Response: %s", parsed.model_dump())
        return parsed
