"""Connectors that read OCI CLI JSON exports from disk or over HTTP.

An export for resource type ``key`` is the output of the matching
``oci ... list --all`` command saved as ``<key>.json``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from ocloud.config import ExportConfig, Settings
from ocloud.connectors.base_connector import BaseConnector, unwrap_payload
from ocloud.exceptions import ConnectorError

logger = logging.getLogger(__name__)


class DirectoryExportConnector(BaseConnector):
    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def path_for(self, resource_key: str) -> Path:
        return self.directory / f"{resource_key}.json"

    async def fetch_records(self, resource_key: str) -> List[Dict[str, Any]]:
        path = self.path_for(resource_key)
        if not path.is_file():
            logger.info("No export found at %s; treating as empty", path)
            return []
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
            payload = json.loads(text)
        except (OSError, ValueError) as exc:
            raise ConnectorError(f"Failed to read export {path}: {exc}") from exc
        records = unwrap_payload(payload, str(path))
        logger.debug("Read %d %s record(s) from %s", len(records), resource_key, path)
        return records


class HttpExportConnector(BaseConnector):
    """Fetches ``{base_url}/{key}.json`` with an optional bearer token."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            verify=self.verify_ssl,
            headers=headers,
            transport=self._transport,
        )

    async def fetch_records(self, resource_key: str) -> List[Dict[str, Any]]:
        url = f"/{resource_key}.json"
        try:
            async with self._client() as client:
                resp = await client.get(url)
                if resp.status_code == 404:
                    logger.info("No export at %s%s; treating as empty", self.base_url, url)
                    return []
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as exc:
            raise ConnectorError(
                f"Export fetch for '{resource_key}' failed with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ConnectorError(f"Export fetch for '{resource_key}' failed: {exc}") from exc
        except ValueError as exc:
            raise ConnectorError(f"Export for '{resource_key}' is not valid JSON") from exc
        records = unwrap_payload(payload, f"{self.base_url}{url}")
        logger.debug("Fetched %d %s record(s) from %s", len(records), resource_key, self.base_url)
        return records


def make_connector(settings: Settings | ExportConfig) -> BaseConnector:
    """HTTP connector when ``export.base_url`` is set, directory connector otherwise."""
    cfg = settings.export if isinstance(settings, Settings) else settings
    if cfg.base_url:
        return HttpExportConnector(
            base_url=cfg.base_url,
            token=cfg.token,
            timeout=cfg.timeout,
            verify_ssl=cfg.verify_ssl,
        )
    return DirectoryExportConnector(cfg.directory)
