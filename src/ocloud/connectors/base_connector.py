"""Base interface for resource export connectors.

Connectors hand back raw payload dicts for one resource type. Mapping them to
typed records, paginating, and searching is done by the service layer.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ocloud.exceptions import ConnectorError


class BaseConnector(ABC):
    """Abstract connector interface.

    Implementations should be safe to construct without side effects and should
    not perform I/O until methods are invoked.
    """

    @abstractmethod
    async def fetch_records(self, resource_key: str) -> List[Dict[str, Any]]:
        """Fetch every raw record exported for ``resource_key``, in export order."""
        raise NotImplementedError


def unwrap_payload(payload: Any, source: str) -> List[Dict[str, Any]]:
    """Accept OCI CLI output (``{"data": [...]}``) or a bare list of objects."""
    if isinstance(payload, dict) and "data" in payload:
        payload = payload["data"]
    if not isinstance(payload, list):
        raise ConnectorError(f"Export {source} must contain a list or a 'data' list")
    bad = [i for i, item in enumerate(payload) if not isinstance(item, dict)]
    if bad:
        raise ConnectorError(f"Export {source} has non-object entries at positions {bad[:5]}")
    return payload
