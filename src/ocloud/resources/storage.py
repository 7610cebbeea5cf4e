"""Object Storage bucket records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from ocloud.resources.base import Columns, Resource, pick_bool, pick_dict, pick_str
from ocloud.search.base_search import FieldDeclaration, normalize
from ocloud.search.tags import tag_fields


@dataclass(slots=True)
class Bucket(Resource):
    ocid: str
    name: str
    namespace: str = ""
    storage_tier: str = ""
    visibility: str = ""
    encryption: str = ""
    versioning: str = ""
    replication_enabled: bool = False
    is_read_only: bool = False
    time_created: str = ""
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Bucket":
        kms_key = pick_str(data, "kms-key-id")
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            name=pick_str(data, "name", "display-name"),
            namespace=pick_str(data, "namespace"),
            storage_tier=pick_str(data, "storage-tier"),
            visibility=pick_str(data, "public-access-type", "visibility"),
            encryption=pick_str(data, "encryption") or ("Customer-managed" if kms_key else "Oracle-managed"),
            versioning=pick_str(data, "versioning"),
            replication_enabled=bool(pick_bool(data, "replication-enabled")),
            is_read_only=bool(pick_bool(data, "is-read-only")),
            time_created=pick_str(data, "time-created"),
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    @property
    def display_name(self) -> str:
        return self.name

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.name),
            "OCID": normalize(self.ocid),
            "Namespace": normalize(self.namespace),
            "StorageTier": normalize(self.storage_tier),
            "Visibility": normalize(self.visibility),
            "Encryption": normalize(self.encryption),
            "Versioning": normalize(self.versioning),
            "ReplicationEnabled": "true" if self.replication_enabled else "false",
            "IsReadOnly": "true" if self.is_read_only else "false",
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


BUCKET_FIELDS = FieldDeclaration(
    searchable=(
        "Name", "OCID", "Namespace", "StorageTier", "Visibility", "Encryption",
        "Versioning", "ReplicationEnabled", "IsReadOnly", "TagsKV", "TagsVal",
    ),
    boosted=("Name", "OCID", "Namespace", "TagsKV", "TagsVal"),
)

BUCKET_COLUMNS: Columns = (
    ("Name", "name"),
    ("Namespace", "namespace"),
    ("Tier", "storage_tier"),
    ("Visibility", "visibility"),
    ("Created", "time_created"),
)
