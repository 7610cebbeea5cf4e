"""Identity domain records: compartments and IAM policies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from ocloud.resources.base import Columns, Resource, pick_dict, pick_list, pick_str
from ocloud.search.base_search import FieldDeclaration, normalize
from ocloud.search.tags import tag_fields


@dataclass(slots=True)
class Compartment(Resource):
    ocid: str
    display_name: str
    description: str = ""
    state: str = ""
    time_created: str = ""
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Compartment":
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "name", "display-name"),
            description=pick_str(data, "description"),
            state=pick_str(data, "lifecycle-state"),
            time_created=pick_str(data, "time-created"),
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "Description": normalize(self.description),
            "OCID": normalize(self.ocid),
            "State": normalize(self.state),
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


COMPARTMENT_FIELDS = FieldDeclaration(
    searchable=("Name", "Description", "OCID", "State", "TagsKV", "TagsVal"),
    boosted=("Name", "OCID", "TagsKV", "TagsVal"),
)

COMPARTMENT_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("State", "state"),
    ("Description", "description"),
    ("OCID", "ocid"),
)


@dataclass(slots=True)
class Policy(Resource):
    """An IAM policy and its statements."""

    ocid: str
    display_name: str
    description: str = ""
    statements: List[str] = field(default_factory=list)
    time_created: str = ""
    freeform_tags: Dict[str, str] = field(default_factory=dict)
    defined_tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Policy":
        return cls(
            ocid=pick_str(data, "id", "ocid"),
            display_name=pick_str(data, "name", "display-name"),
            description=pick_str(data, "description"),
            statements=[str(s) for s in pick_list(data, "statements", "statement")],
            time_created=pick_str(data, "time-created"),
            freeform_tags=pick_dict(data, "freeform-tags"),
            defined_tags=pick_dict(data, "defined-tags"),
        )

    @property
    def statement_count(self) -> int:
        return len(self.statements)

    def to_indexable(self) -> Dict[str, str]:
        return {
            "Name": normalize(self.display_name),
            "Description": normalize(self.description),
            "OCID": normalize(self.ocid),
            "Statements": normalize(" ".join(self.statements)),
            **tag_fields(self.freeform_tags, self.defined_tags),
        }


POLICY_FIELDS = FieldDeclaration(
    searchable=("Name", "Description", "OCID", "Statements", "TagsKV", "TagsVal"),
    boosted=("Name", "OCID", "Statements", "TagsKV", "TagsVal"),
)

POLICY_COLUMNS: Columns = (
    ("Name", "display_name"),
    ("Statements", "statement_count"),
    ("Description", "description"),
    ("OCID", "ocid"),
)
