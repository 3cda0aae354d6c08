"""Owner entity models and pipeline value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

# --- Rejection reason codes (stable strings aggregated by QA tooling) ---
EMPTY_AFTER_CLEAN = "empty_after_clean"
PLACEHOLDER_ENTRY = "placeholder_entry"
EMPTY_AFTER_AFFIX_REMOVAL = "empty_after_affix_removal"
SINGLE_TOKEN_NO_FALLBACK = "single_token_no_fallback"
UNABLE_TO_CLASSIFY_PERSON = "unable_to_classify_person"

REASON_CODES = frozenset({
    EMPTY_AFTER_CLEAN,
    PLACEHOLDER_ENTRY,
    EMPTY_AFTER_AFFIX_REMOVAL,
    SINGLE_TOKEN_NO_FALLBACK,
    UNABLE_TO_CLASSIFY_PERSON,
})

FIRST_LAST = "firstLast"
LAST_FIRST = "lastFirst"

CURRENT_CONTEXT = "current"
PRIOR_UNMATCHED_CONTEXT = "prior_unmatched"
UNDATED_CONTEXT = "undated"


class Person(BaseModel, frozen=True):
    type: Literal["person"] = "person"
    prefix_name: Optional[str] = None
    first_name: str = Field(min_length=1)
    middle_name: Optional[str] = None
    last_name: str = Field(min_length=1)
    suffix_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        parts = [self.prefix_name, self.first_name, self.middle_name, self.last_name, self.suffix_name]
        return " ".join(p for p in parts if p)


class Company(BaseModel, frozen=True):
    type: Literal["company"] = "company"
    name: str = Field(min_length=1)

    @property
    def display_name(self) -> str:
        return self.name


OwnerEntity = Annotated[Union[Person, Company], Field(discriminator="type")]


class InvalidOwnerEntry(BaseModel, frozen=True):
    raw: str
    reason: str


class OwnershipGroup(BaseModel):
    """Deduplicated owners for one point in time ("current", ISO date, unknown_date_N)."""

    key: str
    owners: List[OwnerEntity] = Field(default_factory=list)


class OwnerRecord(BaseModel):
    groups: List[OwnershipGroup] = Field(default_factory=list)
    invalid_owners: List[InvalidOwnerEntry] = Field(default_factory=list)

    @property
    def owners_by_date(self) -> Dict[str, List[OwnerEntity]]:
        return {group.key: list(group.owners) for group in self.groups}

    def to_json(self, emit_null_fields: bool = False) -> Dict[str, Any]:
        """Return the JSON-serializable output record.

        Absent optional Person fields are either all omitted or all emitted
        as null, never mixed within one record.
        """
        return {
            "owners_by_date": {
                group.key: [
                    owner.model_dump(mode="json", exclude_none=not emit_null_fields)
                    for owner in group.owners
                ]
                for group in self.groups
            },
            "invalid_owners": [entry.model_dump(mode="json") for entry in self.invalid_owners],
        }

    def to_property_json(self, parcel_id: Optional[str], emit_null_fields: bool = False) -> Dict[str, Any]:
        """Wrap the record under a ``property_<parcel_id>`` key."""
        payload = self.to_json(emit_null_fields=emit_null_fields)
        return {
            f"property_{parcel_id or 'unknown_id'}": {"owners_by_date": payload["owners_by_date"]},
            "invalid_owners": payload["invalid_owners"],
        }


@dataclass(frozen=True, slots=True)
class RawOwnerMention:
    """One scraped owner string and the point in time it refers to.

    ``context`` is "current", an ISO date (YYYY-MM-DD), "undated" for a sale
    grantee whose transfer date is unknown, or "prior_unmatched".
    """

    text: str
    context: str = CURRENT_CONTEXT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawOwnerMention":
        if not isinstance(data, dict) or "text" not in data:
            raise ValueError(f"Owner mention needs a \"text\" field: {data!r}")
        return cls(text=str(data.get("text") or ""), context=str(data.get("context") or CURRENT_CONTEXT))


@dataclass(frozen=True, slots=True)
class SegmentHints:
    has_comma: bool = False
    is_all_caps: bool = False
    preferred_order: Optional[str] = None


@dataclass(frozen=True, slots=True)
class NameSegment:
    text: str
    hints: SegmentHints = field(default_factory=SegmentHints)


@dataclass(frozen=True, slots=True)
class Reject:
    reason: str
    raw: str
