"""Owner name resolution: scraped owner strings to typed, dated owner records."""

from owner_resolution.classifier import ClassifierOptions, classify
from owner_resolution.collector import InvalidOwnerCollector
from owner_resolution.company import normalize_company
from owner_resolution.config import ResolverSettings
from owner_resolution.dedup import dedupe, owner_key
from owner_resolution.grouper import build_owner_record, group
from owner_resolution.models import (
    Company,
    InvalidOwnerEntry,
    NameSegment,
    OwnerRecord,
    OwnershipGroup,
    Person,
    RawOwnerMention,
    Reject,
)
from owner_resolution.person_parser import parse_person
from owner_resolution.pipeline import resolve_mention
from owner_resolution.segmenter import segment

__all__ = [
    "ClassifierOptions",
    "Company",
    "InvalidOwnerCollector",
    "InvalidOwnerEntry",
    "NameSegment",
    "OwnerRecord",
    "OwnershipGroup",
    "Person",
    "RawOwnerMention",
    "Reject",
    "ResolverSettings",
    "build_owner_record",
    "classify",
    "dedupe",
    "group",
    "normalize_company",
    "owner_key",
    "parse_person",
    "resolve_mention",
    "segment",
]
