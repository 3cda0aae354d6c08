"""
Owner Resolution Configuration.

Tunables for the owner-name engine. Values can be overridden through
OWNER_RESOLUTION_* environment variables; ResolverSettings snapshots them
so a run does not depend on module state.
"""

import os
from typing import Dict, Optional

from pydantic import BaseModel, Field

# Candidate scoring weights (person name order inference)
SCORE_WEIGHTS: Dict[str, float] = {
    "nontrivial_first": 2.0,
    "nontrivial_last": 2.0,
    "carried_surname_match": 1.5,
    "preferred_order": 0.5,
    "common_first_name": 1.0,
    "prefix_first_last": 0.5,
    "common_first_as_last": -1.0,
    "initial_first": -2.0,
    "initial_last": -1.0,
    "affix_as_name": -10.0,
}

# Grantor/grantee tables list surname first far more often than not
TIE_BREAK_ORDER = "lastFirst"

# Treat "50%" / "(1/2 INT)" annotations as an organisational signal
SHARE_ANNOTATIONS_AS_COMPANY = False

# rapidfuzz token_sort_ratio needed to call a grantor "already listed"
PRIOR_OWNER_MATCH_THRESHOLD = 92

# Absent optional Person fields: omit (False) or emit null (True)
EMIT_NULL_FIELDS = False

# Group keys
CURRENT_KEY = "current"
UNKNOWN_GROUP_PREFIX = "unknown_date_"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class ResolverSettings(BaseModel, frozen=True):
    """Settings used for one resolution run."""

    score_weights: Dict[str, float] = Field(default_factory=lambda: dict(SCORE_WEIGHTS))
    tie_break_order: str = TIE_BREAK_ORDER
    share_annotations_as_company: bool = SHARE_ANNOTATIONS_AS_COMPANY
    prior_owner_match_threshold: Optional[int] = Field(
        default=PRIOR_OWNER_MATCH_THRESHOLD,
        ge=0,
        le=100,
        description="None disables fuzzy matching; canonical keys still match.",
    )
    emit_null_fields: bool = EMIT_NULL_FIELDS

    @classmethod
    def from_env(cls) -> "ResolverSettings":
        """Build settings from module defaults plus OWNER_RESOLUTION_* overrides."""
        return cls(
            share_annotations_as_company=_env_flag(
                "OWNER_RESOLUTION_SHARE_AS_COMPANY", SHARE_ANNOTATIONS_AS_COMPANY
            ),
            prior_owner_match_threshold=_env_int(
                "OWNER_RESOLUTION_MATCH_THRESHOLD", PRIOR_OWNER_MATCH_THRESHOLD
            ),
            emit_null_fields=_env_flag("OWNER_RESOLUTION_EMIT_NULLS", EMIT_NULL_FIELDS),
        )
