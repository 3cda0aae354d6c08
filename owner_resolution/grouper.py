"""
Temporal grouping of resolved owners.

Groups are keyed by the point in time an owner held title:
    2015-06-01, 2019-03-07   sale dates (grantee side), ascending
    unknown_date_1           undated grantees, then earlier sellers with no
                             dated group of their own
    current                  the current-owner block, always present
"""

import re
from typing import Dict, Iterable, List, Optional

from owner_resolution import config
from owner_resolution.collector import InvalidOwnerCollector
from owner_resolution.config import ResolverSettings
from owner_resolution.dedup import dedupe, names_match
from owner_resolution.logging import bind_context
from owner_resolution.models import (
    CURRENT_CONTEXT,
    UNDATED_CONTEXT,
    OwnerEntity,
    OwnerRecord,
    OwnershipGroup,
    RawOwnerMention,
)
from owner_resolution.pipeline import resolve_mention

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _unknown_key(used: Iterable[str]) -> str:
    used = set(used)
    n = 1
    while f"{config.UNKNOWN_GROUP_PREFIX}{n}" in used:
        n += 1
    return f"{config.UNKNOWN_GROUP_PREFIX}{n}"


def _is_phantom(grantor: OwnerEntity, dated: List[OwnershipGroup], threshold: Optional[int]) -> bool:
    """A grantor already listed in some dated group is not a separate prior owner."""
    return any(names_match(grantor, owner, threshold) for grp in dated for owner in grp.owners)


def group(
    mentions: Iterable[RawOwnerMention],
    settings: Optional[ResolverSettings] = None,
    collector: Optional[InvalidOwnerCollector] = None,
) -> List[OwnershipGroup]:
    """
    Resolve mentions and assemble ordered, deduplicated ownership groups.

    Args:
        mentions: raw owner mentions with their temporal context
        settings: resolution settings (defaults from config)
        collector: receives rejected owner strings

    Returns:
        Dated groups ascending, then unknown_date_N, then "current"
    """
    settings = settings or ResolverSettings()
    collector = collector if collector is not None else InvalidOwnerCollector()

    current: List[OwnerEntity] = []
    by_date: Dict[str, List[OwnerEntity]] = {}
    undated: List[OwnerEntity] = []
    grantors: List[OwnerEntity] = []

    for mention in mentions:
        entities = resolve_mention(mention.text, collector, settings, context=mention.context)
        if mention.context == CURRENT_CONTEXT:
            current.extend(entities)
        elif ISO_DATE_RE.match(mention.context):
            by_date.setdefault(mention.context, []).extend(entities)
        elif mention.context == UNDATED_CONTEXT:
            undated.extend(entities)
        else:
            grantors.extend(entities)

    dated: List[OwnershipGroup] = []
    for key in sorted(by_date):
        owners = dedupe(by_date[key])
        if owners:
            dated.append(OwnershipGroup(key=key, owners=owners))

    groups: List[OwnershipGroup] = list(dated)
    unmatched = list(undated)
    unmatched.extend(
        owner
        for owner in dedupe(grantors)
        if not _is_phantom(owner, dated, settings.prior_owner_match_threshold)
    )
    unmatched = dedupe(unmatched)
    if unmatched:
        groups.append(OwnershipGroup(key=_unknown_key(g.key for g in groups), owners=unmatched))

    groups.append(OwnershipGroup(key=config.CURRENT_KEY, owners=dedupe(current)))

    bind_context(groups=len(groups), invalid=len(collector)).info(
        "owner_groups_built " + ", ".join(f"{g.key}={len(g.owners)}" for g in groups)
    )
    return groups


def build_owner_record(
    mentions: Iterable[RawOwnerMention],
    settings: Optional[ResolverSettings] = None,
) -> OwnerRecord:
    """Run the whole engine over one property's mentions."""
    collector = InvalidOwnerCollector()
    groups = group(mentions, settings=settings, collector=collector)
    return OwnerRecord(groups=groups, invalid_owners=collector.entries)
