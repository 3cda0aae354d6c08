"""
Owner entity deduplication.

Two entities with the same canonical key are the same real-world owner.
Fuzzy comparison (rapidfuzz) is only used by the temporal grouper when
deciding whether a grantor is already a known prior owner.
"""

from typing import Iterable, List, Optional, Set

from rapidfuzz import fuzz

from owner_resolution.models import Company, OwnerEntity, Person


def owner_key(entity: OwnerEntity) -> str:
    """Canonical key: lower-cased name, or pipe-joined lower-cased person fields."""
    if isinstance(entity, Company):
        return " ".join(entity.name.split()).lower()
    parts = (entity.prefix_name, entity.first_name, entity.middle_name, entity.last_name, entity.suffix_name)
    return "|".join((p or "").strip().lower() for p in parts)


def dedupe(entities: Iterable[OwnerEntity]) -> List[OwnerEntity]:
    """Order-preserving dedupe; the first occurrence of each key wins."""
    seen: Set[str] = set()
    result: List[OwnerEntity] = []
    for entity in entities:
        key = owner_key(entity)
        if key in seen:
            continue
        seen.add(key)
        result.append(entity)
    return result


def _comparable_name(entity: OwnerEntity) -> str:
    if isinstance(entity, Person):
        return f"{entity.first_name} {entity.middle_name or ''} {entity.last_name}".upper()
    return entity.name.upper()


def names_match(a: OwnerEntity, b: OwnerEntity, threshold: Optional[int]) -> bool:
    """Key equality, or token-sort similarity at or above ``threshold`` (0-100).

    A None threshold disables the fuzzy comparison. A person never matches a company.
    """
    if owner_key(a) == owner_key(b):
        return True
    if threshold is None or type(a) is not type(b):
        return False
    return fuzz.token_sort_ratio(_comparable_name(a), _comparable_name(b)) >= threshold
