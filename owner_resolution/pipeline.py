"""
Per-mention resolution.

One raw owner string -> segments -> [classify -> company | person] with the
surname of the latest parsed person carried forward, so "SMITH JOHN & MARY"
gives Mary the surname Smith. A bare given name ahead of a full name
("JOHN & MARY SMITH") is back-filled from the next parsed person.
"""

from typing import List, Optional, Tuple

from owner_resolution.classifier import COMPANY, ClassifierOptions, classify
from owner_resolution.collector import InvalidOwnerCollector
from owner_resolution.company import normalize_company
from owner_resolution.config import ResolverSettings
from owner_resolution.logging import bind_context
from owner_resolution.models import (
    SINGLE_TOKEN_NO_FALLBACK,
    NameSegment,
    OwnerEntity,
    Reject,
)
from owner_resolution.person_parser import parse_person
from owner_resolution.segmenter import empty_reason, segment


def resolve_mention(
    text: str,
    collector: InvalidOwnerCollector,
    settings: Optional[ResolverSettings] = None,
    context: Optional[str] = None,
) -> List[OwnerEntity]:
    """Resolve one owner string into entities; failures go to ``collector``."""
    settings = settings or ResolverSettings()
    log = bind_context(context=context)
    options = ClassifierOptions(share_annotations_as_company=settings.share_annotations_as_company)

    segments = segment(text)
    if not segments:
        reason = empty_reason(text)
        log.debug(f"No segments in {text!r} ({reason})")
        collector.add(text, reason)
        return []

    def reject(result: Reject, seg: NameSegment) -> None:
        log.bind(segment=seg.text).debug(f"Person parse rejected: {result.reason}")
        collector.add(result.raw, result.reason)

    def parse(seg: NameSegment, surname: Optional[str]):
        return parse_person(
            seg,
            carried_surname=surname,
            weights=settings.score_weights,
            tie_break=settings.tie_break_order,
        )

    slots: List[Optional[OwnerEntity]] = []
    # Bare given names waiting for the next person's surname
    pending: List[Tuple[int, NameSegment]] = []

    def flush_pending() -> None:
        for _, seg in pending:
            reject(Reject(SINGLE_TOKEN_NO_FALLBACK, seg.text), seg)
        pending.clear()

    carried_surname: Optional[str] = None
    for seg in segments:
        if classify(seg, options) == COMPANY:
            flush_pending()
            slots.append(normalize_company(seg))
            continue

        result = parse(seg, carried_surname)
        if isinstance(result, Reject):
            if result.reason == SINGLE_TOKEN_NO_FALLBACK:
                pending.append((len(slots), seg))
                slots.append(None)
            else:
                reject(result, seg)
            continue

        slots.append(result)
        carried_surname = result.last_name
        for slot, waiting in pending:
            filled = parse(waiting, carried_surname)
            if isinstance(filled, Reject):
                reject(filled, waiting)
            else:
                slots[slot] = filled
        pending.clear()

    flush_pending()
    return [entity for entity in slots if entity is not None]
