"""
Composite owner string segmentation.

Splits one scraped owner string into candidate name segments. The same
owner field may hold any of:
- SMITH JOHN R & JANE M
- SMITH, JOHN AND MARY
- DOE JOHN TRUSTEE / ABC HOLDINGS LLC
- JOHN SMITH, MARY JONES

Ownership designators (ET AL, TRUSTEE, JTWROS, ...) and alias tails
(A/K/A ...) are removed first, conjunction variants are normalized to a
single "&" connector, and each piece is annotated with order hints.
"""

import re
from typing import List

from loguru import logger

from owner_resolution.classifier import has_company_keyword
from owner_resolution.lexicon import (
    ALIAS_MARKERS,
    CARE_OF_RE,
    CARE_OF_TAIL_RE,
    COUPLE_PREFIX_RE,
    NOISE_PATTERNS,
    PLACEHOLDER_RE,
    is_common_first_name,
    is_noise_token,
    is_suffix,
    normalize_token,
)
from owner_resolution.models import (
    EMPTY_AFTER_CLEAN,
    LAST_FIRST,
    PLACEHOLDER_ENTRY,
    NameSegment,
    SegmentHints,
)

_NOISE_RE = re.compile(r"\b(?:" + "|".join(NOISE_PATTERNS) + r")\b\.?", re.IGNORECASE)

# Alias tail runs to the next connector (or end of string)
_ALIAS_RE = re.compile(
    r"\b(?:" + "|".join(ALIAS_MARKERS) + r")\b.*?(?=\s*[&/+;]|\s+AND\s|$)",
    re.IGNORECASE,
)

_AMP_PLACEHOLDER = "\x00"
_CONNECTOR = " & "

_CONNECTOR_PATTERNS = (
    (re.compile(r"(\S)&(\S)"), "\\1" + _AMP_PLACEHOLDER + "\\2"),
    (re.compile(r"\s+AND\s*/\s*OR\s+", re.IGNORECASE), _CONNECTOR),
    (re.compile(r"\s+AND\s+", re.IGNORECASE), _CONNECTOR),
    (re.compile(r"(?<!\d)\s*/\s*(?!\d)"), _CONNECTOR),
    (re.compile(r"\s*\+\s*"), _CONNECTOR),
    (re.compile(r"\s*;\s*"), _CONNECTOR),
)

_EDGE_CHARS = " ,;-&"


def _collapse(text: str) -> str:
    return " ".join((text or "").split())


def clean_owner_text(raw: str) -> str:
    """Normalize entities, quotes and whitespace in a scraped owner string."""
    text = (raw or "").replace("&amp;", "&").replace("\u2019", "'").replace("\u00a0", " ")
    return _collapse(text)


def is_placeholder(text: str) -> bool:
    return bool(PLACEHOLDER_RE.match(text or ""))


def is_care_of(text: str) -> bool:
    return bool(CARE_OF_RE.match(text or ""))


def strip_noise(text: str) -> str:
    """Remove care-of and alias tails plus ownership designators anywhere in the text."""
    text = CARE_OF_TAIL_RE.sub("", text)
    text = _ALIAS_RE.sub(" ", text)
    text = _NOISE_RE.sub(" ", text)
    return _collapse(text).strip(_EDGE_CHARS)


def empty_reason(raw: str) -> str:
    """Reason code for a mention that produced no segments."""
    text = clean_owner_text(raw)
    if text and (is_placeholder(text) or is_placeholder(strip_noise(text))):
        return PLACEHOLDER_ENTRY
    return EMPTY_AFTER_CLEAN


def _normalize_connectors(text: str) -> str:
    for pattern, replacement in _CONNECTOR_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def _is_noise_only(piece: str) -> bool:
    tokens = [normalize_token(t) for t in piece.split()]
    tokens = [t for t in tokens if t]
    return not tokens or all(is_noise_token(t) for t in tokens)


def _split_on_comma(piece: str) -> List[str]:
    """Split "JOHN SMITH, MARY JONES" but keep "SMITH, JOHN" and "SMITH JR, JOHN"."""
    if "," not in piece:
        return [piece]
    before, after = piece.split(",", 1)
    before_tokens = before.split()
    after_tokens = after.replace(",", " ").split()
    if len(before_tokens) < 2 or is_suffix(before_tokens[-1]):
        return [piece]
    if after_tokens and all(is_suffix(t) for t in after_tokens):
        return [piece]
    return [p.strip(_EDGE_CHARS) for p in piece.split(",") if p.strip(_EDGE_CHARS)]


def _merge_company_fragments(pieces: List[str]) -> List[str]:
    """Re-join "SMITH & SONS LLC" style names split at their own ampersand."""
    merged: List[str] = []
    i = 0
    while i < len(pieces):
        piece = pieces[i]
        tokens = piece.split()
        if (
            i + 1 < len(pieces)
            and len(tokens) == 1
            and not is_common_first_name(tokens[0])
            and has_company_keyword(pieces[i + 1])
        ):
            logger.debug(f"Keeping company name intact: {piece} & {pieces[i + 1]}")
            merged.append(f"{piece} & {pieces[i + 1]}")
            i += 2
            continue
        merged.append(piece)
        i += 1
    return merged


def hints_for(piece: str) -> SegmentHints:
    has_comma = "," in piece
    return SegmentHints(
        has_comma=has_comma,
        is_all_caps=piece == piece.upper(),
        preferred_order=LAST_FIRST if has_comma else None,
    )


def segment(raw: str) -> List[NameSegment]:
    """
    Split a raw owner string into ordered name segments.

    Returns an empty list for empty, placeholder and care-of input; use
    empty_reason() to get the rejection code for such input.
    """
    text = clean_owner_text(raw)
    if not text or is_placeholder(text) or is_care_of(text):
        return []
    text = COUPLE_PREFIX_RE.sub("", text)

    text = strip_noise(text)
    if not text or is_placeholder(text):
        return []

    connected = _normalize_connectors(text)
    pieces = [p.replace(_AMP_PLACEHOLDER, "&").strip(_EDGE_CHARS) for p in connected.split("&")]
    pieces = [p for p in pieces if p and not _is_noise_only(p)]
    pieces = _merge_company_fragments(pieces)

    segments: List[NameSegment] = []
    for piece in pieces:
        for part in _split_on_comma(piece):
            part = _collapse(part).strip(" ;-&")
            if part and not _is_noise_only(part):
                segments.append(NameSegment(text=part, hints=hints_for(part)))
    return segments
