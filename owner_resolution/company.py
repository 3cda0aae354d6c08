"""Company name normalization."""

import re
from typing import List, Union

from owner_resolution.classifier import strip_share_annotations
from owner_resolution.lexicon import (
    COMPANY_ACRONYMS,
    COMPANY_CONNECTORS,
    COMPANY_SHORT_WORDS,
    ENTITY_SUFFIX_DISPLAY,
    ENTITY_SUFFIXES,
    normalize_token,
)
from owner_resolution.models import Company, NameSegment
from owner_resolution.person_parser import title_case

_EDGE_CHARS = " ,;:-&/*"
_VOWELS = set("AEIOUY")
_WORD_RE = re.compile(r"[\w']+")


def _recase_token(token: str, position: int) -> str:
    core = normalize_token(token)
    if not core:
        return token
    if core in ENTITY_SUFFIX_DISPLAY:
        # INC. -> Inc.
        return _WORD_RE.sub(lambda m: ENTITY_SUFFIX_DISPLAY[core], token, count=1)
    if "." in token and core in ENTITY_SUFFIXES:
        # L.L.C., P.A., N.A.
        return token
    if core in ENTITY_SUFFIXES or core in COMPANY_ACRONYMS:
        return token.upper()
    if core in COMPANY_CONNECTORS:
        return token.lower() if position > 0 else title_case(token)
    if core.isalpha() and core not in COMPANY_SHORT_WORDS:
        if len(core) <= 2 or not _VOWELS.intersection(core):
            return token.upper()
    return title_case(token)


def recase_company(name: str) -> str:
    """Recase an ALL-CAPS company name for display: "ABC PROPERTIES LLC" -> "ABC Properties LLC"."""
    tokens: List[str] = name.split()
    return " ".join(_recase_token(token, i) for i, token in enumerate(tokens))


def normalize_company(segment: Union[NameSegment, str]) -> Company:
    """
    Build a Company from a company-classified segment.

    Collapses whitespace, strips stray edge punctuation (abbreviation periods
    such as "L.L.C." and "INC." survive) and recases ALL-CAPS input. Mixed
    case input is kept as written.
    """
    text = segment.text if isinstance(segment, NameSegment) else (segment or "")
    stripped = strip_share_annotations(text).strip(_EDGE_CHARS)
    name = " ".join((stripped or text).split()).strip(_EDGE_CHARS) or text.strip()

    if name == name.upper() and any(ch.isalpha() for ch in name):
        name = recase_company(name)
    return Company(name=name)
