"""
Owner segment classifier.

Decides whether a name segment denotes a company or a person. Leans toward
"company": an organisation mistaken for a person produces garbage name
fields, while a person kept as a company name is still readable.
"""

import re
from dataclasses import dataclass
from typing import Union

from owner_resolution import config
from owner_resolution.lexicon import COMPANY_KEYWORDS, COMPANY_PHRASES, normalize_token
from owner_resolution.models import NameSegment

COMPANY = "company"
PERSON = "person"

COMPANY_PHRASE_RE = re.compile(
    r"\b(?:" + "|".join(r"\s+".join(map(re.escape, p.split())) for p in COMPANY_PHRASES) + r")\b",
    re.IGNORECASE,
)

# "50%", "12.5 % INT", "1/2 INT", "(50%)", "(1/3 INTEREST)"
SHARE_ANNOTATION_RE = re.compile(
    r"\(\s*[^)]*(?:\d|%|\bINT)[^)]*\)"
    r"|\b\d{1,3}(?:\.\d+)?\s*%(?:\s*INT(?:EREST)?\b)?"
    r"|\b\d+\s*/\s*\d+\s*(?:INT(?:EREST)?|PCT)\b"
    r"|\b\d+(?:\.\d+)?\s*PCT\b",
    re.IGNORECASE,
)

_TOKEN_SPLIT_RE = re.compile(r"[\s,;&/+()]+")


@dataclass(frozen=True, slots=True)
class ClassifierOptions:
    share_annotations_as_company: bool = config.SHARE_ANNOTATIONS_AS_COMPANY


def has_share_annotation(text: str) -> bool:
    return bool(SHARE_ANNOTATION_RE.search(text or ""))


def strip_share_annotations(text: str) -> str:
    return " ".join(SHARE_ANNOTATION_RE.sub(" ", text or "").split())


def has_company_keyword(text: str) -> bool:
    """Check for a legal-entity suffix, organisational word or phrase."""
    if not text:
        return False
    if COMPANY_PHRASE_RE.search(text):
        return True
    tokens = (normalize_token(t) for t in _TOKEN_SPLIT_RE.split(text))
    return any(tok in COMPANY_KEYWORDS for tok in tokens if tok)


def classify(segment: Union[NameSegment, str], options: ClassifierOptions | None = None) -> str:
    """Return "company" or "person" for a segment. Pure function of its input."""
    options = options or ClassifierOptions()
    text = segment.text if isinstance(segment, NameSegment) else (segment or "")

    if has_company_keyword(text):
        return COMPANY
    if options.share_annotations_as_company and has_share_annotation(text):
        return COMPANY
    if any(ch.isdigit() for ch in strip_share_annotations(text)):
        return COMPANY
    return PERSON
