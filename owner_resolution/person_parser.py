"""
Person name parser.

Turns a person-classified segment into first/middle/last/prefix/suffix
fields. Scraped names carry no reliable order marker, so both readings of
the tokens are built and scored:

    firstLast:  JOHN ROBERT SMITH   -> first=John, middle=Robert, last=Smith
    lastFirst:  SMITH JOHN ROBERT   -> first=John, middle=Robert, last=Smith

Each scoring feature is a small predicate over (candidate, context); the
weight table lives in config.SCORE_WEIGHTS. New heuristics are new entries
in FEATURES, not new branches.
"""

import re
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from owner_resolution import config
from owner_resolution.classifier import strip_share_annotations
from owner_resolution.lexicon import (
    is_affix,
    is_common_first_name,
    is_noise_token,
    is_prefix,
    is_suffix,
    is_surname_particle,
    normalize_token,
    prefix_display,
    suffix_display,
)
from owner_resolution.models import (
    EMPTY_AFTER_AFFIX_REMOVAL,
    FIRST_LAST,
    LAST_FIRST,
    SINGLE_TOKEN_NO_FALLBACK,
    UNABLE_TO_CLASSIFY_PERSON,
    NameSegment,
    Person,
    Reject,
)
from owner_resolution.segmenter import hints_for

GENERATIONAL_SUFFIXES = {"JR", "SR", "II", "III", "IV"}

_PAREN_RE = re.compile(r"\([^)]*\)")
_PHD_RE = re.compile(r"\bPH\.?\s*D\b\.?", re.IGNORECASE)
_INVALID_CHARS_RE = re.compile(r"[^\w'\- ]+|_+")
_LETTERS_RE = re.compile(r"[\W\d_]")


@dataclass(frozen=True, slots=True)
class NameCandidate:
    order: str
    first: str
    last: str
    middle: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ScoringContext:
    carried_surname: Optional[str] = None
    preferred_order: Optional[str] = None
    had_prefix: bool = False


def _letters(value: Optional[str]) -> str:
    return _LETTERS_RE.sub("", value or "").upper()


def _same_name(a: Optional[str], b: Optional[str]) -> bool:
    return bool(_letters(a)) and _letters(a) == _letters(b)


FEATURES: Dict[str, Callable[[NameCandidate, ScoringContext], bool]] = {
    "nontrivial_first": lambda c, ctx: len(_letters(c.first)) > 1,
    "nontrivial_last": lambda c, ctx: len(_letters(c.last)) > 1,
    "carried_surname_match": lambda c, ctx: _same_name(c.last, ctx.carried_surname),
    "preferred_order": lambda c, ctx: ctx.preferred_order == c.order,
    "common_first_name": lambda c, ctx: is_common_first_name(c.first),
    "prefix_first_last": lambda c, ctx: ctx.had_prefix and c.order == FIRST_LAST,
    "common_first_as_last": lambda c, ctx: is_common_first_name(c.last),
    "initial_first": lambda c, ctx: len(_letters(c.first)) == 1,
    "initial_last": lambda c, ctx: len(_letters(c.last)) == 1,
    "affix_as_name": lambda c, ctx: is_affix(c.first) or is_affix(c.last),
}


def score_candidate(
    candidate: NameCandidate,
    context: ScoringContext,
    weights: Optional[Mapping[str, float]] = None,
) -> float:
    """Sum the weights of every feature that fires for the candidate."""
    weights = config.SCORE_WEIGHTS if weights is None else weights
    return sum(weights.get(name, 0.0) for name, feature in FEATURES.items() if feature(candidate, context))


def title_case(value: str) -> str:
    """Capitalize after start-of-string, space, hyphen or apostrophe."""
    out: List[str] = []
    prev = ""
    for ch in value.lower():
        out.append(ch.upper() if prev in ("", " ", "-", "'") else ch)
        prev = ch
    return "".join(out)


def _tokenize(text: str) -> List[str]:
    text = strip_share_annotations(text)
    text = _PAREN_RE.sub(" ", text)
    text = _PHD_RE.sub(" PHD ", text)
    text = text.replace(".", " ")
    text = _INVALID_CHARS_RE.sub(" ", text)
    tokens = [t.strip("'-") for t in text.split()]
    return [t for t in tokens if t and not is_noise_token(t)]


@dataclass(slots=True)
class _Affixes:
    tokens: List[str]
    prefix: Optional[str] = None
    suffix: Optional[str] = None


def _strip_affixes(text: str) -> _Affixes:
    """Remove one honorific prefix and every trailing suffix (keeping the first)."""
    before, comma, after = text.partition(",")
    head = _tokenize(before)
    tail = _tokenize(after) if comma else []

    prefix = None
    if head and is_prefix(head[0]):
        prefix = prefix_display(head.pop(0))
    elif tail and is_prefix(tail[0]):
        prefix = prefix_display(tail.pop(0))

    # Suffix positions in reading order; only the first one is kept
    found: List[str] = []
    if comma:
        while head and is_suffix(head[-1]) and len(head) > 1:
            found.insert(0, head.pop())
    tokens = head + tail
    trailing: List[str] = []
    while tokens and is_suffix(tokens[-1]):
        trailing.insert(0, tokens.pop())
    if not comma and len(tokens) >= 3 and normalize_token(tokens[1]) in GENERATIONAL_SUFFIXES:
        found.append(tokens.pop(1))
    found.extend(trailing)

    suffix = suffix_display(found[0]) if found else None
    return _Affixes(tokens=tokens, prefix=prefix, suffix=suffix)


def build_candidates(tokens: List[str]) -> Tuple[NameCandidate, NameCandidate]:
    """Both readings of two or more tokens; surname particles stay with the surname."""
    n = len(tokens)

    # firstLast: particles directly before the final token join the surname
    j = n - 2
    while j >= 1 and is_surname_particle(tokens[j]):
        j -= 1
    first_last = NameCandidate(
        order=FIRST_LAST,
        first=tokens[0],
        last=" ".join(tokens[j + 1:]),
        middle=tuple(tokens[1:j + 1]),
    )

    # lastFirst: leading particles join the surname, one token must remain
    k = 0
    while k < n - 2 and is_surname_particle(tokens[k]):
        k += 1
    last_first = NameCandidate(
        order=LAST_FIRST,
        first=tokens[k + 1],
        last=" ".join(tokens[:k + 1]),
        middle=tuple(tokens[k + 2:]),
    )
    return first_last, last_first


def _coerce_segment(segment: Union[NameSegment, str]) -> NameSegment:
    if isinstance(segment, NameSegment):
        return segment
    return NameSegment(text=segment or "", hints=hints_for(segment or ""))


def _to_person(candidate: NameCandidate, prefix: Optional[str], suffix: Optional[str]) -> Person:
    middle = " ".join(candidate.middle)
    return Person(
        prefix_name=prefix,
        first_name=title_case(candidate.first),
        middle_name=title_case(middle) if middle else None,
        last_name=title_case(candidate.last),
        suffix_name=suffix,
    )


def parse_person(
    segment: Union[NameSegment, str],
    carried_surname: Optional[str] = None,
    weights: Optional[Mapping[str, float]] = None,
    tie_break: str = config.TIE_BREAK_ORDER,
) -> Union[Person, Reject]:
    """
    Parse a person segment.

    Args:
        segment: segment (or raw text) already classified as a person
        carried_surname: surname of an earlier person in the same composite mention
        weights: scoring weights (defaults to config.SCORE_WEIGHTS)
        tie_break: order chosen when both candidates score the same

    Returns:
        Person on success, otherwise Reject with a reason code
    """
    seg = _coerce_segment(segment)
    affixes = _strip_affixes(seg.text)
    tokens = affixes.tokens

    if not tokens:
        return Reject(EMPTY_AFTER_AFFIX_REMOVAL, seg.text)

    if len(tokens) == 1:
        if not carried_surname:
            return Reject(SINGLE_TOKEN_NO_FALLBACK, seg.text)
        candidate = NameCandidate(order=FIRST_LAST, first=tokens[0], last=carried_surname)
        return _to_person(candidate, affixes.prefix, affixes.suffix)

    context = ScoringContext(
        carried_surname=carried_surname,
        preferred_order=seg.hints.preferred_order,
        had_prefix=affixes.prefix is not None,
    )
    first_last, last_first = build_candidates(tokens)
    score_fl = score_candidate(first_last, context, weights)
    score_lf = score_candidate(last_first, context, weights)
    if score_fl == score_lf:
        chosen = last_first if tie_break == LAST_FIRST else first_last
    else:
        chosen = first_last if score_fl > score_lf else last_first

    # A one-letter surname is an initial that lost its surname to the "&"
    if carried_surname and len(_letters(chosen.last)) == 1:
        chosen = replace(chosen, last=carried_surname, middle=chosen.middle + (chosen.last,))

    if FEATURES["affix_as_name"](chosen, context):
        return Reject(UNABLE_TO_CLASSIFY_PERSON, seg.text)
    if not _letters(chosen.first) or not _letters(chosen.last):
        return Reject(UNABLE_TO_CLASSIFY_PERSON, seg.text)
    if len(_letters(chosen.first)) == 1 and len(_letters(chosen.last)) == 1:
        return Reject(UNABLE_TO_CLASSIFY_PERSON, seg.text)

    return _to_person(chosen, affixes.prefix, affixes.suffix)
