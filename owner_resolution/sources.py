"""
Caller-side adapters that turn scraped fields into RawOwnerMention values.

    current owners block:  "SMITH JOHN\nSMITH MARY"  -> one "current" mention per line
    sale-history rows:     {"date": "3/7/2019", "grantee": ..., "grantor": ...}
"""

from __future__ import annotations

from contextlib import suppress
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping

from loguru import logger

from owner_resolution.models import PRIOR_UNMATCHED_CONTEXT, UNDATED_CONTEXT, RawOwnerMention

SALE_DATE_FORMATS = ("%m/%d/%Y", "%m/%d/%y", "%Y-%m-%d", "%m-%d-%Y", "%Y%m%d")

DATE_KEYS = ("date", "sale_date", "transfer_date")
GRANTEE_KEYS = ("grantee", "buyer")
GRANTOR_KEYS = ("grantor", "seller")


def parse_sale_date(value: Any, strict: bool = False) -> str | None:
    """Parse a sale/transfer date (M/D/YYYY and friends) to ISO YYYY-MM-DD.

    Returns None for unresolvable input, or raises ValueError when ``strict``.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        raw = value.strip()
        for fmt in SALE_DATE_FORMATS:
            with suppress(ValueError):
                return datetime.strptime(raw, fmt).date().isoformat()
    if strict:
        raise ValueError(f"Unresolvable sale date: {value!r}")
    return None


def mentions_from_owner_block(block: str | Iterable[str] | None) -> List[RawOwnerMention]:
    """One "current" mention per non-empty line of the owner block."""
    if block is None:
        return []
    lines = block.splitlines() if isinstance(block, str) else [str(line or "") for line in block]
    return [RawOwnerMention(text=line.strip()) for line in lines if line.strip()]


def _first(row: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if row.get(key) not in (None, ""):
            return row[key]
    return None


def mentions_from_sales_rows(rows: Iterable[Mapping[str, Any]]) -> List[RawOwnerMention]:
    """
    Turn sale-history rows into mentions.

    Grantees become mentions dated with the row's transfer date; grantors become
    "prior_unmatched" mentions. Grantees of rows whose date cannot be resolved
    become "undated" mentions.
    """
    mentions: List[RawOwnerMention] = []
    for row in rows:
        sale_date = parse_sale_date(_first(row, DATE_KEYS))
        grantee = _first(row, GRANTEE_KEYS)
        grantor = _first(row, GRANTOR_KEYS)

        if grantee and sale_date:
            mentions.append(RawOwnerMention(text=str(grantee), context=sale_date))
        elif grantee:
            logger.debug(f"Undated grantee {grantee!r}: unresolvable date {_first(row, DATE_KEYS)!r}")
            mentions.append(RawOwnerMention(text=str(grantee), context=UNDATED_CONTEXT))
        if grantor:
            mentions.append(RawOwnerMention(text=str(grantor), context=PRIOR_UNMATCHED_CONTEXT))
    return mentions


def mentions_from_document(data: Mapping[str, Any]) -> List[RawOwnerMention]:
    """Mentions from ``{"current_owners": str|list, "sales": [row, ...]}``."""
    mentions = mentions_from_owner_block(data.get("current_owners"))
    mentions.extend(mentions_from_sales_rows(data.get("sales") or []))
    return mentions

