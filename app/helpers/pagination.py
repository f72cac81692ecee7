import base64
import binascii
import hashlib
import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from app.errors import ValidationError

# Largest OFFSET a SQL backend will take (signed 64-bit)
MAX_OFFSET = 2**63 - 1


@dataclass
class Page:
    """
    One slice of an ordered result set.

    `links` maps rel ("first", "prev", "last", "next") to the cursor that
    fetches that page; None means the first page, which needs no cursor.
    """
    items: List
    total: int
    offset: int
    per_page: int
    links: Dict[str, Optional[str]] = field(default_factory=dict)
def filter_fingerprint(filters: dict) -> str:
    """Short stable hash of a normalised filter dict."""
    canonical = json.dumps(filters, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]


def encode_cursor(offset: int, fingerprint: str) -> str:
    payload = json.dumps({"o": offset, "f": fingerprint}, separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")


def decode_cursor(cursor: str, fingerprint: str) -> int:
    """
    Return the offset stored in cursor.

    Raises ValidationError when the cursor is garbage, holds an offset no
    database could use, or was issued for a different filter set.
    """
    padded = cursor + "=" * (-len(cursor) % 4)
    try:
        data = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
        offset = data["o"]
        cursor_fp = data["f"]
    except (binascii.Error, UnicodeError, ValueError, KeyError, TypeError):
        raise ValidationError("cursor", cursor)

    if not isinstance(offset, int) or isinstance(offset, bool):
        raise ValidationError("cursor", cursor)
    if offset < 0 or offset > MAX_OFFSET:
        raise ValidationError("cursor", cursor)
    if cursor_fp != fingerprint:
        raise ValidationError("cursor", cursor)

    return offset


def paginate(query, offset: int, per_page: int, fingerprint: str) -> Page:
    """
    Cut [offset, offset + per_page) out of an already ordered query.

    Offsets past the end give an empty page. Links follow api-pagination's
    order: first, prev (unless at the start), last, next (unless at the end).
    """
    total = query.order_by(None).count()
    offset = min(offset, total)
    items = query.offset(offset).limit(per_page).all() if offset < total else []

    def cursor_at(o: int) -> Optional[str]:
        return encode_cursor(o, fingerprint) if o > 0 else None

    links = {}
    if offset > 0:
        links["first"] = None
        links["prev"] = cursor_at(max(offset - per_page, 0))

    next_offset = offset + len(items)
    if items and next_offset < total:
        links["last"] = cursor_at(((total - 1) // per_page) * per_page)
        links["next"] = cursor_at(next_offset)

    return Page(items=items, total=total, offset=offset, per_page=per_page, links=links)


def link_header(links: dict) -> str:
    """{"next": url, ...} -> '<url>; rel="next", ...' (RFC 8288)."""
    return ", ".join(f'<{url}>; rel="{rel}"' for rel, url in links.items())
