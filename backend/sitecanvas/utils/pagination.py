# sitecanvas/utils/pagination.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional, Tuple, TypedDict

from sqlalchemy.sql import and_, or_
from werkzeug.exceptions import BadRequest


class CursorMeta(TypedDict):
    """
    Strongly-typed cursor pagination metadata.

    Explicit keys prevent contract drift across list_* endpoints.
    """
    has_more: bool
    next_cursor: Optional[str]


def encode_cursor(sort_value: Any, row_id: Any) -> str:
    """
    Encode a keyset cursor.

    Format: <sort value>|<id>, where datetimes are written as ISO8601.
    """
    if sort_value is None or row_id is None:
        raise ValueError("sort_value and row_id are required to encode cursor")

    if isinstance(sort_value, datetime):
        sort_value = sort_value.isoformat()

    return f"{sort_value}|{row_id}"


def decode_cursor(cursor: str, parse: Callable[[str], Any] = datetime.fromisoformat) -> Tuple[Any, str]:
    """
    Decode a cursor into (sort value, id).

    Raises:
    - BadRequest if cursor format or sort value is invalid
    """
    if not cursor or "|" not in cursor:
        raise BadRequest("Invalid cursor format")

    try:
        raw_value, row_id = cursor.split("|", 1)
        return parse(raw_value), row_id
    except (TypeError, ValueError) as exc:
        # Ensures clean API error instead of 500
        raise BadRequest("Invalid cursor format") from exc


def paginate_keyset(
    query,
    *,
    sort_column,
    id_column,
    limit: int,
    cursor: Optional[str] = None,
    parse: Callable[[str], Any] = datetime.fromisoformat,
) -> tuple[list[Any], CursorMeta]:
    """
    Execute a keyset-paginated query, newest first.

    Ordering contract: ORDER BY <sort_column> DESC, <id_column> DESC.
    Fetches limit + 1 rows to detect continuation and builds the next cursor
    from the last row returned.
    """
    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")

    if cursor:
        cursor_value, cursor_id = decode_cursor(cursor, parse)
        query = query.filter(
            or_(
                sort_column < cursor_value,
                and_(sort_column == cursor_value, id_column < cursor_id),
            )
        )

    rows = query.order_by(sort_column.desc(), id_column.desc()).limit(limit + 1).all()

    has_more = len(rows) > limit
    items = rows[:limit]

    next_cursor: Optional[str] = None
    if items and has_more:
        last = items[-1]
        next_cursor = encode_cursor(
            getattr(last, sort_column.key),
            getattr(last, id_column.key),
        )

    return items, {
        "has_more": has_more,
        "next_cursor": next_cursor,
    }
