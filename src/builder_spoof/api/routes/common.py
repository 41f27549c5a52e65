"""Common route helpers."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from fastapi import HTTPException, status

PAGINATION_RANGE_DEFAULT = 0
PAGINATION_RANGE_MAX = 50


def extract_range(query: Mapping[str, str]) -> int:
    """Read the zero-based ``range`` offset or return 400."""
    raw = query.get("range")
    if raw is None:
        return PAGINATION_RANGE_DEFAULT
    if not (raw.isascii() and raw.isdigit()):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid range: {raw}")
    return int(raw)


def paginate(items: Sequence[Any], offset: int) -> dict[str, Any]:
    """Slice ``items`` the way the depot pages its listings."""
    page = list(items[offset : offset + PAGINATION_RANGE_MAX])
    return {
        "range_start": offset,
        "range_end": max(offset, offset + len(page) - 1),
        "total_count": len(items),
        "data": page,
    }
