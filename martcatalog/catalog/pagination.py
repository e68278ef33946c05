"""Paginators.

Two independent strategies over the same filtered and sorted sequence:
offset pagination (page number and page size) and cursor pagination
(resume after the last id returned). Both assume validated input; the
service rejects non-positive sizes before calling them.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from martcatalog.catalog.models import Product

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """Offset pagination metadata.

    Attributes:
        current_page: Page actually returned, after clamping.
        page_size: Items per page.
        total_items: Size of the full filtered sequence.
        total_pages: ceil(total_items / page_size).
        has_next_page: Whether a later page exists.
        has_prev_page: Whether an earlier page exists.
        start_index: Offset of the first returned item.
        end_index: Offset one past the last returned item.
    """

    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    start_index: int
    end_index: int


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of items with its pagination metadata."""

    items: tuple[T, ...]
    pagination: Pagination


@dataclass(frozen=True)
class CursorResult(Generic[T]):
    """One slice of a cursor scan.

    Attributes:
        items: Items in this slice.
        next_cursor: Id to pass on the next call; None at the end.
        has_more: Whether items remain after this slice.
        total_items: Size of the full filtered sequence.
    """

    items: tuple[T, ...]
    next_cursor: int | None
    has_more: bool
    total_items: int


def paginate(sequence: Sequence[T], page: int, page_size: int) -> PageResult[T]:
    """Slice one page out of a sequence.

    Out-of-range pages are clamped to the nearest valid page instead of
    raising; an empty sequence yields page 1 with no items.

    Args:
        sequence: Full filtered and sorted sequence.
        page: Requested page number (1-indexed).
        page_size: Items per page, already validated as positive.

    Returns:
        Page of items with metadata.
    """
    total_items = len(sequence)
    total_pages = math.ceil(total_items / page_size)
    current_page = max(1, min(page, total_pages or 1))
    start_index = (current_page - 1) * page_size
    end_index = min(start_index + page_size, total_items)

    return PageResult(
        items=tuple(sequence[start_index:end_index]),
        pagination=Pagination(
            current_page=current_page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_next_page=current_page < total_pages,
            has_prev_page=current_page > 1,
            start_index=start_index,
            end_index=end_index,
        ),
    )


def normalize_product_id(value: int | str | None) -> int | None:
    """Coerce an id token to the catalog's integer ids.

    Args:
        value: Integer id, numeric string, or None.

    Returns:
        Integer id, or None when the token is absent or not numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def paginate_by_cursor(
    sequence: Sequence[Product],
    cursor: int | str | None,
    limit: int,
) -> CursorResult[Product]:
    """Slice the items following a cursor.

    A cursor that no longer appears in the sequence (for example after
    the catalog changed) restarts the scan from the beginning.

    Args:
        sequence: Full filtered and sorted sequence.
        cursor: Id of the last item previously returned, or None.
        limit: Maximum items to return, already validated as positive.

    Returns:
        Slice of items with the cursor for the next call.
    """
    start_index = 0
    cursor_id = normalize_product_id(cursor)
    if cursor_id is not None:
        for position, product in enumerate(sequence):
            if product.id == cursor_id:
                start_index = position + 1
                break

    items = tuple(sequence[start_index:start_index + limit])
    has_more = start_index + limit < len(sequence)
    next_cursor = items[-1].id if has_more and items else None

    return CursorResult(
        items=items,
        next_cursor=next_cursor,
        has_more=has_more,
        total_items=len(sequence),
    )
