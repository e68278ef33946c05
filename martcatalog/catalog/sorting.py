"""Sort stage.

Stable reordering of a product sequence by one of a fixed set of named
strategies. Inputs are never mutated and ties keep their incoming order.
"""

import unicodedata
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

import structlog

from martcatalog.catalog.models import Product

logger = structlog.get_logger()


class SortOption(str, Enum):
    """Named sort strategies."""

    DEFAULT = "default"
    PRICE_LOW_HIGH = "price_asc"
    PRICE_HIGH_LOW = "price_desc"
    NAME_A_Z = "name_asc"
    NAME_Z_A = "name_desc"
    NEWEST = "newest"
    ON_SALE = "on_sale"


SORT_OPTIONS: tuple[str, ...] = tuple(option.value for option in SortOption)


def collation_key(text: str) -> tuple[str, str]:
    """Build a case- and accent-insensitive ordering key.

    Accents are folded away for the primary comparison so that "Éclair"
    sorts with the E's; the case-folded original breaks ties.

    Args:
        text: Text to order by.

    Returns:
        (folded, casefolded) key tuple.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return folded.casefold(), text.casefold()


def resolve_sort_option(value: str | SortOption | None) -> SortOption:
    """Map a sort name onto a known strategy.

    Unknown names fall back to the default strategy instead of failing.

    Args:
        value: Sort option or its name.

    Returns:
        The matching SortOption, or SortOption.DEFAULT.
    """
    if value is None:
        return SortOption.DEFAULT
    try:
        return SortOption(value)
    except ValueError:
        logger.warning("Unknown sort option, using default", sort_by=value)
        return SortOption.DEFAULT


# key function and reverse flag per strategy; DEFAULT keeps input order
_STRATEGIES: dict[SortOption, tuple[Callable[[Product], Any], bool]] = {
    SortOption.PRICE_LOW_HIGH: (lambda p: p.effective_price, False),
    SortOption.PRICE_HIGH_LOW: (lambda p: p.effective_price, True),
    SortOption.NAME_A_Z: (lambda p: collation_key(p.name), False),
    SortOption.NAME_Z_A: (lambda p: collation_key(p.name), True),
    SortOption.ON_SALE: (lambda p: not p.on_sale, False),
    SortOption.NEWEST: (lambda p: p.id, True),
}


def sort_products(
    products: Iterable[Product],
    sort_by: str | SortOption | None = SortOption.DEFAULT,
) -> list[Product]:
    """Order products by a named strategy.

    Args:
        products: Products to order.
        sort_by: Strategy name; unknown names keep the input order.

    Returns:
        New sorted list.
    """
    option = resolve_sort_option(sort_by)
    strategy = _STRATEGIES.get(option)
    if strategy is None:
        return list(products)

    key, reverse = strategy
    # sorted() stays stable with reverse=True
    return sorted(products, key=key, reverse=reverse)
