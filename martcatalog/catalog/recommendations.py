"""Recommendation helpers.

Featured and related product selection, layered on the filter stage.
Neither helper paginates; both return a bounded tuple.
"""

import random
from collections.abc import Collection, Sequence

from martcatalog.catalog.filters import FilterCriteria, filter_products
from martcatalog.catalog.models import Product


def select_featured(
    products: Sequence[Product],
    limit: int,
    exclude_ids: Collection[int] = (),
    rng: random.Random | None = None,
) -> tuple[Product, ...]:
    """Pick featured products.

    On-sale products come first in catalog order, followed by a shuffled
    sample of the remaining products.

    Args:
        products: Products in catalog order.
        limit: Maximum products to return.
        exclude_ids: Ids removed before selection.
        rng: Random source for the shuffle; seed it for repeatable output.

    Returns:
        Up to limit featured products.
    """
    rng = rng or random.Random()
    excluded = set(exclude_ids)
    candidates = [p for p in products if p.id not in excluded]

    on_sale = filter_products(candidates, FilterCriteria(on_sale=True))
    regular = [p for p in candidates if not p.on_sale]
    rng.shuffle(regular)

    return tuple([*on_sale, *regular][:limit])


def select_related(
    products: Sequence[Product],
    source_id: int,
    limit: int,
) -> tuple[Product, ...]:
    """Pick products related to a source product.

    Same-category products come first; when there are fewer than limit,
    products from other categories fill the remainder in catalog order.

    Args:
        products: Products in catalog order.
        source_id: Id of the product being viewed.
        limit: Maximum products to return.

    Returns:
        Up to limit related products, never including the source. Empty
        when the source id is unknown.
    """
    source = next((p for p in products if p.id == source_id), None)
    if source is None:
        return ()

    others = [p for p in products if p.id != source_id]
    related = filter_products(others, FilterCriteria(category=source.category.value))[:limit]

    if len(related) < limit:
        backfill = [p for p in others if p.category != source.category]
        related.extend(backfill[:limit - len(related)])

    return tuple(related)
