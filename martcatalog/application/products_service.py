"""Products service.

Public async entry points of the catalog query engine. Composes the
filter, sort and pagination stages, simulates network latency and routes
results through the injected query cache.
"""

import random
from collections.abc import Iterable
from datetime import timedelta
from types import MappingProxyType
from typing import Any

import structlog
from pydantic import ValidationError

from martcatalog.application.queries import (
    CategoriesQuery,
    CategoryCountsQuery,
    FeaturedQuery,
    ProductLookup,
    ProductQuery,
    RelatedQuery,
)
from martcatalog.application.schemas import (
    FetchInfiniteOptions,
    FetchProductsOptions,
    FilterOptions,
    ProductsResponse,
    QueryMeta,
    SearchSuggestions,
)
from martcatalog.catalog.filters import FilterCriteria, filter_products
from martcatalog.catalog.models import Product
from martcatalog.catalog.pagination import (
    CursorResult,
    normalize_product_id,
    paginate,
    paginate_by_cursor,
)
from martcatalog.catalog.recommendations import select_featured, select_related
from martcatalog.catalog.sorting import resolve_sort_option, sort_products
from martcatalog.catalog.source import InMemoryCatalog
from martcatalog.domain.exceptions import InvalidQueryError
from martcatalog.infrastructure.cache import QueryCache, utc_now
from martcatalog.infrastructure.config import Settings, get_settings
from martcatalog.infrastructure.latency import (
    CATEGORIES_LATENCY,
    CATEGORY_COUNTS_LATENCY,
    PRODUCT_LATENCY,
    PRODUCTS_BY_IDS_LATENCY,
    PRODUCTS_LATENCY,
    RECOMMENDATION_LATENCY,
    SEARCH_LATENCY,
    NetworkDelay,
)
from martcatalog.infrastructure.sanitize import sanitize_search_term

logger = structlog.get_logger()


class ProductsService:
    """Service for catalog queries.

    All collaborators are injected, so tests can pin the clock, the
    random source and the latency.

    Example usage:
        service = ProductsService.from_settings()

        page = await service.fetch_products(category="electronics", sort_by="price_asc")
        more = await service.fetch_products_infinite(cursor=12, limit=12)
    """

    def __init__(
        self,
        catalog: InMemoryCatalog,
        cache: QueryCache,
        delay: NetworkDelay | None = None,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize service.

        Args:
            catalog: Product source, read-only.
            cache: Query cache shared by all entry points.
            delay: Latency simulator; defaults to no delay.
            rng: Random source for featured selection.
            settings: Engine settings.
        """
        self.catalog = catalog
        self.cache = cache
        self.delay = delay or NetworkDelay(enabled=False)
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.random_seed)
        self.scan_count = 0

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        catalog: InMemoryCatalog | None = None,
    ) -> "ProductsService":
        """Build a service wired the way the application runs it.

        Args:
            settings: Engine settings; defaults to environment settings.
            catalog: Product source; defaults to the demo catalog.

        Returns:
            Configured service.
        """
        settings = settings or get_settings()
        return cls(
            catalog=catalog or InMemoryCatalog.demo(),
            cache=QueryCache(
                max_size=settings.cache_max_size,
                ttl=timedelta(seconds=settings.cache_ttl_seconds),
            ),
            delay=NetworkDelay(
                enabled=settings.simulate_latency,
                scale=settings.latency_scale,
            ),
            rng=random.Random(settings.random_seed),
            settings=settings,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _scan(self, criteria: FilterCriteria | None = None) -> list[Product]:
        """Run the filter stage over the full catalog."""
        self.scan_count += 1
        return filter_products(self.catalog.products, criteria)

    def _criteria(self, options: FilterOptions) -> FilterCriteria:
        """Build filter criteria from validated options."""
        search = None
        if options.search:
            search = sanitize_search_term(
                options.search, max_length=self.settings.search_max_length
            ) or None
        return FilterCriteria(
            category=options.category,
            search=search,
            on_sale=options.on_sale,
            min_price=options.min_price,
            max_price=options.max_price,
            in_stock=options.in_stock,
        )

    def _product_query(
        self, options: FetchProductsOptions
    ) -> tuple[ProductQuery, FilterCriteria]:
        """Normalize listing options into a cache descriptor and criteria."""
        criteria = self._criteria(options)
        query = ProductQuery(
            # pages below 1 always clamp to 1; upper clamping needs the scan
            page=max(1, options.page),
            page_size=options.page_size or self.settings.default_page_size,
            category=criteria.category,
            search=criteria.search,
            on_sale=criteria.on_sale,
            min_price=criteria.min_price,
            max_price=criteria.max_price,
            in_stock=criteria.in_stock,
            sort_by=resolve_sort_option(options.sort_by).value,
        )
        return query, criteria

    @staticmethod
    def _validate(model: type, operation: str, options: dict[str, Any]) -> Any:
        """Validate caller options, raising InvalidQueryError on failure."""
        try:
            return model.model_validate(options)
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            logger.warning("Rejected query options", operation=operation, errors=len(errors))
            raise InvalidQueryError(operation, errors) from exc

    @staticmethod
    def _require_positive(operation: str, name: str, value: int) -> None:
        """Reject non-positive limits."""
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidQueryError(
                operation,
                [{"loc": (name,), "msg": "must be a positive integer", "input": value}],
            )

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    async def fetch_products(self, **options: Any) -> ProductsResponse:
        """Fetch one page of products with filtering and sorting.

        Args:
            **options: FetchProductsOptions fields (page, page_size, category,
                search, on_sale, min_price, max_price, in_stock, sort_by,
                use_cache).

        Returns:
            Page of products with pagination and query metadata.

        Raises:
            InvalidQueryError: If options are malformed (e.g. page_size <= 0).
        """
        parsed: FetchProductsOptions = self._validate(
            FetchProductsOptions, "fetch_products", options
        )
        query, criteria = self._product_query(parsed)
        sort_by = resolve_sort_option(query.sort_by)

        await self.delay(PRODUCTS_LATENCY)

        if parsed.use_cache:
            cached = self.cache.get(query)
            if cached is not None:
                return cached

        logger.debug(
            "Fetching products",
            page=query.page,
            page_size=query.page_size,
            category=query.category,
            search=query.search,
            sort_by=query.sort_by,
        )

        ordered = sort_products(self._scan(criteria), sort_by)
        page = paginate(ordered, query.page, query.page_size)
        response = ProductsResponse(
            items=page.items,
            pagination=page.pagination,
            meta=QueryMeta(
                filters=MappingProxyType(criteria.to_dict()),
                sort_by=sort_by.value,
                fetched_at=utc_now(),
            ),
        )

        if parsed.use_cache:
            self.cache.set(query, response)

        return response

    async def fetch_products_infinite(self, **options: Any) -> CursorResult[Product]:
        """Fetch the next slice of products for infinite scrolling.

        Args:
            **options: FetchInfiniteOptions fields (cursor, limit and the
                shared filter and sort options).

        Returns:
            Cursor-paginated slice.

        Raises:
            InvalidQueryError: If options are malformed (e.g. limit <= 0).
        """
        parsed: FetchInfiniteOptions = self._validate(
            FetchInfiniteOptions, "fetch_products_infinite", options
        )
        criteria = self._criteria(parsed)
        sort_by = resolve_sort_option(parsed.sort_by)
        limit = parsed.limit or self.settings.infinite_page_size

        await self.delay(PRODUCTS_LATENCY)

        logger.debug(
            "Fetching products (infinite)",
            cursor=parsed.cursor,
            limit=limit,
            category=criteria.category,
        )

        ordered = sort_products(self._scan(criteria), sort_by)
        return paginate_by_cursor(ordered, parsed.cursor, limit)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def fetch_product_by_id(
        self,
        product_id: int | str,
        use_cache: bool = True,
    ) -> Product | None:
        """Fetch a single product.

        Args:
            product_id: Product ID (numeric strings accepted).
            use_cache: Whether to read and write the cache.

        Returns:
            Product, or None if no product has that id.
        """
        normalized = normalize_product_id(product_id)

        await self.delay(PRODUCT_LATENCY)

        if normalized is None:
            return None

        query = ProductLookup(product_id=normalized)
        if use_cache:
            cached = self.cache.get(query)
            if cached is not None:
                return cached

        logger.debug("Fetching product by ID", product_id=normalized)
        product = self.catalog.get(normalized)

        if use_cache and product is not None:
            self.cache.set(query, product)

        return product

    async def fetch_products_by_ids(self, product_ids: Iterable[int | str]) -> list[Product]:
        """Fetch several products.

        Args:
            product_ids: Requested ids.

        Returns:
            Found products in the order requested; unknown ids are dropped.
        """
        requested = [normalize_product_id(product_id) for product_id in product_ids]

        await self.delay(PRODUCTS_BY_IDS_LATENCY)

        logger.debug("Fetching products by IDs", count=len(requested))

        found = (self.catalog.get(product_id) for product_id in requested if product_id is not None)
        return [product for product in found if product is not None]

    # ------------------------------------------------------------------
    # Summaries
    # ------------------------------------------------------------------

    async def fetch_categories(self) -> list[str]:
        """Fetch the categories present in the catalog.

        Returns:
            "all" followed by each category value.
        """
        await self.delay(CATEGORIES_LATENCY)

        query = CategoriesQuery()
        cached = self.cache.get(query)
        if cached is not None:
            return list(cached)

        logger.debug("Fetching categories")
        self.scan_count += 1
        categories = tuple(self.catalog.categories())
        self.cache.set(query, categories)
        return list(categories)

    async def fetch_category_counts(self) -> dict[str, int]:
        """Fetch product counts per category.

        Returns:
            Mapping with the "all" total and per-category counts.
        """
        await self.delay(CATEGORY_COUNTS_LATENCY)

        query = CategoryCountsQuery()
        cached = self.cache.get(query)
        if cached is not None:
            return dict(cached)

        logger.debug("Fetching category counts")
        self.scan_count += 1
        counts = self.catalog.category_counts()
        self.cache.set(query, tuple(counts.items()))
        return counts

    # ------------------------------------------------------------------
    # Search and recommendations
    # ------------------------------------------------------------------

    async def search_products_suggestions(
        self,
        query: str | None,
        limit: int | None = None,
    ) -> SearchSuggestions:
        """Suggest product names for a partial search query.

        Queries shorter than the minimum length return an empty result
        without waiting, scanning or touching the cache.

        Args:
            query: Raw search text.
            limit: Maximum suggestions and products.

        Returns:
            Distinct matching names, a product sample and the match count.
        """
        if not query or len(query) < self.settings.min_suggestion_length:
            return SearchSuggestions()

        limit = self.settings.suggestion_limit if limit is None else limit
        self._require_positive("search_products_suggestions", "limit", limit)

        await self.delay(SEARCH_LATENCY)

        term = sanitize_search_term(query, max_length=self.settings.search_max_length).lower()
        if not term:
            return SearchSuggestions()

        self.scan_count += 1
        matches = [
            product
            for product in self.catalog.products
            if term in f"{product.name} {product.category.value}".lower()
        ]

        names = dict.fromkeys(product.name for product in matches)
        suggestions = tuple(name for name in names if term in name.lower())[:limit]

        return SearchSuggestions(
            suggestions=suggestions,
            products=tuple(matches[:limit]),
            total_matches=len(matches),
        )

    async def fetch_featured_products(
        self,
        limit: int | None = None,
        exclude_ids: Iterable[int | str] | int | str = (),
    ) -> tuple[Product, ...]:
        """Fetch featured products: sale items first, then a random sample.

        Args:
            limit: Number of products.
            exclude_ids: Product ids to leave out; a single id is accepted too.

        Returns:
            Featured products.
        """
        limit = self.settings.featured_limit if limit is None else limit
        self._require_positive("fetch_featured_products", "limit", limit)
        if isinstance(exclude_ids, (str, int)):
            exclude_ids = (exclude_ids,)
        excluded = tuple(sorted({
            product_id
            for product_id in (normalize_product_id(value) for value in exclude_ids)
            if product_id is not None
        }))

        await self.delay(RECOMMENDATION_LATENCY)

        query = FeaturedQuery(limit=limit, exclude_ids=excluded)
        cached = self.cache.get(query)
        if cached is not None:
            return cached

        logger.debug("Fetching featured products", limit=limit, excluded=len(excluded))
        self.scan_count += 1
        featured = select_featured(self.catalog.products, limit, excluded, self.rng)
        self.cache.set(query, featured)
        return featured

    async def fetch_related_products(
        self,
        product_id: int | str,
        limit: int | None = None,
    ) -> tuple[Product, ...]:
        """Fetch products related to a given product.

        Args:
            product_id: Reference product ID.
            limit: Number of related products.

        Returns:
            Same-category products, backfilled from other categories.
            Empty when the reference product does not exist.
        """
        limit = self.settings.related_limit if limit is None else limit
        self._require_positive("fetch_related_products", "limit", limit)
        normalized = normalize_product_id(product_id)

        await self.delay(RECOMMENDATION_LATENCY)

        if normalized is None or self.catalog.get(normalized) is None:
            return ()

        query = RelatedQuery(product_id=normalized, limit=limit)
        cached = self.cache.get(query)
        if cached is not None:
            return cached

        logger.debug("Fetching related products", product_id=normalized, limit=limit)
        self.scan_count += 1
        related = select_related(self.catalog.products, normalized, limit)
        self.cache.set(query, related)
        return related

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def clear_products_cache(self) -> None:
        """Drop every cached result. Call after catalog mutations."""
        self.cache.clear()

    def invalidate_products_cache(self, pattern: str) -> int:
        """Drop cached results whose key contains a substring.

        Args:
            pattern: Key substring, e.g. "category=books|".

        Returns:
            Number of entries removed.
        """
        return self.cache.invalidate(pattern)

    async def prefetch_category(self, category: str) -> bool:
        """Warm the cache with the first page of a category.

        Args:
            category: Category value.

        Returns:
            True if a fetch ran, False if the page was already cached.
        """
        options = {"category": category, "page": 1}
        parsed: FetchProductsOptions = self._validate(
            FetchProductsOptions, "prefetch_category", options
        )
        query, _ = self._product_query(parsed)
        if self.cache.contains(query):
            return False

        await self.fetch_products(**options)
        logger.debug("Prefetched category", category=category)
        return True
