"""
Alternative product suggestions with scoring.

When a product is out of stock, suggests in-stock products of the same
tenant based on tags, category, and resolved price similarity.

Scoring weights:
    - Tags in common: 3 points each
    - Same category: 2 points
    - Effective price within ±30%: 1 point
"""

from decimal import Decimal

from storeman.models import Product
from storeman.service import CatalogService


def _score_candidates(
    candidates: list[Product],
    product: Product,
    product_tags: list[str],
) -> list[Product]:
    """
    Score and sort candidate products.

    Scoring:
        - Tags in common: 3 points each
        - Same category as reference: 2 points
        - Effective price within ±30% of reference: 1 point
    """
    reference_price = product.effective_price
    price_low = reference_price * Decimal("0.7")
    price_high = reference_price * Decimal("1.3")

    scored = []
    for candidate in candidates:
        score = 0

        # Tags in common (3 points each)
        common = len(set(product_tags) & set(candidate.tags.names()))
        score += common * 3

        # Same category (2 points)
        if product.category_id and candidate.category_id == product.category_id:
            score += 2

        # Price within ±30% (1 point)
        if price_low <= candidate.effective_price <= price_high:
            score += 1

        scored.append((score, candidate))

    scored.sort(key=lambda x: x[0], reverse=True)
    return [candidate for _, candidate in scored]


def _candidates(tenant, product: Product):
    return (
        Product.objects.for_tenant(tenant)
        .active()
        .with_variants()
        .exclude(pk=product.pk)
    )


def find_alternatives(
    tenant,
    slug: str,
    limit: int = 5,
    same_category: bool = True,
) -> list[Product]:
    """
    Find in-stock alternatives for a product.

    Algorithm:
    1. Find products with common tags
    2. Optionally filter by same category
    3. Drop products resolved as out of stock
    4. Score by tags (x3), category (x2), price similarity (x1)

    Args:
        tenant: Tenant instance or subdomain
        slug: Slug of the unavailable product
        limit: Maximum suggestions
        same_category: Only look in the product's category

    Returns:
        List of alternative products, sorted by score descending
    """
    product = CatalogService.get(tenant, slug)
    if not product:
        return []

    product_tags = list(product.tags.names())
    if not product_tags:
        return []

    qs = _candidates(tenant, product).filter(tags__name__in=product_tags).distinct()

    if same_category and product.category_id:
        qs = qs.filter(category_id=product.category_id)

    # Fetch a wider pool for scoring, then trim
    candidates = [p for p in qs[: limit * 3] if not p.is_out_of_stock]
    scored = _score_candidates(candidates, product, product_tags)
    return scored[:limit]


def find_similar(
    tenant,
    slug: str,
    limit: int = 5,
) -> list[Product]:
    """
    Find similar products.

    Useful for: "You might also like..."

    Args:
        tenant: Tenant instance or subdomain
        slug: Reference slug
        limit: Maximum suggestions

    Returns:
        List of similar products, sorted by score descending
    """
    product = CatalogService.get(tenant, slug)
    if not product:
        return []

    product_tags = list(product.tags.names())
    qs = _candidates(tenant, product)

    if product.category_id:
        qs = qs.filter(category_id=product.category_id)

    if product_tags:
        qs = qs.filter(tags__name__in=product_tags).distinct()

    candidates = list(qs[: limit * 3])
    scored = _score_candidates(candidates, product, product_tags)
    return scored[:limit]
