"""Storefront demo catalog.

Static product data served by the default in-memory catalog source.
Ids are assigned in catalog order, grouped by category.
"""

from martcatalog.catalog.models import Category, Product


# ============================================================================
# Raw Records
# ============================================================================

# (id, name, price, category, description, sale_price, stock)
_RECORDS: list[tuple[int, str, str, Category, str, str | None, int | None]] = [
    # Electronics
    (1, "Wireless Earbuds", "49.99", Category.ELECTRONICS,
     "High-quality sound with noise cancellation.", "39.99", 25),
    (2, "Smart Watch", "129.99", Category.ELECTRONICS,
     "Track health metrics and receive notifications.", None, 12),
    (3, "Bluetooth Speaker", "79.99", Category.ELECTRONICS,
     "Portable speaker with rich bass and clear sound.", None, None),
    (4, "4K Action Camera", "199.99", Category.ELECTRONICS,
     "Capture your adventures in stunning 4K resolution.", None, 0),
    # Fashion
    (5, "Classic White Sneakers", "59.99", Category.FASHION,
     "Versatile white sneakers for any outfit.", None, 40),
    (6, "Denim Jacket", "89.99", Category.FASHION,
     "Classic denim jacket for all seasons.", "59.99", 8),
    (7, "Leather Crossbody Bag", "69.99", Category.FASHION,
     "Stylish crossbody bag with multiple compartments.", None, None),
    (8, "Aviator Sunglasses", "29.99", Category.FASHION,
     "Classic aviator style with UV protection.", None, None),
    # Home
    (9, "Coffee Maker", "89.99", Category.HOME,
     "Programmable coffee maker for perfect brews.", None, 15),
    (10, "Throw Blanket", "34.99", Category.HOME,
     "Soft and cozy blanket for your living room.", None, None),
    (11, "Scented Candle Set", "24.99", Category.HOME,
     "Set of 3 scented candles for relaxation.", "17.99", None),
    (12, "Modern Wall Clock", "42.99", Category.HOME,
     "Sleek wall clock for contemporary homes.", None, 0),
    # Beauty
    (13, "Skincare Set", "59.99", Category.BEAUTY,
     "Complete skincare routine in one package.", None, None),
    (14, "Hair Styling Tools", "129.99", Category.BEAUTY,
     "Professional styling kit for salon-quality results.", "89.99", 6),
    (15, "Makeup Palette", "39.99", Category.BEAUTY,
     "Versatile eyeshadow palette with 18 colors.", None, None),
    (16, "Perfume Collection", "84.99", Category.BEAUTY,
     "Set of 3 signature scents for any occasion.", None, None),
    # Sports
    (17, "Yoga Mat", "34.99", Category.SPORTS,
     "Non-slip yoga mat for your workout routine.", "24.99", 30),
    (18, "Fitness Tracker", "99.99", Category.SPORTS,
     "Monitor your activity and health metrics.", None, None),
    (19, "Resistance Bands", "19.99", Category.SPORTS,
     "Set of 5 bands for strength training.", None, None),
    (20, "Water Bottle", "16.99", Category.SPORTS,
     "Insulated bottle to keep your drinks cold.", None, 100),
    # Food
    (21, "Gourmet Coffee", "15.99", Category.FOOD,
     "Premium medium roast from sustainable farms.", None, None),
    (22, "Artisan Chocolate Box", "24.99", Category.FOOD,
     "Assorted handcrafted chocolates in a gift box.", "19.99", None),
    (23, "Organic Tea Collection", "22.99", Category.FOOD,
     "Set of 5 premium loose leaf teas.", None, None),
    (24, "Spice Gift Set", "29.99", Category.FOOD,
     "Collection of gourmet spices from around the world.", None, 0),
    # Books
    (25, "Bestselling Novel", "14.99", Category.BOOKS,
     "The latest page-turner everyone's talking about.", None, None),
    (26, "Cookbook", "27.99", Category.BOOKS,
     "100 recipes for quick and healthy meals.", None, None),
    (27, "Self-Help Book", "17.99", Category.BOOKS,
     "Practical advice for personal growth.", None, None),
    (28, "Journal Set", "22.99", Category.BOOKS,
     "Set of 3 journals for planning and reflection.", None, None),
    # Toys
    (29, "Building Blocks", "29.99", Category.TOYS,
     "Creative building set for ages 3+.", None, None),
    (30, "Plush Animal", "19.99", Category.TOYS,
     "Soft and huggable stuffed animal.", None, None),
    (31, "Board Game", "34.99", Category.TOYS,
     "Family game night favorite for 2-6 players.", None, None),
    (32, "Art Supply Kit", "24.99", Category.TOYS,
     "Complete art kit for young creatives.", None, None),
]


def _image_url(product_id: int) -> str:
    """Placeholder image URL for a product."""
    return f"https://picsum.photos/seed/mart-{product_id}/600/600"


def demo_products() -> list[Product]:
    """Build the storefront demo catalog.

    Returns:
        Products in catalog order.
    """
    return [
        Product(
            id=product_id,
            name=name,
            price=price,
            category=category,
            description=description,
            image=_image_url(product_id),
            on_sale=sale_price is not None,
            sale_price=sale_price,
            stock=stock,
        )
        for product_id, name, price, category, description, sale_price, stock in _RECORDS
    ]
