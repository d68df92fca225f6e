"""
Storeman signals.

Signals:
    product_created:
        Sent after a new Product is saved for the first time.

        Kwargs:
            sender: Product class
            instance: The Product instance that was created
            slug: str, the product slug

    price_changed:
        Sent after the price of a non-variable Product or of a
        ProductVariant changes.

        Kwargs:
            sender: Product or ProductVariant class
            instance: The saved instance
            product: the Product whose resolved price may have moved
            variant: the ProductVariant, or None for product-level prices
            old_price: Decimal | None
            new_price: Decimal | None

        Example handler::

            from storeman.signals import price_changed

            def on_price_changed(sender, product, old_price, new_price, **kwargs):
                logger.info("Price for %s changed: %s -> %s", product.slug, old_price, new_price)

            price_changed.connect(on_price_changed)
"""

from django.dispatch import Signal

product_created = Signal()
price_changed = Signal()
