"""Product model."""

import logging
import uuid as uuid_lib
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords
from taggit.managers import TaggableManager

from storeman import pricing
from storeman.choices import ProductType

logger = logging.getLogger(__name__)


class ProductQuerySet(models.QuerySet):
    """Custom QuerySet for Product with storefront filters."""

    def for_tenant(self, tenant):
        """Products owned by a tenant (instance or subdomain)."""
        if isinstance(tenant, str):
            return self.filter(tenant__subdomain=tenant)
        return self.filter(tenant=tenant)

    def active(self):
        """Products visible on the storefront."""
        return self.filter(is_active=True)

    def featured(self):
        return self.filter(is_active=True, is_featured=True)

    def with_variants(self):
        """Prefetch variants so the resolvers don't query per product."""
        return self.prefetch_related("variants")


class Product(models.Model):
    """Sellable product of a tenant."""

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    tenant = models.ForeignKey(
        "storeman.Tenant",
        on_delete=models.CASCADE,
        related_name="products",
        verbose_name=_("tenant"),
    )

    # Identification
    slug = models.SlugField(_("slug"), max_length=200)
    name = models.CharField(_("name"), max_length=200)
    sku = models.CharField(_("SKU"), max_length=100, blank=True, null=True)
    short_description = models.CharField(
        _("short description"),
        max_length=255,
        blank=True,
        help_text=_("Summary shown on product cards (max. 255 characters)"),
    )
    description = models.TextField(_("description"), blank=True)

    category = models.ForeignKey(
        "storeman.Category",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="products",
        verbose_name=_("category"),
    )
    tags = TaggableManager(
        blank=True,
        verbose_name=_("tags"),
        help_text=_("Comma separated tags for search and filtering."),
    )

    product_type = models.CharField(
        _("product type"),
        max_length=20,
        choices=ProductType.choices,
        default=ProductType.SINGLE,
        db_index=True,
    )

    # Pricing (ignored for variable products, see storeman.pricing)
    price = models.DecimalField(
        _("price"),
        max_digits=12,
        decimal_places=2,
        default=Decimal("0"),
        validators=[MinValueValidator(Decimal("0"))],
    )
    compare_price = models.DecimalField(
        _("compare price"),
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
        help_text=_("\"Was\" price, shown struck through when above the price"),
    )

    # Inventory (ignored for variable products)
    track_inventory = models.BooleanField(_("track inventory"), default=True)
    inventory_quantity = models.IntegerField(_("inventory quantity"), default=0)

    is_active = models.BooleanField(_("active"), default=True, db_index=True)
    is_featured = models.BooleanField(_("featured"), default=False)

    metadata = models.JSONField(_("metadata"), default=dict, blank=True)

    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    history = HistoricalRecords()

    objects = ProductQuerySet.as_manager()

    class Meta:
        verbose_name = _("product")
        verbose_name_plural = _("products")
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["tenant", "slug"],
                name="unique_product_slug_per_tenant",
            ),
        ]
        indexes = [
            models.Index(fields=["tenant", "is_active"], name="storeman_product_tenant_active"),
        ]

    def __str__(self):
        return f"{self.slug} - {self.name}"

    def save(self, *args, **kwargs):
        is_new = self._state.adding
        old_price = None
        if not is_new and self.product_type != ProductType.VARIABLE:
            old_price = Product.objects.filter(pk=self.pk).values_list("price", flat=True).first()
        super().save(*args, **kwargs)

        from storeman.signals import price_changed, product_created

        if is_new:
            logger.info("Product created: %s/%s", self.tenant_id, self.slug)
            product_created.send(sender=self.__class__, instance=self, slug=self.slug)
        elif old_price is not None and old_price != self.price:
            price_changed.send(
                sender=self.__class__,
                instance=self,
                product=self,
                variant=None,
                old_price=old_price,
                new_price=self.price,
            )

    # ------------------------------------------------------------------
    # Resolved price and stock
    # ------------------------------------------------------------------

    def _variants(self):
        if not self.pk or self.product_type != ProductType.VARIABLE:
            return []
        return self.variants.all()

    @property
    def is_variable(self) -> bool:
        return self.product_type == ProductType.VARIABLE

    @property
    def effective_price(self) -> Decimal:
        return pricing.resolve_effective_price(self, self._variants())

    @property
    def effective_compare_price(self) -> Decimal | None:
        return pricing.resolve_effective_compare_price(self, self._variants())

    @property
    def price_range(self):
        return pricing.resolve_price_range(self, self._variants())

    @property
    def is_out_of_stock(self) -> bool:
        return pricing.resolve_out_of_stock(self, self._variants())

    def get_pricing(self):
        return pricing.resolve_pricing(self, self._variants())

    def get_stock(self, low_stock_threshold: int | None = None):
        if low_stock_threshold is None and self.tenant_id:
            low_stock_threshold = self.tenant.low_stock_threshold
        return pricing.resolve_stock(self, self._variants(), low_stock_threshold)
