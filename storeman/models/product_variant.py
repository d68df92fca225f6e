"""ProductVariant model."""

import logging
import uuid as uuid_lib
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

logger = logging.getLogger(__name__)


class ProductVariant(models.Model):
    """
    Purchasable SKU of a variable product (e.g. size M / blue).

    Variants are created and deleted through the parent product only.
    """

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    product = models.ForeignKey(
        "storeman.Product",
        on_delete=models.CASCADE,
        related_name="variants",
        verbose_name=_("product"),
    )
    title = models.CharField(_("title"), max_length=200)
    sku = models.CharField(_("SKU"), max_length=100, blank=True)
    attributes = models.JSONField(
        _("attributes"),
        default=list,
        blank=True,
        help_text=_('List of {"name": ..., "value": ...} pairs'),
    )

    # Null price = not independently priced, excluded from aggregation
    price = models.DecimalField(
        _("price"),
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    compare_price = models.DecimalField(
        _("compare price"),
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    cost_price = models.DecimalField(
        _("cost price"),
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )

    inventory_quantity = models.IntegerField(_("inventory quantity"), default=0)
    is_active = models.BooleanField(_("active"), default=True)
    sort_order = models.IntegerField(_("order"), default=0)

    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    history = HistoricalRecords()

    class Meta:
        verbose_name = _("product variant")
        verbose_name_plural = _("product variants")
        ordering = ["product", "sort_order", "id"]

    def __str__(self):
        return f"{self.product.slug} / {self.title}"

    def save(self, *args, **kwargs):
        old_price = None
        price_changed_flag = False
        if not self._state.adding:
            old_price = ProductVariant.objects.filter(pk=self.pk).values_list("price", flat=True).first()
            price_changed_flag = old_price != self.price
        super().save(*args, **kwargs)
        if price_changed_flag:
            from storeman.signals import price_changed

            logger.info("Variant %s price changed: %s -> %s", self.pk, old_price, self.price)
            price_changed.send(
                sender=self.__class__,
                instance=self,
                product=self.product,
                variant=self,
                old_price=old_price,
                new_price=self.price,
            )

    @property
    def attribute_label(self) -> str:
        """'Size: M, Color: Blue'."""
        return ", ".join(
            f"{attr.get('name')}: {attr.get('value')}"
            for attr in self.attributes or []
            if isinstance(attr, dict)
        )
