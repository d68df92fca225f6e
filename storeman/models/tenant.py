"""Tenant model."""

import uuid as uuid_lib

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


def _default_currency():
    from storeman.conf import storeman_settings

    return storeman_settings.DEFAULT_CURRENCY


def _default_low_stock_threshold():
    from storeman.conf import storeman_settings

    return storeman_settings.LOW_STOCK_THRESHOLD


class TenantQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)


class Tenant(models.Model):
    """
    Independent merchant with an isolated catalog.

    Identified on the storefront by its subdomain.
    """

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    subdomain = models.SlugField(max_length=63, unique=True, verbose_name=_("subdomain"))
    name = models.CharField(max_length=200, verbose_name=_("name"))

    currency = models.CharField(
        max_length=3,
        default=_default_currency,
        help_text=_("ISO 4217 code, e.g. USD, EUR, CRC"),
        verbose_name=_("currency"),
    )
    low_stock_threshold = models.PositiveIntegerField(
        default=_default_low_stock_threshold,
        validators=[MinValueValidator(1)],
        help_text=_("Show the low stock badge at or below this many units"),
        verbose_name=_("low stock threshold"),
    )

    is_active = models.BooleanField(default=True, db_index=True, verbose_name=_("active"))

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    objects = TenantQuerySet.as_manager()

    class Meta:
        verbose_name = _("tenant")
        verbose_name_plural = _("tenants")
        ordering = ["name"]

    def __str__(self):
        return f"{self.subdomain} - {self.name}"

    def save(self, *args, **kwargs):
        self.currency = (self.currency or "").upper()
        super().save(*args, **kwargs)
