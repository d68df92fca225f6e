"""Choices shared by models and the pricing resolvers."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ProductType(models.TextChoices):
    """How a product is sold.

    Variable products delegate price and stock to their variants.
    """

    SINGLE = "single", _("Single")
    VARIABLE = "variable", _("Variable")
    DIGITAL = "digital", _("Digital")


class StockStatus(models.TextChoices):
    GOOD = "good", _("In stock")
    LOW = "low", _("Low stock")
    OUT = "out", _("Out of stock")
    UNTRACKED = "untracked", _("Not tracked")
