"""Category model."""

import uuid as uuid_lib

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class Category(models.Model):
    """Hierarchical product grouping, scoped to one tenant."""

    uuid = models.UUIDField(default=uuid_lib.uuid4, editable=False, unique=True, verbose_name=_("UUID"))

    tenant = models.ForeignKey(
        "storeman.Tenant",
        on_delete=models.CASCADE,
        related_name="categories",
        verbose_name=_("tenant"),
    )
    slug = models.SlugField(max_length=100, verbose_name=_("slug"))
    name = models.CharField(max_length=100, verbose_name=_("name"))
    description = models.TextField(blank=True, verbose_name=_("description"))

    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="children",
        verbose_name=_("parent category"),
    )

    sort_order = models.IntegerField(default=0, verbose_name=_("order"))
    is_active = models.BooleanField(default=True, verbose_name=_("active"))

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        verbose_name = _("category")
        verbose_name_plural = _("categories")
        ordering = ["sort_order", "name"]
        constraints = [
            models.UniqueConstraint(
                fields=["tenant", "slug"],
                name="unique_category_slug_per_tenant",
            ),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        """Validate same-tenant parent, no circular reference and max depth."""
        from storeman.conf import storeman_settings

        if self.parent_id:
            if self.parent.tenant_id != self.tenant_id:
                raise ValidationError({"parent": "Parent category belongs to another tenant."})

            visited = {self.pk}
            current = self.parent
            depth = 1
            while current:
                if current.pk in visited:
                    raise ValidationError({"parent": "Circular reference detected."})
                visited.add(current.pk)
                depth += 1
                current = current.parent

            if depth > storeman_settings.MAX_CATEGORY_DEPTH:
                raise ValidationError(
                    {"parent": f"Max category depth ({storeman_settings.MAX_CATEGORY_DEPTH}) exceeded."}
                )

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    @property
    def full_path(self) -> str:
        """Returns full path: 'Clothing > Shirts'."""
        if self.parent:
            return f"{self.parent.full_path} > {self.name}"
        return self.name

    @property
    def depth(self) -> int:
        """Returns depth in hierarchy (0 for root)."""
        if self.parent:
            return self.parent.depth + 1
        return 0

    def get_ancestors(self, max_depth: int | None = None) -> list["Category"]:
        """Returns list of ancestors from root to parent."""
        if max_depth is None:
            from storeman.conf import storeman_settings

            max_depth = storeman_settings.MAX_CATEGORY_DEPTH
        ancestors = []
        current = self.parent
        depth = 0
        while current and depth < max_depth:
            ancestors.insert(0, current)
            current = current.parent
            depth += 1
        return ancestors

    def get_descendants(self, max_depth: int | None = None, _depth: int = 0) -> list["Category"]:
        """Returns all descendants (children, grandchildren, etc.)."""
        if max_depth is None:
            from storeman.conf import storeman_settings

            max_depth = storeman_settings.MAX_CATEGORY_DEPTH
        if _depth >= max_depth:
            return []
        children = list(self.children.all())
        descendants = list(children)
        for child in children:
            descendants.extend(child.get_descendants(max_depth=max_depth, _depth=_depth + 1))
        return descendants
