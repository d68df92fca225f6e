"""Category admin."""

from django.contrib import admin

from storeman.models import Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = [
        "slug",
        "name",
        "tenant",
        "parent",
        "is_active",
        "products_count",
    ]
    list_filter = ["is_active", "tenant"]
    search_fields = ["slug", "name"]
    list_editable = ["is_active"]
    ordering = ["tenant", "sort_order", "name"]
    prepopulated_fields = {"slug": ("name",)}

    fieldsets = [
        (None, {"fields": ("tenant", "slug", "name", "description")}),
        ("Hierarchy", {"fields": ("parent",)}),
        ("Settings", {"fields": ("sort_order", "is_active")}),
    ]

    def products_count(self, obj):
        return obj.products.count()

    products_count.short_description = "Products"
