"""Product admin."""

from django.contrib import admin
from django.utils.html import format_html

from storeman.choices import StockStatus
from storeman.formatting import format_pricing
from storeman.models import Product, ProductVariant

STOCK_BADGE_COLORS = {
    StockStatus.GOOD: ("#28a745", "#fff"),
    StockStatus.LOW: ("#ffc107", "#000"),
    StockStatus.OUT: ("#dc3545", "#fff"),
    StockStatus.UNTRACKED: ("#6c757d", "#fff"),
}


class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 1
    fields = [
        "title",
        "sku",
        "price",
        "compare_price",
        "cost_price",
        "inventory_quantity",
        "is_active",
        "sort_order",
    ]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = [
        "slug",
        "name",
        "tenant",
        "product_type",
        "formatted_price",
        "stock_status",
        "is_active",
    ]
    list_filter = [
        "tenant",
        "product_type",
        "is_active",
        "is_featured",
        "track_inventory",
    ]
    search_fields = ["slug", "name", "sku", "tags__name"]
    readonly_fields = ["uuid", "created_at", "updated_at", "formatted_price", "stock_status"]
    autocomplete_fields = ["category"]
    inlines = [ProductVariantInline]

    fieldsets = [
        (
            None,
            {"fields": ("tenant", "slug", "name", "sku", "short_description", "description", "category", "tags")},
        ),
        (
            "Price",
            {
                "fields": ("product_type", "price", "compare_price", "formatted_price"),
                "description": "Variable products take price, compare price and stock from their active variants.",
            },
        ),
        (
            "Inventory",
            {"fields": ("track_inventory", "inventory_quantity", "stock_status")},
        ),
        (
            "Visibility",
            {"fields": ("is_active", "is_featured")},
        ),
        (
            "Metadata",
            {
                "fields": ("metadata", "uuid", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    ]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("tenant").prefetch_related("variants")

    def formatted_price(self, obj):
        if not obj.pk:
            return "-"
        return format_pricing(obj.get_pricing(), obj.tenant.currency)

    formatted_price.short_description = "Price"

    def stock_status(self, obj):
        """Resolved stock with a colored badge."""
        if not obj.pk:
            return "-"
        stock = obj.get_stock()
        background, color = STOCK_BADGE_COLORS[StockStatus(stock.status)]
        label = StockStatus(stock.status).label
        if stock.status != StockStatus.UNTRACKED:
            label = f"{label} ({stock.total})"
        return format_html(
            '<span style="background-color:{};color:{};'
            'padding:2px 6px;border-radius:3px;font-size:11px;">{}</span>',
            background,
            color,
            label,
        )

    stock_status.short_description = "Stock"

    actions = ["activate_products", "deactivate_products"]

    @admin.action(description="Activate selected products")
    def activate_products(self, request, queryset):
        updated = queryset.update(is_active=True)
        self.message_user(request, f"{updated} product(s) activated.")

    @admin.action(description="Deactivate selected products")
    def deactivate_products(self, request, queryset):
        updated = queryset.update(is_active=False)
        self.message_user(request, f"{updated} product(s) deactivated.")
