"""Tenant admin."""

from django.contrib import admin

from storeman.models import Tenant


@admin.register(Tenant)
class TenantAdmin(admin.ModelAdmin):
    list_display = ["subdomain", "name", "currency", "low_stock_threshold", "is_active", "products_count"]
    list_filter = ["is_active", "currency"]
    search_fields = ["subdomain", "name"]
    list_editable = ["is_active"]
    readonly_fields = ["uuid", "created_at", "updated_at"]

    fieldsets = [
        (None, {"fields": ("subdomain", "name")}),
        ("Storefront", {"fields": ("currency", "low_stock_threshold")}),
        ("Status", {"fields": ("is_active", "uuid", "created_at", "updated_at")}),
    ]

    def products_count(self, obj):
        return obj.products.count()

    products_count.short_description = "Products"
