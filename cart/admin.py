"""Admin registration for cart models.

Provides admin interfaces for `Cart` and `LineItem`, with inline line items
on the cart page for easier moderation and support.
"""

from django.contrib import admin, messages

from .models import Cart, LineItem
from .services import CartError, checkout, empty_cart


class LineItemInline(admin.TabularInline):
    model = LineItem
    extra = 0
    fields = ("item", "quantity", "created_at", "updated_at")
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("item",)


@admin.register(Cart)
class CartAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "cart_total", "updated_at", "created_at")
    search_fields = ("user__username", "user__email")
    ordering = ("-updated_at",)
    readonly_fields = ("created_at", "updated_at")
    inlines = [LineItemInline]
    autocomplete_fields = ("user",)
    list_select_related = ("user",)

    @admin.display(description="Total")
    def cart_total(self, obj):
        return obj.total

    @admin.action(description="Empty cart (delete line items, keep cart)")
    def action_empty_cart(self, request, queryset):
        count = 0
        for cart in queryset:
            empty_cart(cart=cart)
            count += 1
        messages.success(request, f"Emptied {count} cart(s).")

    @admin.action(description="Check out cart on behalf of its user")
    def action_checkout(self, request, queryset):
        successes = 0
        failures = 0
        for cart in queryset:
            try:
                checkout(cart=cart)
                successes += 1
            except CartError:
                failures += 1
        if successes:
            messages.success(request, f"Checked out {successes} cart(s).")
        if failures:
            messages.error(request, f"Failed to check out {failures} cart(s).")

    actions = ["action_empty_cart", "action_checkout"]


@admin.register(LineItem)
class LineItemAdmin(admin.ModelAdmin):
    list_display = ("id", "cart", "item", "quantity", "updated_at")
    search_fields = ("item__sku", "cart__user__email")
    ordering = ("id",)
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("cart", "item")


# EOF
