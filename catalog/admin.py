"""Admin registration for catalog models."""

from django.contrib import admin
from inventory.models import StockMovement

from .models import Item


class StockMovementInline(admin.TabularInline):
    model = StockMovement
    extra = 0
    fields = ("movement_type", "quantity", "reason", "reference", "created_at")
    readonly_fields = ("movement_type", "quantity", "reason", "reference", "created_at")
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("title", "sku", "price", "inventory", "updated_at")
    search_fields = ("title", "sku")
    ordering = ("title",)
    inlines = [StockMovementInline]
