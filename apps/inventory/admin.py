from django.contrib import admin
from .models import Inventory, StockMovement


@admin.register(Inventory)
class InventoryAdmin(admin.ModelAdmin):
    list_display = ['product', 'quantity', 'min_threshold', 'purchase_price', 'expiration_date', 'last_restock_date']
    search_fields = ['product__name']
    # Quantity is changed through stock movements only
    readonly_fields = ['quantity', 'last_restock_date', 'created_at', 'updated_at']


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = ['timestamp', 'product', 'action_type', 'quantity', 'performed_by', 'reason']
    list_filter = ['action_type', 'timestamp']
    search_fields = ['product__name', 'reason']
    raw_id_fields = ['inventory', 'product', 'performed_by', 'transaction']
    
    def has_change_permission(self, request, obj=None):
        return False
    
    def has_delete_permission(self, request, obj=None):
        return False
