from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'inventory'

router = DefaultRouter()
router.register(r'', views.InventoryViewSet, basename='inventory')

urlpatterns = [
    # GET    /api/inventory/               - List inventory
    # POST   /api/inventory/               - Create inventory row
    # GET    /api/inventory/{id}/          - Get inventory row
    # PATCH  /api/inventory/{id}/          - Threshold, purchase price, expiration
    # POST   /api/inventory/stock/add/     - Receive stock
    # POST   /api/inventory/stock/remove/  - Take stock out
    # POST   /api/inventory/stock/adjust/  - Set counted quantity
    # GET    /api/inventory/expiring/      - ?days=7
    # GET    /api/inventory/low-stock/     - At or below threshold
    # GET    /api/inventory/movements/     - ?productId=
    path('', include(router.urls)),
]
