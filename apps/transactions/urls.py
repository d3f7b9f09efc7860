from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'transactions'

router = DefaultRouter()
router.register(r'', views.TransactionViewSet, basename='transaction')

urlpatterns = [
    # GET    /api/transactions/                 - List (?limit=&offset=)
    # POST   /api/transactions/                 - Record transaction
    # GET    /api/transactions/{id}/            - Get transaction
    # PATCH  /api/transactions/{id}/            - Edit (super admin)
    # DELETE /api/transactions/{id}/            - Delete (super admin)
    # GET    /api/transactions/byDate/          - ?startDate=&endDate=
    # GET    /api/transactions/byType/{type}/   - entry, subscription or cafe
    path('', include(router.urls)),
]
