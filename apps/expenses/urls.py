from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/                       - List expenses
    # POST   /api/expenses/                       - Record expense (admin)
    # GET    /api/expenses/{id}/                  - Get expense
    # PATCH  /api/expenses/{id}/                  - Edit (admin)
    # DELETE /api/expenses/{id}/                  - Delete (admin)
    # GET    /api/expenses/byDate/                - ?startDate=&endDate=
    # GET    /api/expenses/byCategory/{category}/ - One category
    path('', include(router.urls)),
]
