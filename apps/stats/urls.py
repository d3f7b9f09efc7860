from django.urls import path
from . import views

app_name = 'stats'

urlpatterns = [
    path('daily/', views.daily_stats, name='daily'),
    path('range/', views.stats_range, name='range'),
    path('net-revenue/', views.net_revenue, name='net-revenue'),
]
