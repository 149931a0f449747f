"""
URL configuration for the Avicultura Dia a Dia API.

All JSON endpoints live under /api/. The Django admin is mounted at /admin/.
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(url='/admin/', permanent=False)),
    path('admin/', admin.site.urls),
    path('api/', include('accounts.urls')),  # register / login / logout / user
    path('api/', include('farms.urls')),  # Farm settings and hen count history
    path('api/collections/', include('production.urls')),  # Egg collections
    path('api/stock/', include('inventory.urls')),  # Egg stock
    path('api/financial/', include('finances.urls')),  # Financial movements
    path('api/dashboard/', include('dashboards.urls')),  # Dashboard stats
]
