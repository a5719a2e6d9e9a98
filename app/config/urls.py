from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('authentication.urls')),
    path('api/tariffs/', include('tariffs.urls')),
    path('api/', include('transactions.urls')),
]
