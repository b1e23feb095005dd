from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/shop/", include("shop.urls")),
    path("api/positions/", include("positions.urls")),
]
