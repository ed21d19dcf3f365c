from django.contrib import admin
from django.urls import include, path, re_path

urlpatterns = [
    path('admin/', admin.site.urls),
    # Product and auth routes answer with or without a trailing slash
    re_path(r'^api/auth/', include('authentication.urls')),
    re_path(r'^api/products(?:/|$)', include('products.urls')),
    path('api/incidents/', include('incidents.urls')),
]
