from django.urls import re_path
from .views import ProductsView, ProductDetailView, CategoriesView

urlpatterns = [
    re_path(r'^$', ProductsView.as_view(), name='products'),
    re_path(r'^categories/?$', CategoriesView.as_view(), name='categories'),
    re_path(r'^(?P<product_id>\d+)/?$', ProductDetailView.as_view(), name='product-detail'),
]
