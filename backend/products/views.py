from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from .serializers import ProductSerializer, ProductFilterSerializer
from .services import ProductNotFound, product_service
import logging

logger = logging.getLogger(__name__)


def validation_error(errors):
    return Response({
        'message': 'Validation failed',
        'errors': errors
    }, status=status.HTTP_400_BAD_REQUEST)


def not_found():
    return Response({
        'message': ProductNotFound.message
    }, status=status.HTTP_404_NOT_FOUND)


class ProductsView(APIView):
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request):
        """List products with optional category/price/rating/search filters"""
        filters = ProductFilterSerializer(data=request.query_params)
        if not filters.is_valid():
            return validation_error(filters.errors)

        try:
            products = product_service.find_all(filters.validated_data)
            return Response(ProductSerializer(products, many=True).data)
        except Exception as e:
            logger.error(f"Error fetching products: {e}")
            return Response({
                'message': 'Failed to fetch products'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def post(self, request):
        """Create a product owned by the requesting user"""
        serializer = ProductSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer.errors)

        try:
            product = product_service.create(serializer.validated_data, request.user)
            return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)
        except Exception as e:
            logger.error(f"Error creating product: {e}")
            return Response({
                'message': 'Failed to create product'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ProductDetailView(APIView):
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, product_id):
        try:
            product = product_service.find_one(product_id)
            return Response(ProductSerializer(product).data)
        except ProductNotFound:
            return not_found()
        except Exception as e:
            logger.error(f"Error fetching product {product_id}: {e}")
            return Response({
                'message': 'Failed to fetch product details'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def patch(self, request, product_id):
        serializer = ProductSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return validation_error(serializer.errors)

        try:
            product = product_service.update(product_id, serializer.validated_data, request.user)
            return Response(ProductSerializer(product).data)
        except ProductNotFound:
            return not_found()
        except Exception as e:
            logger.error(f"Error updating product {product_id}: {e}")
            return Response({
                'message': 'Failed to update product'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def delete(self, request, product_id):
        try:
            return Response(product_service.remove(product_id, request.user))
        except ProductNotFound:
            return not_found()
        except Exception as e:
            logger.error(f"Error deleting product {product_id}: {e}")
            return Response({
                'message': 'Failed to delete product'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class CategoriesView(APIView):
    def get(self, request):
        """Get all product categories"""
        try:
            return Response({
                'categories': product_service.categories()
            })
        except Exception as e:
            logger.error(f"Error fetching categories: {e}")
            return Response({
                'message': 'Failed to fetch categories'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
