"""
Product service layer: catalog queries and owner-scoped mutations.

Update and delete treat a product owned by someone else exactly like a
missing one, so callers cannot probe for other users' product ids.
"""
import logging

from django.db.models import Q

from .models import Product

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ('name', 'description', 'category', 'price', 'rating')


class ProductNotFound(Exception):
    message = 'Product not found'

    def __init__(self, product_id):
        super().__init__(f"{self.message}: {product_id}")
        self.product_id = product_id


class ProductService:

    def create(self, data, user):
        product = Product.objects.create(
            owner=user,
            **{field: data[field] for field in MUTABLE_FIELDS}
        )
        logger.info(f"User {user.id} created product {product.id}")
        return product

    def find_all(self, filters=None):
        """Products matching every supplied filter; unset filters are ignored"""
        filters = filters or {}
        query = Q()

        category = filters.get('category')
        if category:
            query &= Q(category=category)

        if filters.get('minPrice') is not None:
            query &= Q(price__gte=filters['minPrice'])
        if filters.get('maxPrice') is not None:
            query &= Q(price__lte=filters['maxPrice'])

        if filters.get('minRating') is not None:
            query &= Q(rating__gte=filters['minRating'])

        search = (filters.get('search') or '').strip()
        if search:
            query &= Q(name__icontains=search) | Q(description__icontains=search)

        return Product.objects.filter(query)

    def find_one(self, product_id):
        try:
            return Product.objects.get(pk=product_id)
        except Product.DoesNotExist:
            raise ProductNotFound(product_id)

    def _find_owned(self, product_id, user):
        product = self.find_one(product_id)
        if product.owner_id != user.id:
            logger.warning(f"User {user.id} attempted to modify product {product_id} owned by {product.owner_id}")
            raise ProductNotFound(product_id)
        return product

    def update(self, product_id, data, user):
        product = self._find_owned(product_id, user)
        changed = [field for field in MUTABLE_FIELDS if field in data]
        for field in changed:
            setattr(product, field, data[field])
        product.save()
        logger.info(f"User {user.id} updated product {product_id} fields {changed}")
        return self.find_one(product_id)

    def remove(self, product_id, user):
        product = self._find_owned(product_id, user)
        product.delete()
        logger.info(f"User {user.id} deleted product {product_id}")
        return {'message': 'Product deleted successfully'}

    def categories(self):
        """Sorted distinct categories in the catalog"""
        return sorted(set(Product.objects.values_list('category', flat=True)))


product_service = ProductService()
