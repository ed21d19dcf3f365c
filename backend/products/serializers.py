from rest_framework import serializers
from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(source='owner_id', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'category', 'price', 'rating',
            'user_id', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'user_id', 'created_at', 'updated_at']
        extra_kwargs = {
            'price': {'min_value': 0},
            'rating': {'min_value': 0, 'max_value': 5},
        }


class ProductFilterSerializer(serializers.Serializer):
    """Query-string filters for the product list"""
    category = serializers.CharField(required=False, allow_blank=True)
    minPrice = serializers.FloatField(required=False, allow_null=True)
    maxPrice = serializers.FloatField(required=False, allow_null=True)
    minRating = serializers.FloatField(required=False, allow_null=True)
    search = serializers.CharField(required=False, allow_blank=True)

    def to_internal_value(self, data):
        # Empty query values like ?minPrice= mean "not supplied"
        cleaned = {key: value for key, value in data.items() if value not in ('', None)}
        return super().to_internal_value(cleaned)

