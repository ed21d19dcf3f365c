from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Product(models.Model):
    name = models.CharField(max_length=200)
    description = models.TextField()
    category = models.CharField(max_length=100, db_index=True)
    price = models.FloatField(validators=[MinValueValidator(0)])
    rating = models.FloatField(validators=[MinValueValidator(0), MaxValueValidator(5)])
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='products'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Product #{self.id} - {self.name} ({self.category})"

    class Meta:
        ordering = ['-created_at']
