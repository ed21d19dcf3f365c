import logging

import pandas as pd

from .serializers import ProductSerializer
from .services import product_service

logger = logging.getLogger(__name__)

CSV_COLUMNS = ('product_name', 'description', 'category', 'price', 'rating')


def load_csv_data(csv_path):
    """Load product rows from a CSV file into API-shaped dicts"""
    df = pd.read_csv(csv_path)
    missing = [column for column in CSV_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"CSV is missing columns: {', '.join(missing)}")

    products = []
    for _, row in df.iterrows():
        products.append({
            'name': str(row['product_name']).strip(),
            'description': str(row['description']).strip(),
            'category': str(row['category']).strip(),
            'price': float(row['price']),
            'rating': float(row['rating']),
        })

    logger.info(f"Loaded {len(products)} products from {csv_path}")
    return products


def import_products(rows, owner):
    """Create the valid rows for `owner`; returns (created, rejected) lists"""
    created = []
    rejected = []
    for index, row in enumerate(rows):
        serializer = ProductSerializer(data=row)
        if not serializer.is_valid():
            logger.warning(f"Skipping row {index}: {serializer.errors}")
            rejected.append((index, serializer.errors))
            continue
        created.append(product_service.create(serializer.validated_data, owner))

    logger.info(f"Imported {len(created)} products for {owner.email}, rejected {len(rejected)}")
    return created, rejected
