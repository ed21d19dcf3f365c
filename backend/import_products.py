#!/usr/bin/env python
"""
Bulk-load products from a CSV file for an existing account

Usage: python import_products.py products.csv owner@example.com
"""
import os
import sys
import django
from pathlib import Path

# Add the project directory to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# Setup Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backend.settings')
django.setup()

from authentication.models import User
from products.importer import import_products, load_csv_data


def main(csv_path, owner_email):
    try:
        owner = User.objects.get(email__iexact=owner_email)
    except User.DoesNotExist:
        print(f"❌ No account with email {owner_email}")
        return 1

    print(f"🔄 Importing products from {csv_path} for {owner.email}...")
    created, rejected = import_products(load_csv_data(csv_path), owner)

    print(f"✅ Created {len(created)} products")
    for index, errors in rejected:
        print(f"❌ Row {index} rejected: {errors}")
    return 0 if not rejected else 2


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    sys.exit(main(sys.argv[1], sys.argv[2]))
