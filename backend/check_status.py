#!/usr/bin/env python3
"""
Print account, product and incident dashboard status
"""
import os
import sys
import django

# Setup Django
sys.path.append(os.path.dirname(os.path.abspath(__file__)))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backend.settings')
django.setup()

from collections import Counter

from authentication.models import User
from incidents.store import get_incident_store
from products.models import Product
from products.services import product_service


def check_status():
    print("=== Database Status ===")
    print(f"Total Users: {User.objects.count()}")
    print(f"Total Products: {Product.objects.count()}")
    print(f"Categories: {', '.join(product_service.categories()) or '-'}")

    print("\n=== User Roles ===")
    for user in User.objects.all():
        print(f"👤 {user.email} - Role: {user.role} - Products: {user.products.count()}")

    print("\n=== Incident Dashboard (seed data) ===")
    incidents = get_incident_store().list()
    for status, count in sorted(Counter(inc.status for inc in incidents).items()):
        print(f"🎫 {status}: {count}")
    for incident in incidents[:5]:
        print(f"   {incident.id} [{incident.severity}] {incident.title[:60]}")


if __name__ == "__main__":
    check_status()
