#!/usr/bin/env python
"""
Smoke-test a running server: register/login, product CRUD, incident list

Usage: python smoke_api.py [base_url]
"""
import sys
import uuid

from api_client import ApiClient, ApiError


def smoke(base_url=None):
    client = ApiClient(base_url)
    email = f"smoke-{uuid.uuid4().hex[:8]}@example.com"
    password = "smokepass123"

    print("Testing register...")
    try:
        client.register(email, password, password)
        print("✅ Register successful")
    except ApiError as e:
        print(f"❌ Register failed ({e.status_code}): {e.message}")
        return False

    print("\nTesting login...")
    client.logout()
    try:
        client.login(email, password)
        print("✅ Login successful")
    except ApiError as e:
        print(f"❌ Login failed ({e.status_code}): {e.message}")
        return False

    print("\nTesting product CRUD...")
    try:
        product = client.create_product({
            'name': 'Smoke Test Lamp',
            'description': 'Desk lamp created by the smoke test',
            'category': 'electronics',
            'price': 19.99,
            'rating': 4,
        })
        print(f"✅ Created product {product['id']}")

        found = client.list_products(search='smoke test', category='electronics')
        print(f"✅ Search found {len(found)} product(s)")

        client.update_product(product['id'], {'price': 17.5})
        print("✅ Updated product")

        client.delete_product(product['id'])
        print("✅ Deleted product")
    except ApiError as e:
        print(f"❌ Products failed ({e.status_code}): {e.message}")
        return False

    print("\nTesting incidents endpoint...")
    try:
        result = client.list_incidents(sort='newest')
        print(f"✅ Found {result['total']} incidents")
    except ApiError as e:
        print(f"❌ Incidents failed ({e.status_code}): {e.message}")
        return False

    return True


if __name__ == "__main__":
    print("🚀 Smoke testing API endpoints...")
    ok = smoke(sys.argv[1] if len(sys.argv) > 1 else None)
    print("\n✨ Smoke test complete!" if ok else "\n💥 Smoke test failed")
    sys.exit(0 if ok else 1)
