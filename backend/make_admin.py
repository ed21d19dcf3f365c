#!/usr/bin/env python3
"""
Give an account the dashboard admin role

Usage: python make_admin.py user@example.com
"""
import os
import sys
import django

# Setup Django
sys.path.append(os.path.dirname(os.path.abspath(__file__)))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backend.settings')
django.setup()

from authentication.models import User


def make_admin(email):
    user = User.objects.filter(email__iexact=email).first()
    if user is None:
        print(f"❌ No user with email {email}")
        return False

    user.role = 'admin'
    user.save(update_fields=['role'])
    print(f"✅ Made user '{user.email}' an admin")
    print(f"✅ User ID: {user.id}")
    return True


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    sys.exit(0 if make_admin(sys.argv[1]) else 1)
