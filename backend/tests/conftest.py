"""
Test configuration and fixtures
"""
import pytest
from faker import Faker
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.models import User
from incidents.store import reset_incident_store
from products.models import Product

fake = Faker()

TEST_PASSWORD = 'testpassword123'


@pytest.fixture(autouse=True)
def fresh_incident_store():
    """Every test starts from the seeded dashboard state"""
    reset_incident_store()
    yield
    reset_incident_store()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make_user(role='viewer', email=None):
        email = email or fake.unique.email()
        return User.objects.create_user(
            username=email,
            email=email,
            password=TEST_PASSWORD,
            role=role,
        )
    return _make_user


@pytest.fixture
def owner(make_user):
    return make_user()


@pytest.fixture
def other_user(make_user):
    return make_user()


@pytest.fixture
def admin_user(make_user):
    return make_user(role='admin')


def client_for(user):
    client = APIClient()
    token = RefreshToken.for_user(user).access_token
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.fixture
def owner_client(owner):
    return client_for(owner)


@pytest.fixture
def other_client(other_user):
    return client_for(other_user)


@pytest.fixture
def admin_client(admin_user):
    return client_for(admin_user)


@pytest.fixture
def viewer_client(owner):
    return client_for(owner)


@pytest.fixture
def catalog(owner, other_user):
    """A small mixed catalog spread across two owners"""
    rows = [
        ('Wireless Earbuds', 'Bluetooth earbuds with charging case', 'electronics', 49.99, 4.2, owner),
        ('Smart LED TV', 'Forty inch smart television', 'electronics', 299.0, 4.7, owner),
        ('Denim Jacket', 'Classic blue denim jacket', 'clothing', 59.5, 3.9, other_user),
        ('Running Shoes', 'Lightweight shoes for road running', 'clothing', 89.0, 4.5, other_user),
        ('Sci-Fi Novel', 'A space opera about wireless minds', 'books', 12.0, 4.9, owner),
        ('Free Sample Book', 'Promotional booklet', 'books', 0.0, 2.0, other_user),
    ]
    return [
        Product.objects.create(
            name=name, description=description, category=category,
            price=price, rating=rating, owner=user
        )
        for name, description, category, price, rating, user in rows
    ]
