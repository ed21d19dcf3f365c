"""
HTTP client for the product and incident API.

Keeps the bearer token in memory after login/register and attaches it to
every request, the way the web frontend keeps it in local storage.
"""
import logging
import os

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'http://localhost:8000'
PRODUCT_FILTERS = ('category', 'minPrice', 'maxPrice', 'minRating', 'search')


def default_base_url():
    return os.getenv('API_URL') or os.getenv('REACT_APP_API_URL') or DEFAULT_API_URL


class ClientValidationError(ValueError):
    """Input rejected before any request was sent"""


class ApiError(Exception):
    def __init__(self, status_code, message, payload=None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.payload = payload or {}


class ApiClient:
    def __init__(self, base_url=None, session=None, timeout=10):
        self.base_url = (base_url or default_base_url()).rstrip('/') + '/api'
        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})
        self.timeout = timeout
        self.token = None
        self.user_email = None

    @property
    def is_authenticated(self):
        return self.token is not None

    def _request(self, method, path, default_error, **kwargs):
        headers = kwargs.pop('headers', {})
        if self.token:
            headers['Authorization'] = f"Bearer {self.token}"

        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            headers=headers,
            timeout=self.timeout,
            **kwargs
        )
        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not response.ok:
            message = payload.get('message') if isinstance(payload, dict) else None
            logger.warning(f"{method} {path} failed with {response.status_code}")
            raise ApiError(response.status_code, message or default_error, payload)
        return payload

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    def _store_session(self, payload, email):
        self.token = payload['access_token']
        self.user_email = email

    def login(self, email, password):
        payload = self._request(
            'POST', '/auth/login/', 'Invalid email or password',
            json={'email': email, 'password': password}
        )
        self._store_session(payload, email)
        return payload

    def register(self, email, password, confirm_password):
        if password != confirm_password:
            raise ClientValidationError('Passwords do not match')

        payload = self._request(
            'POST', '/auth/register/', 'Registration failed. Please try again.',
            json={'email': email, 'password': password, 'confirmPassword': confirm_password}
        )
        self._store_session(payload, email)
        return payload

    def logout(self):
        self.token = None
        self.user_email = None

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self, **filters):
        unknown = set(filters) - set(PRODUCT_FILTERS)
        if unknown:
            raise ClientValidationError(f"Unknown product filters: {sorted(unknown)}")
        params = {key: value for key, value in filters.items() if value not in (None, '')}
        return self._request('GET', '/products/', 'Failed to fetch products', params=params)

    def get_product(self, product_id):
        return self._request('GET', f'/products/{product_id}/', 'Failed to fetch product')

    def create_product(self, data):
        return self._request('POST', '/products/', 'Failed to create product', json=data)

    def update_product(self, product_id, data):
        return self._request('PATCH', f'/products/{product_id}/', 'Failed to update product', json=data)

    def delete_product(self, product_id):
        return self._request('DELETE', f'/products/{product_id}/', 'Failed to delete product')

    def categories(self):
        return self._request('GET', '/products/categories/', 'Failed to fetch categories')['categories']

    # ------------------------------------------------------------------
    # Incidents
    # ------------------------------------------------------------------

    def list_incidents(self, **filters):
        params = {key: value for key, value in filters.items() if value not in (None, '', 'All')}
        return self._request('GET', '/incidents/', 'Failed to fetch incidents', params=params)

    def report_incident(self, data):
        return self._request('POST', '/incidents/', 'Failed to report incident', json=data)

    def update_incident(self, incident_id, data):
        return self._request('PUT', f'/incidents/{incident_id}/', 'Failed to update incident', json=data)

    def add_comment(self, incident_id, text):
        return self._request(
            'POST', f'/incidents/{incident_id}/comments/', 'Failed to add comment',
            json={'text': text}
        )
