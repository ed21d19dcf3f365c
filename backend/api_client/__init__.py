from .client import ApiClient, ApiError, ClientValidationError, default_base_url

__all__ = ['ApiClient', 'ApiError', 'ClientValidationError', 'default_base_url']
