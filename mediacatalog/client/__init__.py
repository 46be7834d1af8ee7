"""
Python client for the media catalog API.

Stands in for the browser frontend: an explicit ``AuthSession`` holds the
token, ``CatalogClient`` is the request layer, and the view objects in
``views`` carry the list/search/edit behaviour.
"""
from mediacatalog.client.api import CatalogClient
from mediacatalog.client.exceptions import ApiError, ServiceUnavailable, Unauthorized
from mediacatalog.client.session import AuthSession

__all__ = ["ApiError", "AuthSession", "CatalogClient", "ServiceUnavailable", "Unauthorized"]
