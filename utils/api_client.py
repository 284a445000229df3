"""
API Client Module - Typed wrapper over the portfolio HTTP API

Keeps the admin session cookie on a requests.Session and caches query
responses by key, the way the admin panel consumes them.

Admin front ends and scripts talk to a running server through this client;
the Flask app itself never imports it.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

STATUS_KEY = '/api/admin/status'
CONTENT_KEY = '/api/portfolio-content'
CONTACTS_KEY = '/api/contacts'


class ApiError(Exception):
    """Non-2xx response from the API"""

    def __init__(self, status_code, message, payload=None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload


class PortfolioApiClient:
    def __init__(self, base_url='http://localhost:5000', session=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        self._cache: Dict[str, Any] = {}

    def _request(self, method, path, json=None):
        response = self.session.request(method, f"{self.base_url}{path}", json=json, timeout=self.timeout)
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if not response.ok:
            message = payload.get('message') if isinstance(payload, dict) else None
            raise ApiError(response.status_code, message or response.reason or 'Request failed', payload)
        return payload

    def _query(self, key):
        if key not in self._cache:
            self._cache[key] = self._request('GET', key)
        return self._cache[key]

    def invalidate(self, key=None):
        """Drop one cached query, or all of them"""
        if key is None:
            self._cache.clear()
        else:
            self._cache.pop(key, None)

    # Auth
    def login(self, password) -> Dict[str, Any]:
        result = self._request('POST', '/api/admin/login', json={'password': password})
        self.invalidate()
        return result

    def logout(self) -> Dict[str, Any]:
        result = self._request('POST', '/api/admin/logout', json={})
        self.invalidate()
        return result

    def status(self) -> bool:
        return bool(self._query(STATUS_KEY).get('isAdmin'))

    # Content
    def get_portfolio_content(self) -> Dict[str, Any]:
        return self._query(CONTENT_KEY)

    def update_portfolio_content(self, document) -> Dict[str, Any]:
        result = self._request('POST', '/api/admin/portfolio-content', json=document)
        self.invalidate(CONTENT_KEY)
        logger.info("Portfolio content saved through API")
        return result

    # Contacts
    def get_contacts(self) -> List[Dict[str, Any]]:
        return self._query(CONTACTS_KEY)

    def submit_contact(self, name, email, message) -> Dict[str, Any]:
        result = self._request('POST', '/api/contact', json={'name': name, 'email': email, 'message': message})
        self.invalidate(CONTACTS_KEY)
        return result

    def cached(self, key) -> Optional[Any]:
        return self._cache.get(key)
