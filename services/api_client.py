# -*- coding: utf-8 -*-
"""
Property API Client
===================

HTTP access to the listing backend: container create/update/admin-create,
container lookup for edit mode, and the reference-data directories.

Every endpoint answers with a `{success, data}` envelope; `data` is
unwrapped here so callers only see the entity.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
import urllib3

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    Connection settings for the property API.

    Values left as None are read from Config (which reads .env):
        API_BASE_URL=http://localhost:3000/api
        API_TIMEOUT=30
        API_VERIFY_SSL=true
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None
    access_token: Optional[str] = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL
        if self.access_token is None:
            self.access_token = Config.API_ACCESS_TOKEN


class PropertyApiClient:
    """
    Client for the property listing backend.

    Authentication is owned by the embedding application; it hands the
    bearer token over through set_access_token().

    Usage:
        client = PropertyApiClient(ApiConfig(base_url="http://localhost:3000/api"))
        container = client.create_container(payload)
    """

    def __init__(self, config: ApiConfig):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.access_token: Optional[str] = config.access_token

        if not config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def set_access_token(self, token: Optional[str]):
        """Use the token of the signed-in user for subsequent requests."""
        self.access_token = token
        logger.debug("Access token updated externally")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Perform an HTTP request and unwrap the response envelope.

        Args:
            method: HTTP method (GET, POST, PUT)
            endpoint: API endpoint (e.g., "/containers")
            json_data: JSON payload
            params: Query parameters

        Returns:
            The envelope's `data` member (or the raw body when there is no envelope)

        Raises:
            ApiException: HTTP error status or `success: false` envelope
            NetworkException: connection failure or timeout
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                response_data = {}
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            error = ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {}
            )
            if error.server_message:
                error.message = error.server_message
            raise error
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)

        logger.info(f"[API RES] {response.status_code} {endpoint}")

        if not response.text:
            return None
        try:
            body = response.json()
        except ValueError:
            raise ApiException(
                message="Invalid JSON in response",
                status_code=response.status_code
            )

        return self._unwrap(body, response.status_code)

    @staticmethod
    def _unwrap(body: Any, status_code: int) -> Any:
        if not isinstance(body, dict) or "success" not in body:
            return body
        if not body.get("success"):
            error = ApiException(message="Request failed", status_code=status_code, response_data=body)
            if error.server_message:
                error.message = error.server_message
            raise error
        return body.get("data")

    # ==================== Containers ====================

    def create_container(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST /containers - create a container with its units."""
        logger.info(f"Creating container: {payload.get('title', 'N/A')}")
        result = self._request("POST", "/containers", json_data=payload)
        logger.info("Container created")
        return result

    def update_container(self, property_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """PUT /containers/{id} - replace an existing container's data."""
        logger.info(f"Updating container: {property_id}")
        result = self._request("PUT", f"/containers/{property_id}", json_data=payload)
        logger.info(f"Updated container: {property_id}")
        return result

    def admin_create_container(self, payload: Dict[str, Any], target_owner_id) -> Dict[str, Any]:
        """POST /containers/admin-create - create a container on behalf of an owner."""
        body = dict(payload)
        body["targetOwnerId"] = target_owner_id
        logger.info(f"Creating container for owner {target_owner_id}: {payload.get('title', 'N/A')}")
        result = self._request("POST", "/containers/admin-create", json_data=body)
        logger.info("Container created")
        return result

    def get_container(self, property_id: str) -> Dict[str, Any]:
        """GET /containers/{id} - container with units, services, rules and location."""
        return self._request("GET", f"/containers/{property_id}")

    # ==================== Reference data ====================

    def list_amenities(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/amenities") or []

    def list_common_areas(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/common-areas") or []

    def list_cities(self) -> List[Dict[str, Any]]:
        """GET /locations/cities - every city (no department filter)."""
        return self._request("GET", "/locations/cities") or []


# ==================== Singleton Instance ====================

_api_client_instance: Optional[PropertyApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> PropertyApiClient:
    """
    Shared PropertyApiClient instance.

    Args:
        config: API configuration (used on first call only)
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = PropertyApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Drop the shared client (for tests)."""
    global _api_client_instance
    _api_client_instance = None
