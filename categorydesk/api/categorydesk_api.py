"""
CategoryDesk Client - API Communication Module

Handles all communication with the CategoryDesk server via REST API:
the /categories/ collection, /login and /register.

Author: CategoryDesk Project
"""

import logging
import requests
from typing import Optional, Dict, Any, List, Callable

from pydantic import ValidationError

from ..exceptions import (
    CategoryDeskAuthError,
    CategoryDeskServerError,
    CategoryDeskResponseError,
    server_message
)
from ..models import Category, LoginResponse

# Configure logging
logger = logging.getLogger(__name__)

CATEGORIES_ENDPOINT = "/categories/"


class CategoryDeskAPI:
    """
    API client for communicating with the CategoryDesk server.

    Responsibilities:
    - Authenticate (login) and register new users
    - List, create, update and delete categories
    - Attach the session bearer token when one is available
    - Map transport failures and non-success statuses to client exceptions
    """

    def __init__(self, server_url: str, server_port: int, verify_ssl: bool = True,
                 timeout: Optional[float] = None,
                 token_provider: Optional[Callable[[], Optional[str]]] = None):
        """
        Initialize API client.

        Args:
            server_url: Base URL of server (e.g., "http://localhost")
            server_port: Server port number (e.g., 8080)
            verify_ssl: Whether to verify SSL certificates
            timeout: Request timeout in seconds (None waits indefinitely)
            token_provider: Returns the current session token, if any
        """
        self.base_url = f"{server_url}:{server_port}"
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.token_provider = token_provider
        # Use session for connection pooling to avoid TCP handshake overhead on each request
        self.session = requests.Session()
        logger.debug(f"Initialized API client for {self.base_url} (SSL verification: {self.verify_ssl})")

    @classmethod
    def from_config(cls, config_manager, token_provider=None) -> "CategoryDeskAPI":
        """Build a client from the connection settings in config.json."""
        return cls(
            config_manager.get("server_url"),
            config_manager.get("server_port"),
            config_manager.get("verify_ssl", False),
            timeout=config_manager.get("request_timeout"),
            token_provider=token_provider
        )

    def reconfigure(self, server_url: str, server_port: int, verify_ssl: bool,
                    timeout: Optional[float] = None):
        """Point the client at new connection settings (e.g. after Settings is saved)."""
        self.base_url = f"{server_url}:{server_port}"
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        logger.info(f"API client now targets {self.base_url}")

    def close(self):
        """
        Close the session and release resources.

        Should be called when done using the API client.
        """
        if hasattr(self, 'session') and self.session:
            self.session.close()
            logger.debug("API client session closed")

    def __del__(self):
        """Cleanup on deletion."""
        self.close()

    # ==================== Authentication Endpoints ====================

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Authenticate with server and receive an access token.

        Args:
            email: User's email address
            password: User's password

        Returns:
            LoginResponse holding the access token and user summary

        Raises:
            CategoryDeskAuthError: If the server rejects the credentials (401)
            CategoryDeskServerError: If the request fails otherwise
            CategoryDeskResponseError: If the response lacks an access token
        """
        logger.info(f"Attempting login for user: {email}")
        payload = {
            "email": email,
            "password": password
        }
        data = self._make_request("POST", "/login", json=payload)
        response = self._parse(LoginResponse, data, "login")
        logger.info(f"Login successful for user: {email}")
        return response

    def register(self, registration: Dict[str, Any]) -> Any:
        """
        Register a new user.

        Args:
            registration: Full registration body (fullName, email,
                          dateOfBirth, address, password)

        Returns:
            Decoded response body (not interpreted; no token is issued)

        Raises:
            CategoryDeskServerError: If registration fails
        """
        logger.info(f"Registering user: {registration.get('email')}")
        return self._make_request("POST", "/register", json=registration)

    # ==================== Category Endpoints ====================

    def list_categories(self) -> List[Category]:
        """
        Fetch every category.

        Returns:
            Categories in server order

        Raises:
            CategoryDeskServerError: If the request fails
            CategoryDeskResponseError: If the body is not a list of categories
        """
        data = self._make_request("GET", CATEGORIES_ENDPOINT)
        if not isinstance(data, list):
            logger.error(f"Unexpected category list response: {data!r}")
            raise CategoryDeskResponseError("Unexpected category list response")
        return [self._parse(Category, item, "category list") for item in data]

    def create_category(self, name: str, description: str) -> Category:
        """
        Create a category.

        Args:
            name: Category name
            description: Category description

        Returns:
            The created category, including the server-assigned id

        Raises:
            CategoryDeskServerError: If creation fails
            CategoryDeskResponseError: If the response is not a category
        """
        payload = {
            "name": name,
            "description": description
        }
        data = self._make_request("POST", CATEGORIES_ENDPOINT, json=payload)
        return self._parse(Category, data, "create category")

    def update_category(self, category_id: int, name: str, description: str):
        """
        Update a category.

        The response body is ignored; a success status confirms the update.

        Raises:
            CategoryDeskServerError: If the update fails
        """
        payload = {
            "name": name,
            "description": description
        }
        self._make_request("PUT", f"{CATEGORIES_ENDPOINT}{category_id}", json=payload)

    def delete_category(self, category_id: int):
        """
        Delete a category.

        Raises:
            CategoryDeskServerError: If deletion fails
        """
        self._make_request("DELETE", f"{CATEGORIES_ENDPOINT}{category_id}")

    # ==================== Request Helpers ====================

    def _make_request(self, method: str, endpoint: str, **kwargs) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (e.g., "/categories/")
            **kwargs: Additional arguments for request

        Returns:
            Response data (parsed JSON, raw text, or None for an empty body)

        Raises:
            CategoryDeskAuthError: If the server answers 401
            CategoryDeskServerError: If the request fails or status is not 2xx
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"API request: {method} {endpoint}")

        headers = kwargs.pop("headers", {})
        token = self.token_provider() if self.token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"

        # Add verify_ssl and timeout if not specified
        if "verify" not in kwargs:
            kwargs["verify"] = self.verify_ssl
        if "timeout" not in kwargs:
            kwargs["timeout"] = self.timeout

        try:
            response = self.session.request(method, url, headers=headers, **kwargs)
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Cannot connect to server at {self.base_url}: {e}")
            raise CategoryDeskServerError(f"Cannot connect to server at {self.base_url}")
        except requests.exceptions.Timeout:
            logger.error("Request timed out")
            raise CategoryDeskServerError("Request timed out")
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error: {str(e)}")
            raise CategoryDeskServerError(f"Request error: {str(e)}")

        payload = self._decode_body(response)

        if response.status_code == 401:
            message = server_message(payload, "Invalid credentials")
            logger.warning(f"{method} {endpoint} rejected: {message}")
            raise CategoryDeskAuthError(message, status_code=401, payload=payload)

        if not 200 <= response.status_code < 300:
            message = server_message(payload, response.reason or "Request failed")
            logger.error(f"Request failed with status {response.status_code}: {message}")
            raise CategoryDeskServerError(
                f"Request failed with status {response.status_code}: {message}",
                status_code=response.status_code,
                payload=payload
            )

        return payload

    @staticmethod
    def _decode_body(response) -> Any:
        """Parsed JSON body, falling back to the raw text."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            # Not JSON - hand back the text as-is
            return response.text

    @staticmethod
    def _parse(model, data: Any, context: str):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed {context} response: {e}")
            raise CategoryDeskResponseError(f"Malformed {context} response")
