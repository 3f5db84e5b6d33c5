"""
REST API client for the shop backend.

Every dashboard screen talks to the backend through this client:

    from topup_admin.services.api_client import get_api_client

    products = get_api_client().get('/product', params={'page': 1, 'limit': 25})

The client attaches the session's bearer token, refreshes it once when the
backend answers 401, and turns failed responses into ApiError.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests
from flask import current_app
from pydantic import ValidationError as PydanticValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..core.error_handlers import ApiError, AuthenticationExpiredError, NotFoundError
from ..core.signals import tokens_refreshed
from ..schemas import TokenPair
from . import token_session

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response received from server. Please check your connection."
EXTENSION_KEY = 'api_client'


def extract_error_message(response: requests.Response) -> str:
    """Pull a human readable message out of a failed backend response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get('message')
        if message:
            # Validation failures come back as a list of messages
            return '; '.join(map(str, message)) if isinstance(message, list) else str(message)
        error = body.get('error')
        if error:
            return error if isinstance(error, str) else json.dumps(error, ensure_ascii=False)
    elif isinstance(body, str) and body:
        return body

    if response.text and body is None:
        return response.text
    return f"Server error: {response.status_code}"


class ApiClient:
    """
    Thin wrapper over a requests.Session bound to the backend base URL.

    Handles:
    - Bearer authentication from the token session
    - A single token refresh + replay on HTTP 401
    - Retries for transient 429/5xx answers on idempotent methods
    - Uniform ApiError for failures
    """

    def __init__(self, base_url: str, timeout: float = 30, max_retries: int = 3):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "DELETE"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy, pool_connections=10, pool_maxsize=20)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    @classmethod
    def init_app(cls, app) -> "ApiClient":
        client = cls(
            base_url=app.config['API_BASE_URL'],
            timeout=app.config.get('API_TIMEOUT', 30),
            max_retries=app.config.get('API_MAX_RETRIES', 3),
        )
        app.extensions[EXTENSION_KEY] = client
        return client

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _headers(token: Optional[str]) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @staticmethod
    def _clean_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if not params:
            return None
        return {key: value for key, value in params.items() if value not in (None, '')}

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Any = None,
        data: Optional[Dict[str, Any]] = None,
        files: Any = None,
        authenticated: bool = True,
        _retry: bool = True,
    ) -> Any:
        """Send a request and return the decoded JSON body (or None)."""
        token = token_session.get_access_token() if authenticated else None

        try:
            response = self.session.request(
                method,
                self._url(path),
                headers=self._headers(token),
                params=self._clean_params(params),
                json=json_data,
                data=data,
                files=files,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise ApiError(NO_RESPONSE_MESSAGE) from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)

        if response.status_code == 401 and authenticated and _retry:
            self._refresh_tokens()
            return self.request(
                method, path, params=params, json_data=json_data, data=data, files=files,
                authenticated=authenticated, _retry=False,
            )

        if not response.ok:
            message = extract_error_message(response)
            logger.warning("%s %s -> %s: %s", method, path, response.status_code, message)
            if response.status_code == 404:
                raise NotFoundError(message, payload=self._decode(response))
            raise ApiError(message, backend_status=response.status_code, payload=self._decode(response))

        return self._decode(response)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        return self.request('GET', path, params=params, **kwargs)

    def post(self, path: str, json_data: Any = None, **kwargs) -> Any:
        return self.request('POST', path, json_data=json_data, **kwargs)

    def patch(self, path: str, json_data: Any = None, **kwargs) -> Any:
        return self.request('PATCH', path, json_data=json_data, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request('DELETE', path, **kwargs)

    def _refresh_tokens(self) -> None:
        """Swap the refresh token for a new pair, or end the session."""
        refresh_token = token_session.get_refresh_token()
        if not refresh_token:
            token_session.clear_tokens()
            raise AuthenticationExpiredError()

        try:
            body = self.request('POST', '/auth/refresh', json_data={'token': refresh_token}, authenticated=False)
            pair = TokenPair.model_validate(body)
        except (ApiError, PydanticValidationError) as exc:
            logger.warning("Token refresh failed: %s", exc)
            token_session.clear_tokens()
            raise AuthenticationExpiredError() from exc

        token_session.save_tokens(pair)
        tokens_refreshed.send(self, user_id=pair.id)


def get_api_client() -> ApiClient:
    """Return the client bound to the current application."""
    return current_app.extensions[EXTENSION_KEY]
