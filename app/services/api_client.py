"""Base API client with uniform error handling."""

import logging
import requests
from requests.exceptions import RequestException, Timeout, ConnectionError

log = logging.getLogger(__name__)

class APIError(Exception):
    """Raised for any failed call to the remote API.

    ``payload`` holds the decoded JSON error body when the server sent one.
    """
    def __init__(self, message, status_code=None, payload=None):
        self.message = message
        self.status_code = status_code
        self.payload = payload
        super().__init__(self.message)

    @property
    def server_message(self):
        """The ``message`` field of the error body, if any."""
        if isinstance(self.payload, dict):
            return self.payload.get("message") or None
        return None

class APIClient:
    """Base API client.

    Calls are made once; failures are raised as ``APIError`` and not retried.
    """

    def __init__(self, base_url, timeout=10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def request(self, method, endpoint, headers=None, params=None, json=None):
        """Make an HTTP request and return the decoded JSON body."""
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json,
                timeout=self.timeout
            )

            # Check for HTTP errors
            response.raise_for_status()

            return response.json() if response.content else None

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code
            log.warning(f"{method} {endpoint} failed with HTTP {status_code}")
            raise APIError(f"HTTP error: {e}", status_code=status_code, payload=_decode_error(e.response))
        except (ConnectionError, Timeout) as e:
            log.warning(f"{method} {endpoint} connection error: {e}")
            raise APIError(f"Connection error: {e}")
        except (RequestException, ValueError) as e:
            raise APIError(f"Unexpected error: {e}")

    def get(self, endpoint, **kwargs):
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint, **kwargs):
        return self.request("POST", endpoint, **kwargs)

def _decode_error(response):
    try:
        return response.json()
    except ValueError:
        return None
