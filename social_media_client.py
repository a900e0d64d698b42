"""Social Media API client.

A thin wrapper around the REST API served by ``social_media_api``.  The
client uses the ``requests`` library internally and exposes one method
per endpoint:

* :meth:`register` and :meth:`login` – account registration and login.
* :meth:`create_message`, :meth:`update_message_text` and
  :meth:`delete_message` – message writes.
* :meth:`list_messages`, :meth:`get_message` and
  :meth:`list_account_messages` – message reads.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; ``data`` is ``None`` when the server answered with an empty
body (the API's way of saying "no such message").  On failure ``data``
is ``None`` (or an empty list) and ``error`` is a dictionary with keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SocialMediaClient:
    """Client for interacting with the social media API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/messages``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    def register(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a new account.

        Returns:
            A tuple ``(account, error)``; ``account`` includes the new
            ``account_id``.
        """
        return self._request("POST", "/register", json_body={"username": username, "password": password})

    def login(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Authenticate and return the stored account."""
        return self._request("POST", "/login", json_body={"username": username, "password": password})

    def list_account_messages(self, account_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every message posted by ``account_id``."""
        return self._list(f"/accounts/{account_id}/messages")

    # ------------------------------------------------------------------
    # Message operations
    # ------------------------------------------------------------------
    def create_message(
        self, posted_by: int, message_text: str, time_posted_epoch: int
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Post a new message on behalf of ``posted_by``."""
        payload = {
            "posted_by": posted_by,
            "message_text": message_text,
            "time_posted_epoch": time_posted_epoch,
        }
        return self._request("POST", "/messages", json_body=payload)

    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all messages."""
        return self._list("/messages")

    def get_message(self, message_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single message; ``(None, None)`` if it does not exist."""
        return self._request("GET", f"/messages/{message_id}")

    def update_message_text(
        self, message_id: Any, message_text: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the text of a message and return the updated message."""
        return self._request("PATCH", f"/messages/{message_id}", json_body={"message_text": message_text})

    def delete_message(self, message_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a message and return it; ``(None, None)`` if it did not exist."""
        return self._request("DELETE", f"/messages/{message_id}")
