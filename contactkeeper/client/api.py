"""HTTP client for the Contact Keeper API (httpx)."""

import logging
from typing import Any

import httpx

from contactkeeper.schemas.auth import UserProfile
from contactkeeper.schemas.contact import ContactRead

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 10.0


class ApiClientError(Exception):
    """Non-2xx response from the API, or the API could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(message)


class ContactKeeperClient:
    """
    Thin wrapper over the REST API.

    Pass base_url to talk to a running server, or an existing httpx.Client
    (e.g. FastAPI's TestClient) via http. The token returned by register or
    login is kept and sent as a Bearer header on later calls.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        http: httpx.Client | None = None,
        api_prefix: str = "/api",
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SEC,
    ) -> None:
        self._http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)
        self._owns_http = http is None
        self._prefix = api_prefix.rstrip("/")
        self.token = token

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ContactKeeperClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            response = self._http.request(
                method, f"{self._prefix}{path}", json=json, headers=headers
            )
        except httpx.HTTPError as e:
            raise ApiClientError(f"API unreachable: {e!s}") from e
        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        errors = body.get("errors") or []
        message = body.get("msg") or (errors[0].get("msg") if errors else None)
        logger.debug(
            "API request failed",
            extra={"method": method, "api_path": path, "status_code": response.status_code},
        )
        raise ApiClientError(
            message or f"API returned status {response.status_code}",
            status_code=response.status_code,
            errors=errors,
        )

    def register(self, name: str, email: str, password: str) -> str:
        data = self._request(
            "POST", "/user", json={"name": name, "email": email, "password": password}
        )
        self.token = data["token"]
        return self.token

    def login(self, email: str, password: str) -> str:
        data = self._request("POST", "/auth", json={"email": email, "password": password})
        self.token = data["token"]
        return self.token

    def logout(self) -> None:
        """Forget the token. Tokens are stateless; nothing is sent to the server."""
        self.token = None

    def me(self) -> UserProfile:
        return UserProfile.model_validate(self._request("GET", "/auth"))

    def list_contacts(self) -> list[ContactRead]:
        return [ContactRead.model_validate(c) for c in self._request("GET", "/contacts")]

    def add_contact(self, **fields: Any) -> ContactRead:
        return ContactRead.model_validate(self._request("POST", "/contacts", json=fields))

    def update_contact(self, contact_id: int, **fields: Any) -> ContactRead:
        return ContactRead.model_validate(
            self._request("PUT", f"/contacts/{contact_id}", json=fields)
        )

    def delete_contact(self, contact_id: int) -> None:
        self._request("DELETE", f"/contacts/{contact_id}")
