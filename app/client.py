from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter

from app.config import Config
from app.errors import ApiError, AuthenticationError, TransportError
from app.models import (
    LoginRequest,
    LoginResponse,
    Person,
    PersonPayload,
    Shift,
    ShiftCreate,
)
from app.storage import TOKEN_KEY, InMemoryStorage, JsonFileStorage, get_storage

logger = logging.getLogger(__name__)

SHIFTS_PATH = "/api/plantoes"
PEOPLE_PATH = "/api/pessoas"
LOGIN_PATH = "/api/login"

_shift_list = TypeAdapter(list[Shift])
_person_list = TypeAdapter(list[Person])


class RosterClient:
    """
    Async client for the roster REST backend.

    Every call either returns the decoded payload or raises one of the
    errors in app.errors; it never touches page state.
    """

    def __init__(
        self,
        base_url: str,
        storage: InMemoryStorage | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.storage = storage if storage is not None else get_storage()
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self) -> RosterClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    @property
    def base_url(self) -> httpx.URL:
        return self._http.base_url

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def aclose(self) -> None:
        await self._http.aclose()

    def headers(self) -> dict[str, str]:
        """Headers for mutating requests. The token is re-read on every call."""
        return {
            "Content-Type": "application/json",
            "Authorization": self.storage.get(TOKEN_KEY) or "",
        }

    async def _request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        headers = self.headers() if authenticated else None
        logger.debug("%s %s", method, url)
        try:
            response = await self._http.request(method, url, json=json, headers=headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        if response.status_code == 401:
            raise AuthenticationError(response.text.strip())
        if not response.is_success:
            raise ApiError(response.status_code, response.text.strip())
        return response

    # --- shifts ---

    async def list_shifts(self) -> list[Shift]:
        response = await self._request("GET", SHIFTS_PATH, authenticated=False)
        try:
            return _shift_list.validate_json(response.content)
        except ValueError as exc:
            raise TransportError(f"Invalid shift list: {exc}") from exc

    async def create_shift(self, shift: ShiftCreate) -> None:
        await self._request("POST", SHIFTS_PATH, json=shift.model_dump(by_alias=True))

    async def delete_shift(self, shift_id: int) -> None:
        await self._request("DELETE", f"{SHIFTS_PATH}/{shift_id}")

    # --- people ---

    async def list_people(self) -> list[Person]:
        response = await self._request("GET", PEOPLE_PATH, authenticated=False)
        try:
            return _person_list.validate_json(response.content)
        except ValueError as exc:
            raise TransportError(f"Invalid people list: {exc}") from exc

    async def create_person(self, person: PersonPayload) -> None:
        await self._request("POST", PEOPLE_PATH, json=person.model_dump())

    async def update_person(self, person_id: int | str, person: PersonPayload) -> None:
        await self._request("PUT", f"{PEOPLE_PATH}/{person_id}", json=person.model_dump())

    async def delete_person(self, person_id: int | str) -> None:
        await self._request("DELETE", f"{PEOPLE_PATH}/{person_id}")

    # --- session ---

    async def login(self, password: str) -> str:
        """Exchange the admin password for a token and persist it."""
        response = await self._request(
            "POST",
            LOGIN_PATH,
            json=LoginRequest(password=password).model_dump(),
            authenticated=False,
        )
        try:
            token = LoginResponse.model_validate_json(response.content).token
        except ValueError as exc:
            raise TransportError(f"Invalid login response: {exc}") from exc
        self.storage.put(TOKEN_KEY, token)
        return token


def create_client(config: Config | None = None) -> RosterClient:
    config = config or Config()
    return RosterClient(config.API_URL, storage=JsonFileStorage(config.STORAGE_PATH))
