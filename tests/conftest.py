from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport

import fake_backend
from app.client import RosterClient
from app.models import ViewMode
from app.roster import RosterPage
from app.storage import TOKEN_KEY, InMemoryStorage
from fake_backend import ADMIN_PASSWORD, Database, create_app, get_db

TODAY = date(2024, 3, 10)


class RecordingDialogs:
    """Dialogs that remember what the page asked for instead of blocking."""

    def __init__(self, confirm_answer: bool = True) -> None:
        self.confirm_answer = confirm_answer
        self.alerts: list[str] = []
        self.confirms: list[str] = []
        self.locations: list[str] = []

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def confirm(self, message: str) -> bool:
        self.confirms.append(message)
        return self.confirm_answer

    def navigate(self, url: str) -> None:
        self.locations.append(url)


@pytest.fixture(autouse=True)
def backend_db() -> Database:
    """Fresh backend state for every test."""
    fake_backend._db = None
    return get_db()


@pytest.fixture
def storage() -> InMemoryStorage:
    storage = InMemoryStorage()
    storage.put(TOKEN_KEY, ADMIN_PASSWORD)
    return storage


@pytest.fixture
def dialogs() -> RecordingDialogs:
    return RecordingDialogs()


@pytest_asyncio.fixture
async def client(storage: InMemoryStorage):
    """
    Roster client talking to the in-memory backend over ASGI.
    """
    async with RosterClient(
        "http://test", storage=storage, transport=ASGITransport(app=create_app())
    ) as roster_client:
        yield roster_client


@pytest.fixture
def admin_page(client: RosterClient, dialogs: RecordingDialogs) -> RosterPage:
    return RosterPage(client, dialogs, mode=ViewMode.ADMIN, today=lambda: TODAY)


@pytest.fixture
def public_page(client: RosterClient, dialogs: RecordingDialogs) -> RosterPage:
    return RosterPage(client, dialogs, mode=ViewMode.PUBLIC, today=lambda: TODAY)
