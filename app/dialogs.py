import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Dialogs(Protocol):
    """Blocking user interactions available to a roster page."""

    def alert(self, message: str) -> None: ...

    def confirm(self, message: str) -> bool: ...

    def navigate(self, url: str) -> None: ...


class ConsoleDialogs:
    """Dialogs on a terminal: messages are printed, confirmations read from stdin."""

    def __init__(self) -> None:
        self.location: str | None = None

    def alert(self, message: str) -> None:
        print(message)

    def confirm(self, message: str) -> bool:
        answer = input(f"{message} [s/N] ")
        return answer.strip().lower() in ("s", "sim", "y", "yes")

    def navigate(self, url: str) -> None:
        logger.info("Navigating to %s", url)
        self.location = url
