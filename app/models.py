"""
Domain models for the on-call roster (plantões) client.
"""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# Known system codes and how they are shown to users.
SYSTEMS: dict[str, str] = {
    "AAA": "AAA / FULFILLMENT / IAM / NADM",
    "ALTAIA": "ALTAIA / AM",
    "NETQ": "NETQ / SIGO",
    "NETWIN": "NETWIN",
}


def system_display_name(code: str) -> str:
    return SYSTEMS.get(code, code)


class ViewMode(StrEnum):
    ADMIN = "admin"  # delete controls, past shifts dimmed
    PUBLIC = "public"  # read-only, past shifts hidden


class Shift(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    sistema: str
    periodo: str
    nome: str
    contato: str
    data_fim: str | None = Field(default=None, alias="dataFim")  # YYYY-MM-DD

    @property
    def display_system(self) -> str:
        return system_display_name(self.sistema)

    def end_date(self) -> date | None:
        """
        Parse dataFim from its year/month/day parts as a local calendar date.
        Empty, missing or malformed values have no end date.
        """
        if not self.data_fim:
            return None
        try:
            year, month, day = self.data_fim.split("-")[:3]
            return date(int(year), int(month), int(day))
        except ValueError:
            return None

    def is_past(self, today: date) -> bool:
        end = self.end_date()
        return end is not None and end < today

    def matches_filter(self, system_filter: str) -> bool:
        if not system_filter:
            return True
        return system_filter in (self.sistema, self.display_system)


class ShiftCreate(BaseModel):
    """Body sent when creating a shift."""

    model_config = ConfigDict(populate_by_name=True)

    sistema: str
    periodo: str
    nome: str
    contato: str
    data_fim: str = Field(alias="dataFim")


class Person(BaseModel):
    id: int
    nome: str
    contato: str  # stored with the phone mask applied


class PersonPayload(BaseModel):
    nome: str
    contato: str


class LoginRequest(BaseModel):
    password: str


class LoginResponse(BaseModel):
    token: str


class ShiftForm(BaseModel):
    """State of the shift creation form."""

    sistema: str = ""
    data_inicio: str = ""
    data_fim: str = ""
    pessoa: str = ""  # "nome|contato"


class PersonForm(BaseModel):
    """State of the person create/edit form."""

    id: str = ""  # set while editing an existing person
    nome: str = ""
    contato: str = ""
    save_label: str = "+ Adicionar"
    cancel_visible: bool = False
