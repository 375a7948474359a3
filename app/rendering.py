from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.formatting import clean_phone
from app.models import Person, Shift, ViewMode

env = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "templates"),
    autoescape=select_autoescape(),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["clean_phone"] = clean_phone


def _render(template: str, **context: object) -> str:
    return env.get_template(template).render(**context).strip()


def render_shift_row(shift: Shift, mode: ViewMode, past: bool = False) -> str:
    if mode == ViewMode.ADMIN:
        return _render("shift_row_admin.html", shift=shift, past=past)
    return _render("shift_row_public.html", shift=shift)


def render_empty_row() -> str:
    return _render("shift_row_empty.html")


def render_person_row(person: Person) -> str:
    return _render("person_row.html", person=person)


def render_person_option(person: Person) -> str:
    return _render("person_option.html", person=person)


def render_person_placeholder_option() -> str:
    return _render("person_option_placeholder.html")
