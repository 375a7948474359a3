import logging
from collections.abc import Callable
from datetime import date

from app.client import RosterClient, create_client
from app.config import Config
from app.dialogs import Dialogs
from app.errors import ApiError, AuthenticationError, RosterError, TransportError
from app.formatting import build_period, is_iso_date, mask_phone
from app.models import (
    PersonForm,
    PersonPayload,
    ShiftCreate,
    ShiftForm,
    ViewMode,
)
from app.rendering import (
    render_empty_row,
    render_person_option,
    render_person_placeholder_option,
    render_person_row,
    render_shift_row,
)

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Sessão expirada. Faça login novamente."
CONNECTION_ERROR_MESSAGE = "Erro de conexão."


class RosterPage:
    """
    A roster page: the shift table, the people list and the two forms.

    Nothing is cached between renders; every load re-fetches from the
    backend and replaces the rendered rows wholesale.
    """

    def __init__(
        self,
        client: RosterClient,
        dialogs: Dialogs,
        mode: ViewMode = ViewMode.PUBLIC,
        login_page: str = "login.html",
        admin_page: str = "admin.html",
        today: Callable[[], date] = date.today,
    ) -> None:
        self.client = client
        self.dialogs = dialogs
        self.mode = mode
        self.login_page = login_page
        self.admin_page = admin_page
        self._today = today

        self.system_filter = ""
        self.shift_form = ShiftForm()
        self.person_form = PersonForm()

        self.shift_rows: list[str] = []
        self.people_rows: list[str] = []
        self.person_options: list[str] = []

    async def __aenter__(self) -> "RosterPage":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def open(self) -> None:
        await self.load_shifts()
        if self.mode == ViewMode.ADMIN:
            await self.load_people()

    # --- shifts ---

    async def load_shifts(self) -> None:
        try:
            shifts = await self.client.list_shifts()
        except RosterError:
            logger.exception("Failed to load shifts")
            return

        today = self._today()
        rows = []
        for shift in shifts:
            if not shift.matches_filter(self.system_filter):
                continue
            past = shift.is_past(today)
            if past and self.mode == ViewMode.PUBLIC:
                continue
            rows.append(render_shift_row(shift, self.mode, past=past))

        if self.mode == ViewMode.PUBLIC and not rows:
            rows.append(render_empty_row())
        self.shift_rows = rows

    async def add_shift(self) -> None:
        form = self.shift_form
        if not (
            form.sistema
            and is_iso_date(form.data_inicio)
            and is_iso_date(form.data_fim)
            and form.pessoa
        ):
            self.dialogs.alert("Preencha todos os campos!")
            return

        # "nome|contato"; extra segments are ignored
        parts = form.pessoa.split("|")
        nome = parts[0]
        contato = parts[1] if len(parts) > 1 else ""
        shift = ShiftCreate(
            sistema=form.sistema,
            periodo=build_period(form.data_inicio, form.data_fim),
            nome=nome,
            contato=contato,
            data_fim=form.data_fim,
        )

        try:
            await self.client.create_shift(shift)
        except AuthenticationError:
            self.dialogs.alert(SESSION_EXPIRED_MESSAGE)
            self.dialogs.navigate(self.login_page)
            return
        except ApiError as exc:
            self.dialogs.alert(f"Erro: {exc.text}")
            return
        except TransportError:
            logger.warning("Shift creation failed", exc_info=True)
            self.dialogs.alert(CONNECTION_ERROR_MESSAGE)
            return

        form.data_inicio = ""
        form.data_fim = ""
        await self.load_shifts()
        self.dialogs.alert("Plantão adicionado!")

    async def delete_shift(self, shift_id: int) -> None:
        if not self.dialogs.confirm("Remover este item?"):
            return

        try:
            await self.client.delete_shift(shift_id)
        except AuthenticationError:
            self.dialogs.navigate(self.login_page)
            return
        except ApiError as exc:
            logger.warning("Deleting shift %s failed: %s", shift_id, exc)
            self.dialogs.alert(f"Erro: {exc.text}")
        except TransportError:
            logger.warning("Deleting shift %s failed", shift_id, exc_info=True)
            self.dialogs.alert(CONNECTION_ERROR_MESSAGE)

        await self.load_shifts()

    # --- people ---

    async def load_people(self) -> None:
        try:
            people = await self.client.list_people()
        except RosterError:
            logger.exception("Failed to load people")
            return

        self.people_rows = [render_person_row(person) for person in people]
        self.person_options = [render_person_placeholder_option()] + [
            render_person_option(person) for person in people
        ]

    async def save_person(self) -> None:
        form = self.person_form
        if not form.nome or not form.contato:
            self.dialogs.alert("Preencha nome e contato")
            return

        payload = PersonPayload(nome=form.nome, contato=form.contato)
        try:
            if form.id:
                await self.client.update_person(form.id, payload)
            else:
                await self.client.create_person(payload)
        except AuthenticationError:
            self.dialogs.navigate(self.login_page)
            return
        except ApiError as exc:
            logger.warning("Saving person failed: %s", exc)
            self.dialogs.alert(f"Erro: {exc.text}")
        except TransportError:
            logger.warning("Saving person failed", exc_info=True)
            self.dialogs.alert(CONNECTION_ERROR_MESSAGE)
            return

        self.cancel_edit()
        await self.load_people()

    async def delete_person(self, person_id: int) -> None:
        if not self.dialogs.confirm("Tem certeza?"):
            return

        try:
            await self.client.delete_person(person_id)
        except AuthenticationError:
            self.dialogs.navigate(self.login_page)
            return
        except ApiError as exc:
            logger.warning("Deleting person %s failed: %s", person_id, exc)
            self.dialogs.alert(f"Erro: {exc.text}")
        except TransportError:
            logger.warning("Deleting person %s failed", person_id, exc_info=True)
            self.dialogs.alert(CONNECTION_ERROR_MESSAGE)
            return

        await self.load_people()

    def prepare_edit(self, person_id: int, nome: str, contato: str) -> None:
        self.person_form = PersonForm(
            id=str(person_id),
            nome=nome,
            contato=mask_phone(contato),
            save_label="Salvar Alteração",
            cancel_visible=True,
        )

    def cancel_edit(self) -> None:
        self.person_form = PersonForm()

    def on_contact_input(self, value: str) -> None:
        self.person_form.contato = mask_phone(value)

    # --- session ---

    async def login(self, password: str) -> None:
        try:
            await self.client.login(password)
        except AuthenticationError as exc:
            self.dialogs.alert(f"Erro: {exc}")
            return
        except ApiError as exc:
            self.dialogs.alert(f"Erro: {exc.text}")
            return
        except TransportError:
            logger.warning("Login failed", exc_info=True)
            self.dialogs.alert(CONNECTION_ERROR_MESSAGE)
            return

        self.dialogs.navigate(self.admin_page)


def create_page(
    mode: ViewMode,
    dialogs: Dialogs,
    config: Config | None = None,
) -> RosterPage:
    config = config or Config()
    return RosterPage(
        create_client(config),
        dialogs,
        mode=mode,
        login_page=config.LOGIN_PAGE,
        admin_page=config.ADMIN_PAGE,
    )
