"""Command line front end: drives a roster page from a terminal."""

import argparse
import asyncio
import getpass
import logging

from app.dialogs import ConsoleDialogs
from app.models import ViewMode
from app.roster import create_page


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="On-call roster (plantões) client")
    parser.add_argument("--verbose", action="store_true", help="Log every request.")
    commands = parser.add_subparsers(dest="command", required=True)

    shifts = commands.add_parser("shifts", help="Print the shift table.")
    shifts.add_argument("--admin", action="store_true", help="Administrative view.")
    shifts.add_argument("--sistema", default="", help="Only shifts of this system.")

    commands.add_parser("people", help="Print the people list.")

    add = commands.add_parser("add-shift", help="Create a shift.")
    add.add_argument("--sistema", required=True)
    add.add_argument("--inicio", required=True, help="Start date (YYYY-MM-DD).")
    add.add_argument("--fim", required=True, help="End date (YYYY-MM-DD).")
    add.add_argument("--pessoa", required=True, help='Person as "nome|contato".')

    delete = commands.add_parser("delete-shift", help="Remove a shift.")
    delete.add_argument("id", type=int)

    person = commands.add_parser("save-person", help="Create or update a person.")
    person.add_argument("--id", default="", help="Update this person instead of creating.")
    person.add_argument("--nome", required=True)
    person.add_argument("--contato", required=True)

    delete_person = commands.add_parser("delete-person", help="Remove a person.")
    delete_person.add_argument("id", type=int)

    login = commands.add_parser("login", help="Store an admin session token.")
    login.add_argument("--password", help="Prompted for when omitted.")

    return parser.parse_args(argv)


async def _run(args: argparse.Namespace, dialogs: ConsoleDialogs) -> None:
    mode = ViewMode.PUBLIC
    if args.command != "shifts" or args.admin:
        mode = ViewMode.ADMIN

    async with create_page(mode, dialogs) as page:
        if args.command == "shifts":
            page.system_filter = args.sistema
            await page.load_shifts()
            print("\n".join(page.shift_rows))
        elif args.command == "people":
            await page.load_people()
            print("\n".join(page.people_rows))
        elif args.command == "add-shift":
            page.shift_form.sistema = args.sistema
            page.shift_form.data_inicio = args.inicio
            page.shift_form.data_fim = args.fim
            page.shift_form.pessoa = args.pessoa
            await page.add_shift()
        elif args.command == "delete-shift":
            await page.delete_shift(args.id)
        elif args.command == "save-person":
            if args.id:
                page.prepare_edit(args.id, args.nome, args.contato)
            else:
                page.person_form.nome = args.nome
                page.on_contact_input(args.contato)
            await page.save_person()
        elif args.command == "delete-person":
            await page.delete_person(args.id)
        elif args.command == "login":
            password = args.password or getpass.getpass("Senha: ")
            await page.login(password)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    asyncio.run(_run(args, ConsoleDialogs()))


if __name__ == "__main__":
    main()
