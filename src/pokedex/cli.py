import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml

from .errors import FormValidationError
from .logging_config import configure_logging
from .models import PokeymonType, decode_date
from .persistence import PokeymonStore, SaveResult
from .settings import Settings
from .ui import ListController, PokeymonForm

logger = logging.getLogger(__name__)


def _date_arg(text: str) -> datetime:
    try:
        return decode_date(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {text!r}: {e}") from e


def _type_arg(text: str) -> PokeymonType:
    try:
        return PokeymonType.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _add_field_options(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--name", required=required, help="Pokeymon name.")
    parser.add_argument("--type", dest="kind", type=_type_arg, required=required, help="Elemental type.")
    parser.add_argument("--attack", type=int, default=None, help="Attack stat (clamped to the configured range).")
    parser.add_argument("--defense", type=int, default=None, help="Defense stat (clamped to the configured range).")
    parser.add_argument("--date", dest="date_captured", type=_date_arg, default=None, help="Capture date, ISO-8601.")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="pokedex",
        description="Pokedex - keep track of the Pokeymon you have captured",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument(
        "--data-file",
        dest="data_file",
        type=Path,
        default=None,
        help="Use this collection file instead of the per-user data file.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List captured Pokeymon.")
    sub.add_parser("types", help="List the available types.")

    show = sub.add_parser("show", help="Show one Pokeymon.")
    show.add_argument("index", type=int)

    add = sub.add_parser("add", help="Record a new capture.")
    _add_field_options(add, required=True)

    edit = sub.add_parser("edit", help="Edit an existing capture.")
    edit.add_argument("index", type=int)
    _add_field_options(edit, required=False)

    delete = sub.add_parser("delete", help="Remove a capture.")
    delete.add_argument("index", type=int)

    return parser.parse_args(argv)


def _fill_form(form: PokeymonForm, args) -> None:
    if args.name is not None:
        form.name = args.name
    if args.kind is not None:
        form.select_type(args.kind)
    if args.attack is not None:
        form.set_attack(args.attack)
    if args.defense is not None:
        form.set_defense(args.defense)
    if args.date_captured is not None:
        form.date_captured = args.date_captured


def _report(result: SaveResult) -> int:
    if not result.ok:
        print(f"warning: changes were not saved: {result.error}", file=sys.stderr)
        return 1
    return 0


def _cmd_list(controller: ListController, args) -> int:
    if controller.data_loss:
        print(f"warning: collection file could not be read: {controller.load_error}", file=sys.stderr)
    print(controller.title)
    rows = controller.rows()
    if not rows:
        print("(no Pokeymon captured yet)")
    for i, row in enumerate(rows):
        print(f"{i:>3}. {row.text()}")
    return 0


def _cmd_types(controller: ListController, args) -> int:
    for i, label in enumerate(PokeymonForm.type_choices()):
        print(f"{i}. {label}")
    return 0


def _cmd_show(controller: ListController, args) -> int:
    for line in controller.select(args.index).lines():
        print(line)
    return 0


def _cmd_add(controller: ListController, args) -> int:
    form = controller.new_form()
    _fill_form(form, args)
    pokeymon = form.submit()
    status = _report(controller.add(pokeymon))
    if status == 0:
        print(f"Added {pokeymon.name} ({pokeymon.id})")
    return status


def _cmd_edit(controller: ListController, args) -> int:
    detail = controller.select(args.index)
    form = detail.edit_form()
    _fill_form(form, args)
    status = _report(detail.apply(form.submit()))
    if status == 0:
        print(f"Updated {detail.pokeymon.name}")
    return status


def _cmd_delete(controller: ListController, args) -> int:
    name = controller.pokeymon[args.index].name if 0 <= args.index < controller.count else None
    status = _report(controller.delete_at(args.index))
    if status == 0:
        print(f"Deleted {name}")
    return status


COMMANDS = {
    "list": _cmd_list,
    "types": _cmd_types,
    "show": _cmd_show,
    "add": _cmd_add,
    "edit": _cmd_edit,
    "delete": _cmd_delete,
}


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(default_level=logging.DEBUG if args.debug else logging.INFO)

    try:
        settings = Settings.load(user_path=args.settings_path)
    except (yaml.YAMLError, TypeError, ValueError) as e:
        print(f"error: invalid settings file {args.settings_path}: {e}", file=sys.stderr)
        return 1
    store = PokeymonStore(path=args.data_file)
    controller = ListController(store, settings)
    controller.reload()
    logger.debug("Loaded %d Pokeymon from %s (%s)", controller.count, store.path, controller.status.value)

    try:
        return COMMANDS[args.command](controller, args)
    except (FormValidationError, IndexError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
