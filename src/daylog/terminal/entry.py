# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer

from daylog.model.elimination import Elimination
from daylog.model.entity_type import EntityType
from daylog.model.intake import Intake
from daylog.repository.configuration import CONFIGURATION_REPO
from daylog.repository.day import DAY_REPO
from daylog.service.entry import (
    EntryValidationError,
    build_elimination_fields,
    build_intake_fields,
    strip_ml,
)
from daylog.service.navigation import NAVIGATION
from daylog.template.elimination import ELIMINATION_GLYPHS, get_elimination_template
from daylog.template.intake import INTAKE_GLYPHS, get_intake_template
from daylog.terminal.parse import KIND_LABELS, id_at_position, parse_kind
from daylog.view.views.day import home_view


def _show_today() -> None:
    key = NAVIGATION.today_key
    home_view(key, DAY_REPO.get_day(key))


def today() -> None:
    """Show today's drinks and pees."""
    _show_today()


def drink(
    category: Annotated[
        Optional[str],
        typer.Argument(help="e.g. Water, Coffee, Tea"),
    ] = None,
    glyph: Annotated[
        Optional[str],
        typer.Option("--glyph", "-g", help=" ".join(INTAKE_GLYPHS)),
    ] = None,
    time: Annotated[
        Optional[str],
        typer.Option("--time", "-t", help="HH:MM, defaults to now"),
    ] = None,
    amount: Annotated[
        Optional[str],
        typer.Option("--amount", "-a", help="millilitres, e.g. 250"),
    ] = None,
) -> None:
    """Log a drink for today."""
    config = CONFIGURATION_REPO.get_config()
    template = get_intake_template()

    NAVIGATION.start_add_intake()
    try:
        fields = build_intake_fields(
            glyph,
            category,
            time or template["time"],
            amount,
            default_category=config["default_intake_category"],
        )
    except EntryValidationError as e:
        NAVIGATION.cancel_form()
        typer.echo(str(e))
        raise typer.Exit(1)
    NAVIGATION.save_intake(fields)

    _show_today()


def pee(
    size: Annotated[
        int,
        typer.Option("--size", "-s", help="1 (small), 2 (medium), 3 (large)"),
    ] = 2,
    glyph: Annotated[
        Optional[str],
        typer.Option("--glyph", "-g", help=" ".join(ELIMINATION_GLYPHS)),
    ] = None,
    time: Annotated[
        Optional[str],
        typer.Option("--time", "-t", help="HH:MM, defaults to now"),
    ] = None,
) -> None:
    """Log a pee for today."""
    template = get_elimination_template()

    NAVIGATION.start_add_elimination()
    try:
        fields = build_elimination_fields(glyph, time or template["time"], size)
    except EntryValidationError as e:
        NAVIGATION.cancel_form()
        typer.echo(str(e))
        raise typer.Exit(1)
    NAVIGATION.save_elimination(fields)

    _show_today()


def edit(
    kind: Annotated[str, typer.Argument(help="drink or pee")],
    position: Annotated[int, typer.Argument(help="# shown by the today command")],
    category: Annotated[Optional[str], typer.Option("--type", "-ty")] = None,
    glyph: Annotated[Optional[str], typer.Option("--glyph", "-g")] = None,
    time: Annotated[Optional[str], typer.Option("--time", "-t")] = None,
    amount: Annotated[Optional[str], typer.Option("--amount", "-a")] = None,
    size: Annotated[Optional[int], typer.Option("--size", "-s")] = None,
    remove_glyph: Annotated[bool, typer.Option("--remove-glyph", "-rg")] = False,
    remove_amount: Annotated[bool, typer.Option("--remove-amount", "-ra")] = False,
) -> None:
    """Edit one of today's drinks or pees."""
    entity_kind = parse_kind(kind)
    id = id_at_position(
        DAY_REPO.get_day(NAVIGATION.today_key), entity_kind, position
    )
    if id is None or not NAVIGATION.request_edit(entity_kind, id):
        typer.echo(f"No {KIND_LABELS[entity_kind]} #{position} today")
        raise typer.Exit(1)

    config = CONFIGURATION_REPO.get_config()
    try:
        if entity_kind == EntityType.INTAKE:
            # The form starts prefilled with the current values
            intake = cast(Intake, NAVIGATION.editing_record())
            new_glyph = intake["glyph"] if glyph is None else glyph
            new_amount = strip_ml(intake["quantity"]) if amount is None else amount
            intake_fields = build_intake_fields(
                "" if remove_glyph else new_glyph,
                intake["category"] if category is None else category,
                intake["time"] if time is None else time,
                "" if remove_amount else new_amount,
                default_category=config["default_intake_category"],
            )
            NAVIGATION.save_intake(intake_fields)
        else:
            elimination = cast(Elimination, NAVIGATION.editing_record())
            new_glyph = elimination["glyph"] if glyph is None else glyph
            elimination_fields = build_elimination_fields(
                "" if remove_glyph else new_glyph,
                elimination["time"] if time is None else time,
                elimination["magnitude"] if size is None else size,
            )
            NAVIGATION.save_elimination(elimination_fields)
    except EntryValidationError as e:
        NAVIGATION.cancel_form()
        typer.echo(str(e))
        raise typer.Exit(1)

    _show_today()


def delete(
    kind: Annotated[str, typer.Argument(help="drink or pee")],
    position: Annotated[int, typer.Argument(help="# shown by the today command")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Delete without asking"),
    ] = False,
) -> None:
    """Delete one of today's drinks or pees after confirmation."""
    entity_kind = parse_kind(kind)
    label = KIND_LABELS[entity_kind]
    id = id_at_position(
        DAY_REPO.get_day(NAVIGATION.today_key), entity_kind, position
    )
    if id is None:
        typer.echo(f"No {label} #{position} today")
        raise typer.Exit(1)

    NAVIGATION.request_delete(entity_kind, id)

    confirmed = yes
    if not confirmed:
        try:
            confirmed = typer.confirm(f"Delete {label}? This can't be undone.")
        except typer.Abort:
            # ctrl-c at the prompt behaves like escape
            NAVIGATION.escape()
            typer.echo()
            raise typer.Exit(1)

    if confirmed:
        NAVIGATION.confirm_delete()
    else:
        NAVIGATION.cancel_delete()

    _show_today()
