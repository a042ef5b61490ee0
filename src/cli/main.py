"""CLI de passforge (Typer + Rich).

Por qué Typer:
- Opciones tipadas con validación/clamp en el borde (longitud 4..64,
  cantidad 1..50), que es donde el llamador debe imponer los rangos.
- Subcomandos (`doctor`) sin boilerplate.

La CLI solo presenta: toda la generación pasa por `GeneratorSession`.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.clipboard import copy_text
from adapters.json_exporter import render_history_json, render_json
from cli import doctor
from cli.ui_components import (
    build_analysis_panel,
    build_history_table,
    build_password_panel,
    build_uuid_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import ClipboardUnavailableError, SecureRandomUnavailableError
from core.domain.language import Language
from core.domain.messages import message
from core.domain.models import (
    PASSWORD_LENGTH_MAX,
    PASSWORD_LENGTH_MIN,
    UUID_QUANTITY_MAX,
    UUID_QUANTITY_MIN,
    GeneratorMode,
    PasswordOptions,
    PasswordResult,
    UuidBatch,
    UuidOptions,
)
from core.services.generator_session import GeneratorSession

app = typer.Typer(no_args_is_help=True, help="Offline password and UUID v4 generator.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level_name: str, *, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def _clamp(value: int, lower: int, upper: int) -> int:
    return min(max(value, lower), upper)


def _fail_closed(exc: SecureRandomUnavailableError) -> typer.Exit:
    _err_console.print(f"[red]Error:[/red] {exc}")
    return typer.Exit(code=1)


def _copy(text: str, language: Language | None) -> None:
    try:
        copy_text(text)
    except ClipboardUnavailableError as exc:
        _err_console.print(f"[yellow]Warning:[/yellow] {exc}")
        return
    _err_console.print(f"[green]{message('copied', language)}[/green]")


def _render_password(result: PasswordResult, language: Language | None) -> None:
    _console.print(build_password_panel(result, language))
    if result.analysis is not None:
        _console.print(build_analysis_panel(result.analysis, language))


def _render_uuids(batch: UuidBatch, language: Language | None) -> None:
    _console.print(build_uuid_table(batch, language))


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr."),
) -> None:
    """Offline password and UUID v4 generator."""

    settings = AppSettings()
    configure_logging(settings.log_level, verbose=verbose)


@app.command()
def password(
    length: Optional[int] = typer.Option(
        None,
        "--length",
        "-l",
        min=PASSWORD_LENGTH_MIN,
        max=PASSWORD_LENGTH_MAX,
        clamp=True,
        help="Password length (4-64). Defaults to the configured length.",
    ),
    upper: Optional[bool] = typer.Option(None, "--upper/--no-upper", help="Include uppercase letters (A-Z)."),
    lower: Optional[bool] = typer.Option(None, "--lower/--no-lower", help="Include lowercase letters (a-z)."),
    numbers: Optional[bool] = typer.Option(None, "--numbers/--no-numbers", help="Include digits (0-9)."),
    symbols: Optional[bool] = typer.Option(None, "--symbols/--no-symbols", help="Include symbols (!@#$...)."),
    lang: Optional[Language] = typer.Option(None, "--lang", case_sensitive=False, help="Output language."),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the password to the clipboard."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Generate one password and show its strength and local analysis.

    Flags that are not given fall back to the configured defaults.
    """

    session = GeneratorSession(settings=AppSettings(), language=lang)
    overrides = {
        "length": length,
        "include_uppercase": upper,
        "include_lowercase": lower,
        "include_numbers": numbers,
        "include_symbols": symbols,
    }
    options = session.default_password_options().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    try:
        result = session.generate_password(options)
    except SecureRandomUnavailableError as exc:
        raise _fail_closed(exc) from exc

    if as_json:
        typer.echo(render_json(result))
    else:
        _render_password(result, session.language)

    if not result.password:
        _err_console.print("[yellow]No character class enabled: nothing generated.[/yellow]")
        return
    if copy:
        _copy(result.password, session.language)


@app.command()
def uuid(
    quantity: Optional[int] = typer.Option(
        None,
        "--quantity",
        "-n",
        min=UUID_QUANTITY_MIN,
        max=UUID_QUANTITY_MAX,
        clamp=True,
        help="Number of UUIDs (1-50). Defaults to the configured quantity.",
    ),
    uppercase: Optional[bool] = typer.Option(
        None,
        "--uppercase/--lowercase",
        "-U/-L",
        help="Uppercase or lowercase the hex digits. Defaults to the configured case.",
    ),
    lang: Optional[Language] = typer.Option(None, "--lang", case_sensitive=False, help="Output language."),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy all UUIDs (one per line) to the clipboard."),
    as_json: bool = typer.Option(False, "--json", help="Print the batch as JSON."),
) -> None:
    """Generate a batch of version-4 UUIDs."""

    session = GeneratorSession(settings=AppSettings(), language=lang)
    overrides = {"quantity": quantity, "uppercase": uppercase}
    options = session.default_uuid_options().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    try:
        batch = session.generate_uuids(options)
    except SecureRandomUnavailableError as exc:
        raise _fail_closed(exc) from exc

    if as_json:
        typer.echo(render_json(batch))
    else:
        _render_uuids(batch, session.language)

    if copy:
        _copy(batch.joined(), session.language)


_SHELL_HELP = "g=generate  m=mode  o=options  l=language  h=history  c=copy  q=quit"


def _edit_password_options(options: PasswordOptions) -> PasswordOptions:
    length = typer.prompt("Length (4-64)", default=options.length, type=int)
    return options.model_copy(
        update={
            "length": _clamp(length, PASSWORD_LENGTH_MIN, PASSWORD_LENGTH_MAX),
            "include_uppercase": typer.confirm("Uppercase (A-Z)?", default=options.include_uppercase),
            "include_lowercase": typer.confirm("Lowercase (a-z)?", default=options.include_lowercase),
            "include_numbers": typer.confirm("Numbers (0-9)?", default=options.include_numbers),
            "include_symbols": typer.confirm("Symbols (!@#$)?", default=options.include_symbols),
        }
    )


def _edit_uuid_options(options: UuidOptions) -> UuidOptions:
    quantity = typer.prompt("Quantity (1-50)", default=options.quantity, type=int)
    return options.model_copy(
        update={
            "quantity": _clamp(quantity, UUID_QUANTITY_MIN, UUID_QUANTITY_MAX),
            "uppercase": typer.confirm("Uppercase?", default=options.uppercase),
        }
    )


@app.command()
def shell(
    lang: Optional[Language] = typer.Option(None, "--lang", case_sensitive=False, help="Initial language."),
    as_json_history: bool = typer.Option(
        False,
        "--json-history",
        help="Print the session history as JSON on exit.",
    ),
) -> None:
    """Interactive session with regenerate, option editing and recent history."""

    settings = AppSettings()
    session = GeneratorSession(settings=settings, language=lang)
    mode = GeneratorMode.PASSWORD
    password_options = session.default_password_options()
    uuid_options = session.default_uuid_options()
    last_output = ""

    if settings.show_banner:
        print_banner(_console, session.language)

    def _generate() -> str:
        if mode is GeneratorMode.UUID:
            batch = session.generate_uuids(uuid_options)
            _render_uuids(batch, session.language)
            return batch.joined()
        result = session.generate_password(password_options)
        _render_password(result, session.language)
        return result.password

    try:
        last_output = _generate()
        while True:
            choice = typer.prompt(_SHELL_HELP, default="g").strip().lower()[:1]
            if choice == "q":
                break
            if choice == "g":
                last_output = _generate()
            elif choice == "m":
                mode = GeneratorMode.UUID if mode is GeneratorMode.PASSWORD else GeneratorMode.PASSWORD
                _console.print(f"[cyan]Mode:[/cyan] {mode.value}")
                last_output = _generate()
            elif choice == "o":
                if mode is GeneratorMode.UUID:
                    uuid_options = _edit_uuid_options(uuid_options)
                else:
                    password_options = _edit_password_options(password_options)
                last_output = _generate()
            elif choice == "l":
                session.language = session.language.toggle()
                _console.print(f"[cyan]Language:[/cyan] {session.language.label()}")
                last_output = _generate()
            elif choice == "h":
                _console.print(build_history_table(session.history, session.language))
            elif choice == "c":
                if last_output:
                    _copy(last_output, session.language)
                else:
                    _err_console.print("[yellow]Nothing to copy.[/yellow]")
            else:
                _console.print(f"[dim]{_SHELL_HELP}[/dim]")
    except SecureRandomUnavailableError as exc:
        raise _fail_closed(exc) from exc

    if as_json_history:
        typer.echo(render_history_json(session.history))


def run() -> None:
    app()
