"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.clipboard import check_clipboard
from adapters.secure_random import check_secure_random
from core.config import ENV_PREFIX, AppSettings, get_user_env_file, write_user_env_vars
from core.domain.language import Language
from core.domain.models import (
    PASSWORD_LENGTH_MAX,
    PASSWORD_LENGTH_MIN,
    UUID_QUANTITY_MAX,
    UUID_QUANTITY_MIN,
)

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="passforge Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_rng, detail_rng = check_secure_random()
    table.add_row("Secure random", "OK" if ok_rng else "FAIL", detail_rng)

    ok_clip, detail_clip = check_clipboard()
    table.add_row("Clipboard", "OK" if ok_clip else "OPTIONAL", detail_clip)

    # Config
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Default length", "OK", str(settings.default_length))
    table.add_row("UUID quantity", "OK", str(settings.uuid_quantity))
    table.add_row("User config", "OK", str(get_user_env_file()))

    _console.print(table)

    if not ok_rng:
        _console.print("\n[red]Generation is disabled:[/red] no secure random source is available.")
        raise typer.Exit(code=1)
    if not ok_clip:
        _console.print(
            "\n[yellow]Note:[/yellow] `--copy` needs a clipboard backend (xclip or xsel on Linux)."
        )


@app.command(name="set-defaults")
def set_defaults() -> None:
    """Interactive setup of generation defaults (stored in the user config .env)."""

    settings = AppSettings()

    language = typer.prompt(
        "Language (en/zh)",
        default=settings.default_language.value,
        show_default=True,
    ).strip().lower()
    try:
        Language(language)
    except ValueError:
        raise typer.BadParameter("language must be 'en' or 'zh'") from None

    length = typer.prompt(
        "Default password length",
        default=settings.default_length,
        type=int,
    )
    length = min(max(length, PASSWORD_LENGTH_MIN), PASSWORD_LENGTH_MAX)
    quantity = typer.prompt(
        "Default UUID quantity",
        default=settings.uuid_quantity,
        type=int,
    )
    quantity = min(max(quantity, UUID_QUANTITY_MIN), UUID_QUANTITY_MAX)
    uppercase = typer.confirm("Uppercase UUIDs by default?", default=settings.uuid_uppercase)

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}DEFAULT_LANGUAGE": language,
            f"{ENV_PREFIX}DEFAULT_LENGTH": str(length),
            f"{ENV_PREFIX}UUID_QUANTITY": str(quantity),
            f"{ENV_PREFIX}UUID_UPPERCASE": "true" if uppercase else "false",
        }
    )

    _console.print(f"[green]Saved defaults to:[/green] {env_path}")
