"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles entre `password`, `uuid` y `shell`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.domain.messages import message
from core.domain.models import (
    HistoryEntry,
    LocalAnalysis,
    PasswordResult,
    PasswordStrength,
    StrengthResult,
    UuidBatch,
)

_STRENGTH_STYLES: dict[PasswordStrength, str] = {
    PasswordStrength.WEAK: "red",
    PasswordStrength.FAIR: "dark_orange",
    PasswordStrength.GOOD: "yellow",
    PasswordStrength.STRONG: "green",
    PasswordStrength.LEGENDARY: "bold bright_green",
}


def print_banner(console: Console, language: Language | None = None) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text(message("title", language), style="bold cyan")
    subtitle = Text(message("subtitle", language), style="dim")
    footer = Text(message("zero_knowledge", language), style="dim italic")
    body = Align.center(Text.assemble(title, "\n", subtitle, "\n", footer), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_strength_meter(result: StrengthResult) -> Group:
    style = _STRENGTH_STYLES[result.strength]
    header = Text.assemble(
        ("Strength: ", "bold dim"),
        (result.strength.value, style),
        (f"  {result.score}%", "dim"),
    )
    bar = ProgressBar(total=100, completed=result.score, complete_style=style, width=40)
    return Group(header, bar)


def build_password_panel(result: PasswordResult, language: Language | None = None) -> Panel:
    """Panel principal con la contraseña y su medidor de fuerza."""

    title = Text(message("secure_output", language), style="bold cyan")
    if not result.password:
        body = Group(Text("-", style="dim"), build_strength_meter(result.strength))
    else:
        body = Group(Text(result.password, style="bold white"), build_strength_meter(result.strength))
    return Panel(body, title=title, border_style="cyan")


def build_analysis_panel(analysis: LocalAnalysis, language: Language | None = None) -> Panel:
    """Panel para presentar el `LocalAnalysis`."""

    title = Text(message("analysis", language), style="bold yellow")
    body = Text()
    body.append(f"{message('crack_time', language)}: ", style="bold")
    body.append(analysis.cracking_time + "\n")
    body.append(f"{message('entropy', language)}: ", style="bold")
    body.append(f"{analysis.entropy:.1f} {message('bits', language)}\n")
    if analysis.tips:
        body.append(f"\n{message('security_tips', language)}:\n", style="bold")
        for tip in analysis.tips:
            body.append(f"- {tip}\n")
    return Panel(body, title=title, border_style="yellow")


def build_uuid_table(batch: UuidBatch, language: Language | None = None) -> Table:
    table = Table(title=message("secure_output", language))
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("UUID v4", style="bold white", no_wrap=True)
    for index, value in enumerate(batch.values, start=1):
        table.add_row(str(index), Text(value))
    if batch.tips:
        table.caption = " · ".join(batch.tips)
    return table


def build_history_table(entries: list[HistoryEntry], language: Language | None = None) -> Table:
    """Historial más reciente primero; vacío muestra el mensaje "sin historial"."""

    table = Table(title=message("history", language))
    table.add_column("Time", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    if not entries:
        table.add_row("-", message("no_history", language))
        return table
    for entry in entries:
        table.add_row(entry.created_at.astimezone().strftime("%H:%M:%S"), Text(entry.value))
    return table
