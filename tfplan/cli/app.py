"""
Aplicación CLI de tfplan.

Solo compone: configuración, carga del plan, core y renderers. La lógica vive en
tfplan.core; el formato de salida en tfplan.render.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import IO, Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.markup import escape

from tfplan import __version__
from tfplan.core.errors import ConfigError, PlanDecodeError, PlanLoadError
from tfplan.core.plan import build_models, load_plan_file, load_plan_stream, summarize
from tfplan.core.runtime import Settings, load_settings, setup_logger
from tfplan.core.session import InteractiveSession
from tfplan.render import render_html, render_plan, run_interactive, stream_reader


app = typer.Typer(
    name="tfplan",
    help="Muestra un plan de Terraform (terraform show -json) en formato legible",
    add_completion=False,
)

err_console = Console(stderr=True, highlight=False)


class ColorChoice(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def make_console(settings: Settings) -> Console:
    """Console de Rich para stdout según el modo de color configurado."""
    if settings.color == "never":
        return Console(color_system=None, highlight=False)
    if settings.color == "always":
        return Console(force_terminal=True, highlight=False)
    return Console(highlight=False)


def open_terminal() -> Optional[IO[str]]:
    """Terminal de control para leer comandos cuando stdin trae el plan; None si no hay."""
    try:
        return open("/dev/tty", "r", encoding="utf-8")
    except OSError:
        return None


def _fail(message: str, details=None, code: int = 1) -> None:
    err_console.print(f"[red]✘ {escape(message)}[/red]")
    for line in details or []:
        err_console.print(f"  [dim]• {escape(line)}[/dim]")
    raise typer.Exit(code=code)


def _version_callback(value: bool) -> None:
    if value:
        Console(highlight=False).print(f"tfplan {__version__}")
        raise typer.Exit()


@app.command()
def show(
    file: Optional[str] = typer.Argument(
        None, metavar="FILE", help="Archivo JSON del plan (usa - o nada para stdin)"
    ),
    collapsed: Optional[bool] = typer.Option(
        None, "--collapsed/--expanded", "-c/-e", help="Vista colapsada (solo cabeceras) o expandida"
    ),
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Modo interactivo: número para expandir/colapsar recursos"
    ),
    html: bool = typer.Option(False, "--html", help="Genera HTML con secciones expandibles"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Escribe el resultado en un archivo en lugar de stdout"
    ),
    color: Optional[ColorChoice] = typer.Option(None, "--color", help="Colores ANSI: auto, always o never"),
    config: Optional[Path] = typer.Option(None, "--config", help="Archivo YAML de configuración"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logs de depuración en stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Muestra la versión"
    ),
):
    """
    Formatea un plan de Terraform en vista de texto, interactiva o HTML

    Ejemplos:
        terraform show -json plan.out | tfplan
        tfplan plan.json --collapsed
        tfplan plan.json --interactive
        tfplan plan.json --html -o plan.html
    """
    # .env del directorio de trabajo antes de leer la configuración
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    try:
        settings = load_settings(config).merged(
            color=color.value if color else None,
            collapsed=collapsed,
        )
    except ConfigError as e:
        _fail(str(e))

    setup_logger(settings.log_level, settings.log_file, verbose)

    if interactive and not html and output is not None:
        _fail("--output no se puede usar con --interactive", code=2)

    try:
        if file is None or file == "-":
            plan = load_plan_stream(sys.stdin)
        else:
            plan = load_plan_file(Path(file))
    except PlanDecodeError as e:
        _fail(f"Plan inválido: {e}", e.details)
    except PlanLoadError as e:
        _fail(str(e))

    models = build_models(plan)
    summary = summarize(models)
    collapsed = settings.collapsed
    logger.debug("Recursos: {} | colapsado: {}", len(models), collapsed)

    if html:
        document = render_html(
            models,
            summary,
            collapsed=collapsed,
            title=settings.html_title,
            terraform_version=plan.terraform_version,
        )
        _emit(document, output)
    elif interactive:
        _run_interactive(models, make_console(settings), from_stdin=file is None or file == "-")
    else:
        text = render_plan(models, summary, collapsed=collapsed)
        if output is not None:
            _emit(text.plain, output)
        else:
            make_console(settings).print(text, end="", soft_wrap=True)


def _run_interactive(models, console: Console, from_stdin: bool) -> None:
    """Si el plan llegó por stdin, los comandos se leen de la terminal de control."""
    terminal = None
    read_line = None
    if from_stdin and not sys.stdin.isatty():
        terminal = open_terminal()
        if terminal is None:
            logger.warning("Sin terminal de control: el plan ocupa stdin y la sesión terminará tras la primera pantalla")
        else:
            read_line = stream_reader(console, terminal)
    try:
        run_interactive(InteractiveSession(models), console, read_line)
    finally:
        if terminal is not None:
            terminal.close()


def _emit(content: str, output: Optional[Path]) -> None:
    if output is None:
        sys.stdout.write(content)
        return
    try:
        output.write_text(content, encoding="utf-8")
    except OSError as e:
        _fail(f"No se pudo escribir {output}: {e}")
    err_console.print(f"[green]✔ Escrito {escape(str(output))}[/green]")


def main():
    app()
