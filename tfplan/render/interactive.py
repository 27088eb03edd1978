"""
Vista interactiva en terminal.

Bucle síncrono: redibujar pantalla completa → leer una línea → aplicar comando.
El estado (qué está expandido) lo lleva InteractiveSession; aquí solo se dibuja y se lee.
"""

from typing import IO, Callable, Optional

from rich.console import Console
from rich.text import Text

from tfplan.core.session import InteractiveSession
from tfplan.render.text import render_resource


TITLE = "Interactive Plan (Enter number to toggle, 'a' for all, 'c' to collapse all, 'q' to quit):"
PROMPT = "\nCommand: "

LineReader = Callable[[], str]


def stream_reader(console: Console, stream: IO[str]) -> LineReader:
    """Lector de comandos desde un stream (ej: /dev/tty); línea vacía sin salto = fin de entrada."""
    def read() -> str:
        line = console.input(PROMPT, stream=stream)
        if not line:
            raise EOFError
        return line
    return read


def render_screen(session: InteractiveSession) -> Text:
    """Contenido de una pantalla: título, recursos numerados y estado actual."""
    screen = Text(TITLE)
    screen.append("\n\n")
    for index, model in enumerate(session.resources):
        screen.append(f"[{index}]", style="bright_cyan")
        screen.append(" ")
        screen.append_text(render_resource(model, expanded=session.is_expanded(index)))
    return screen


def run_interactive(
    session: InteractiveSession,
    console: Console,
    read_line: Optional[LineReader] = None,
) -> InteractiveSession:
    """
    Ejecuta la sesión hasta 'q' o fin de la entrada.

    Args:
        session: Sesión con los recursos del plan
        console: Console de Rich donde se dibuja
        read_line: Lector de una línea (por defecto console.input con el prompt)

    Returns:
        La misma sesión, ya terminada
    """
    reader = read_line or (lambda: console.input(PROMPT))

    while session.running:
        console.clear()
        console.print(render_screen(session), end="", soft_wrap=True, highlight=False)

        try:
            raw = reader()
        except (EOFError, KeyboardInterrupt):
            session.end_of_input()
            break

        session.apply(raw)

    return session
