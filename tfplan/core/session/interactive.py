"""
Sesión interactiva: qué recursos están expandidos y cómo los comandos cambian ese estado.

El estado vive en la instancia (nunca global) para que varias sesiones o tests
puedan convivir. El bucle de lectura/redibujado está en tfplan.render.interactive.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Set

from loguru import logger

from tfplan.core.plan.models import ResourceChangeModel


_INDEX_RE = re.compile(r"^\+?[0-9]+$")


class CommandKind(Enum):
    QUIT = "q"
    EXPAND_ALL = "a"
    COLLAPSE_ALL = "c"
    TOGGLE = "toggle"
    IGNORED = "ignored"


@dataclass(frozen=True)
class SessionCommand:
    kind: CommandKind
    index: Optional[int] = None


def parse_command(raw: str, resource_count: int) -> SessionCommand:
    """
    Interpreta una línea de entrada del operador.

    Se eliminan espacios al inicio y al final; la comparación distingue
    mayúsculas. Índices fuera de rango o texto no reconocido → IGNORED.
    """
    text = (raw or "").strip()
    if text == "q":
        return SessionCommand(CommandKind.QUIT)
    if text == "a":
        return SessionCommand(CommandKind.EXPAND_ALL)
    if text == "c":
        return SessionCommand(CommandKind.COLLAPSE_ALL)
    if _INDEX_RE.match(text):
        index = int(text)
        if index < resource_count:
            return SessionCommand(CommandKind.TOGGLE, index)
    return SessionCommand(CommandKind.IGNORED)


class InteractiveSession:
    """Máquina de estados expandido/colapsado sobre la lista de recursos del plan."""

    def __init__(self, resources: Sequence[ResourceChangeModel]):
        self.resources = list(resources)
        self.expanded: Set[int] = set()
        self.running = True

    def __len__(self) -> int:
        return len(self.resources)

    def is_expanded(self, index: int) -> bool:
        return index in self.expanded

    def expand_all(self) -> None:
        self.expanded = set(range(len(self.resources)))

    def collapse_all(self) -> None:
        self.expanded.clear()

    def toggle(self, index: int) -> None:
        if not 0 <= index < len(self.resources):
            return
        if index in self.expanded:
            self.expanded.remove(index)
        else:
            self.expanded.add(index)

    def quit(self) -> None:
        self.running = False

    def end_of_input(self) -> None:
        """Fin de la entrada: equivale a 'q'."""
        self.quit()

    def execute(self, command: SessionCommand) -> None:
        """Aplica un comando ya interpretado. Sin efecto si la sesión terminó."""
        if not self.running:
            return
        if command.kind is CommandKind.QUIT:
            self.quit()
        elif command.kind is CommandKind.EXPAND_ALL:
            self.expand_all()
        elif command.kind is CommandKind.COLLAPSE_ALL:
            self.collapse_all()
        elif command.kind is CommandKind.TOGGLE and command.index is not None:
            self.toggle(command.index)

    def apply(self, raw: str) -> SessionCommand:
        """Interpreta y aplica una línea de entrada; devuelve el comando reconocido."""
        command = parse_command(raw, len(self.resources))
        logger.debug("Comando interactivo {!r} → {}", raw, command.kind.name)
        self.execute(command)
        return command
