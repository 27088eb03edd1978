"""
Session: estado de visibilidad para la revisión interactiva del plan.
"""

from tfplan.core.session.interactive import (
    CommandKind,
    InteractiveSession,
    SessionCommand,
    parse_command,
)

__all__ = ["CommandKind", "InteractiveSession", "SessionCommand", "parse_command"]
