"""
Carga del plan: texto JSON → TerraformPlan validado.

El core no decide de dónde viene el texto; la CLI pasa un Path o un stream (stdin).
Un plan que no decodifica por completo nunca llega a los renderers.
"""

import json
from pathlib import Path
from typing import IO, List

from loguru import logger
from pydantic import ValidationError

from tfplan.core.errors import PlanDecodeError, PlanLoadError
from tfplan.core.plan.models import TerraformPlan


def _format_validation_errors(exc: ValidationError, limit: int = 5) -> List[str]:
    """Convierte errores de Pydantic en líneas legibles (ruta: mensaje)."""
    lines: List[str] = []
    for err in exc.errors()[:limit]:
        location = ".".join(str(part) for part in err.get("loc", ()))
        lines.append(f"{location or '<raíz>'}: {err.get('msg', 'inválido')}")
    return lines


def _reject_constant(name: str):
    """NaN, Infinity y -Infinity no son JSON válido."""
    raise PlanDecodeError(f"JSON inválido: constante no permitida {name}")


def parse_plan(content: str) -> TerraformPlan:
    """
    Decodifica y valida el JSON de un plan.

    Raises:
        PlanDecodeError: si el JSON es inválido o no cumple el esquema
    """
    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise PlanDecodeError(f"JSON inválido (línea {e.lineno}, columna {e.colno}): {e.msg}") from e

    if not isinstance(data, dict):
        raise PlanDecodeError("El plan debe ser un objeto JSON")

    try:
        plan = TerraformPlan.model_validate(data)
    except ValidationError as e:
        details = _format_validation_errors(e)
        raise PlanDecodeError("El plan no cumple el esquema esperado", details) from e

    logger.debug("Plan cargado: {} recursos", len(plan.resource_changes))
    return plan


def load_plan_file(path: Path) -> TerraformPlan:
    """
    Lee y decodifica un plan desde archivo.

    Raises:
        PlanLoadError: si el archivo no existe o no se puede leer
        PlanDecodeError: si el contenido no es un plan válido
    """
    path = Path(path)
    if not path.exists():
        raise PlanLoadError(f"No existe el archivo: {path}")
    if path.is_dir():
        raise PlanLoadError(f"La ruta es un directorio: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PlanLoadError(f"No se pudo leer {path}: {e}") from e

    logger.debug("Leyendo plan desde {}", path)
    return parse_plan(content)


def load_plan_stream(stream: IO[str]) -> TerraformPlan:
    """Lee y decodifica un plan desde un stream de texto (ej: stdin)."""
    try:
        content = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PlanLoadError(f"No se pudo leer la entrada estándar: {e}") from e

    logger.debug("Leyendo plan desde stdin")
    return parse_plan(content)
