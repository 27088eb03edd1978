"""
Core: lógica pura de interpretación del plan.

ENFORCEMENT (arquitectura limpia):
- Este paquete NO debe importar tfplan.cli ni tfplan.render.
- Permitido: typing, pathlib, pydantic, pyyaml, loguru, tfplan.core.*.
- Los renderers y la CLI importan desde core; nunca al revés.
"""

from tfplan.core.errors import TfplanError, PlanLoadError, PlanDecodeError, ConfigError

__all__ = ["TfplanError", "PlanLoadError", "PlanDecodeError", "ConfigError"]
