"""
Errores de tfplan.

El core solo define y lanza excepciones; la CLI se encarga del formato de salida.
"""


class TfplanError(Exception):
    """Error base de tfplan."""
    pass


class PlanLoadError(TfplanError):
    """No se pudo leer el plan (archivo inexistente, error de E/S)."""
    pass


class PlanDecodeError(PlanLoadError):
    """El plan no es JSON válido o no cumple el esquema esperado."""

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.details = list(details or [])


class ConfigError(TfplanError):
    """Error de configuración (archivo ilegible, YAML inválido, valor no permitido)."""
    pass
