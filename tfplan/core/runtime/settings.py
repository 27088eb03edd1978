"""
Configuración de tfplan.

Orden de precedencia (de menor a mayor):
    valores por defecto → archivo YAML → variables de entorno → flags de la CLI

El archivo YAML se resuelve así: ruta explícita (--config) → TFPLAN_CONFIG →
~/.config/tfplan/config.yaml (solo si existe). Las flags las aplica la CLI
con Settings.merged().
"""

import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tfplan.core.errors import ConfigError


DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tfplan" / "config.yaml"

ColorMode = Literal["auto", "always", "never"]

# Variable de entorno → campo de Settings
ENV_VARS: Dict[str, str] = {
    "TFPLAN_COLOR": "color",
    "TFPLAN_COLLAPSED": "collapsed",
    "TFPLAN_HTML_TITLE": "html_title",
    "TFPLAN_LOG_LEVEL": "log_level",
    "TFPLAN_LOG_FILE": "log_file",
}

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Ajustes de presentación y logging."""
    color: ColorMode = Field("auto", description="auto | always | never")
    collapsed: bool = Field(False, description="Vista colapsada por defecto")
    html_title: str = Field("Terraform Plan", description="Título del documento HTML")
    log_level: str = Field("WARNING", description="Nivel de log en stderr")
    log_file: Optional[Path] = Field(None, description="Archivo de log opcional")

    @field_validator("color", mode="before")
    @classmethod
    def _normalize_color(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"nivel de log debe ser uno de: {sorted(_LOG_LEVELS)}")
        return level

    def merged(self, **overrides: Any) -> "Settings":
        """Devuelve una copia con los overrides no nulos aplicados (flags de la CLI)."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if not values:
            return self
        return _build(self.model_dump() | values)


def _build(values: Mapping[str, Any]) -> Settings:
    try:
        return Settings.model_validate(dict(values))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Configuración inválida: {problems}") from e


def resolve_config_path(explicit: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Ruta del archivo de configuración a usar, o None si no hay ninguno."""
    env = os.environ if environ is None else environ
    if explicit is not None:
        return Path(explicit).expanduser()
    from_env = env.get("TFPLAN_CONFIG", "").strip()
    if from_env:
        return Path(from_env).expanduser()
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def load_config_file(path: Path) -> Dict[str, Any]:
    """
    Lee un archivo YAML de configuración.

    Raises:
        ConfigError: si el archivo no existe, no se puede leer o no es un mapeo YAML
    """
    if not path.exists():
        raise ConfigError(f"No existe el archivo de configuración: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML inválido en {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"No se pudo leer {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: se esperaba un mapeo clave: valor")
    unknown = set(data) - set(Settings.model_fields)
    if unknown:
        raise ConfigError(f"{path}: claves desconocidas: {', '.join(sorted(unknown))}")
    return data


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Valores de Settings tomados de variables de entorno (TFPLAN_*, NO_COLOR)."""
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}
    for var, field_name in ENV_VARS.items():
        raw = env.get(var, "").strip()
        if raw:
            values[field_name] = raw
    # Convención NO_COLOR (https://no-color.org) si no hay TFPLAN_COLOR explícito
    if "color" not in values and env.get("NO_COLOR"):
        values["color"] = "never"
    return values


def load_settings(config_path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Construye Settings combinando archivo YAML y entorno.

    Raises:
        ConfigError: si el archivo o algún valor es inválido
    """
    values: Dict[str, Any] = {}
    path = resolve_config_path(config_path, environ)
    if path is not None:
        values.update(load_config_file(path))
    values.update(env_overrides(environ))
    return _build(values)
