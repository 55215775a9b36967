# File: tricheck/core/settings.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Defaults de PathConfig desde JSON repo-local + variables de entorno.
# Notes: Carga tolerante: un valor inválido se loguea y se ignora.
from __future__ import annotations

import dataclasses
import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, Mapping

from tricheck.core.models import (
    RATIO_FIELDS,
    CheckmarkProperties,
    PathConfig,
    RatioPair,
    coerce_box_type,
    coerce_mark_type,
)
from tricheck.utils.errors import TriCheckConfigError

log = logging.getLogger(__name__)

# Archivo esperado: tricheck_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "tricheck_settings.json"

# env var -> (campo de PathConfig, conversor)
ENV_OVERRIDES = {
    "TRICHECK_SIZE": ("size", float),
    "TRICHECK_BOX_LINE_WIDTH": ("box_line_width", float),
    "TRICHECK_CHECKMARK_LINE_WIDTH": ("checkmark_line_width", float),
    "TRICHECK_CORNER_RADIUS": ("corner_radius", float),
    "TRICHECK_BOX_TYPE": ("box_type", coerce_box_type),
    "TRICHECK_MARK_TYPE": ("mark_type", coerce_mark_type),
}

# clave JSON (path.*) -> (campo de PathConfig, conversor)
JSON_PATH_KEYS = {
    "path.size": ("size", float),
    "path.box_line_width": ("box_line_width", float),
    "path.checkmark_line_width": ("checkmark_line_width", float),
    "path.corner_radius": ("corner_radius", float),
    "path.box_type": ("box_type", coerce_box_type),
    "path.mark_type": ("mark_type", coerce_mark_type),
}


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca tricheck_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def save_project_settings(
    config: PathConfig,
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Path | None:
    """Guarda `config` en tricheck_settings.json (pisa el existente o lo crea en start/CWD).

    Devuelve el Path guardado o None si falla.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        p = (start or Path.cwd()).resolve() / PROJECT_SETTINGS_FILENAME
    d = config.to_dict()
    cm = d.pop("checkmark")
    theta = cm.pop("long_arm_box_intersection_angle")
    cm["long_arm_box_intersection_angle_deg"] = math.degrees(theta)
    payload = {"schema_version": 1, "path": d, "checkmark": cm}
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return p
    except OSError as e:
        _log.warning("No se pudo guardar %s: %s", p, e)
        return None


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _checkmark_from_json(data: Dict[str, Any], base: CheckmarkProperties, _log: logging.Logger) -> CheckmarkProperties:
    changes: Dict[str, Any] = {}

    deg = _deep_get(data, "checkmark.long_arm_box_intersection_angle_deg")
    if deg is not None:
        if isinstance(deg, (int, float)) and not isinstance(deg, bool):
            changes["long_arm_box_intersection_angle"] = math.radians(float(deg))
        else:
            _log.warning("checkmark.long_arm_box_intersection_angle_deg ignorado: %r", deg)

    for name in RATIO_FIELDS:
        raw = _deep_get(data, f"checkmark.{name}")
        if raw is None:
            continue
        try:
            changes[name] = RatioPair.from_value(raw, f"checkmark.{name}")
        except TriCheckConfigError as e:
            _log.warning("%s (ignorado)", e)

    return dataclasses.replace(base, **changes) if changes else base


def load_path_config(
    start: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    base: PathConfig | None = None,
    logger: logging.Logger | None = None,
) -> PathConfig:
    """PathConfig = defaults <- tricheck_settings.json <- variables TRICHECK_*.

    No valida rangos (eso lo hace el facade al usar la config); sólo descarta
    valores con tipo inválido.
    """
    _log = logger or log
    env = os.environ if env is None else env
    cfg = base or PathConfig()
    changes: Dict[str, Any] = {}
    applied: Dict[str, Any] = {}

    data = load_project_settings(start, logger=_log)
    for key, (field_name, conv) in JSON_PATH_KEYS.items():
        raw = _deep_get(data, key)
        if raw is None:
            continue
        try:
            if isinstance(raw, bool):
                raise TriCheckConfigError(f"{key} inválido: {raw!r}")
            changes[field_name] = conv(raw)
            applied[key] = raw
        except (TriCheckConfigError, TypeError, ValueError) as e:
            _log.warning("Setting %s ignorado: %s", key, e)

    checkmark = _checkmark_from_json(data, cfg.checkmark, _log)
    if checkmark is not cfg.checkmark:
        changes["checkmark"] = checkmark
        applied["checkmark"] = "json"

    for key, (field_name, conv) in ENV_OVERRIDES.items():
        raw = env.get(key)
        if not raw:
            continue
        try:
            changes[field_name] = conv(raw)
            applied[key] = raw
        except (TriCheckConfigError, TypeError, ValueError) as e:
            _log.warning("Variable %s ignorada: %s", key, e)

    if applied:
        _log.info("Settings aplicados: %s", applied)
    return dataclasses.replace(cfg, **changes) if changes else cfg
