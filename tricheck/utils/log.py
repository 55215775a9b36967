# File: tricheck/utils/log.py
# Project: TriCheck (TCK)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Logging centralizado (consola + archivo opcional) y helpers.
# Notes: Sólo la CLI llama a setup_logging; la librería no toca handlers.
from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_LEVEL_ENV = "TRICHECK_LOG_LEVEL"
LOG_FILENAME = "tricheck.log"

_LOGGER_CONFIGURED = False


def resolve_level(level: int | str | None, default: int = logging.INFO) -> int:
    """Nivel numérico desde int, nombre ("debug", "WARNING") o None (-> env/default)."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or default
    if isinstance(level, int):
        return level
    named = logging.getLevelName(str(level).strip().upper())
    return named if isinstance(named, int) else default


def setup_logging(
    log_dir: str | os.PathLike | None = None,
    level: int | str | None = None,
) -> None:
    """Configura el logger raíz una sola vez.

    - `log_dir=None`: sólo consola.
    - Si no se puede abrir el archivo, queda la consola y se avisa.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    lvl = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(lvl)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(d / LOG_FILENAME, encoding="utf-8"))
        except OSError as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler en %s: %s", log_dir, e)

    for h in handlers:
        h.setLevel(lvl)
        h.setFormatter(fmt)
        root.addHandler(h)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
