from __future__ import annotations

"""
Environment driven configuration and logging setup.

Values are read once at import into `CONFIG`. Bad values never raise:
they fall back to the defaults and a warning is logged.
"""

import json
import logging
import os
import sys
import time
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO


LOGGER_NAME = 'termcells'
DEBUG_LOGGER = logging.getLogger('termcells.debug')
_log = logging.getLogger('termcells.config')

_TRUE = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class CellsConfig:
    codepoint_cache_size: int = 4096
    cell_len_cache_size: int = 4096
    cell_len_max_bytes: int = 64
    debug_log: bool = False
    log_level: str = 'INFO'
    log_json: bool = False


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return str(environ.get(name, '0')).strip().lower() in _TRUE


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        _log.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default
    if value < 1:
        _log.warning("%s=%r must be positive, using %d", name, raw, default)
        return default
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> CellsConfig:
    """Build a config from `environ` (defaults to os.environ)."""
    env = os.environ if environ is None else environ
    level = str(env.get('LOG_LEVEL', 'INFO')).strip().upper() or 'INFO'
    if not isinstance(logging.getLevelName(level), int):
        _log.warning("LOG_LEVEL=%r is not a logging level, using INFO", level)
        level = 'INFO'
    return CellsConfig(
        codepoint_cache_size=_positive_int(env, 'TERMCELLS_CODEPOINT_CACHE_SIZE', 4096),
        cell_len_cache_size=_positive_int(env, 'TERMCELLS_CELL_LEN_CACHE_SIZE', 4096),
        cell_len_max_bytes=_positive_int(env, 'TERMCELLS_CELL_LEN_MAX_BYTES', 64),
        debug_log=_flag(env, 'TERMCELLS_DEBUG_LOG'),
        log_level=level,
        log_json=_flag(env, 'LOG_JSON'),
    )


CONFIG = load_config()


def debug(msg: str) -> None:
    """Trace on the debug logger, only when TERMCELLS_DEBUG_LOG is on."""
    if CONFIG.debug_log:
        DEBUG_LOGGER.debug(msg)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'ts': time.strftime('%Y-%m-%dT%H:%M:%S', time.localtime(record.created)),
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
        }
        if record.exc_info:
            payload['exc'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
    json_lines: Optional[bool] = None,
) -> logging.Logger:
    """Attach a single stream handler to the `termcells` logger.

    Handlers installed by a previous call are dropped first, so calling
    this twice does not duplicate output.
    """
    level_name = (level or CONFIG.log_level).upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = []
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if CONFIG.log_json if json_lines is None else json_lines:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s', datefmt='%H:%M:%S')
        )
    logger.addHandler(handler)
    if CONFIG.debug_log:
        DEBUG_LOGGER.setLevel(logging.DEBUG)
    return logger


__all__ = [
    "CellsConfig",
    "CONFIG",
    "load_config",
    "debug",
    "configure_logging",
    "JsonFormatter",
]
