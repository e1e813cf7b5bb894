"""
Breakout logging.

Two channels:

- ``get_logger(module)`` returns a per-module logger that prints
  ``[module] LEVEL: message`` to stdout when the module's level allows it.
- ``emit_record(stream, record)`` hands a JSON-serializable dict to the
  sink registered for that stream. The game writes one ``session`` record
  per terminal transition.

Environment:
    BREAKOUT_LOG_LEVEL=DEBUG                 Default level for every module
    BREAKOUT_LOG_SCORING=DEBUG               Level for one module
    BREAKOUT_LOG_DIR=/tmp/breakout           Where record files are written
    BREAKOUT_LOGGING_SESSION_ENABLED=true    Write session records to disk

Usage:
    from breakout.logging import get_logger, emit_record

    log = get_logger('game_mode')
    log.debug("Brick (%d, %d) destroyed", col, row)
    emit_record('session', {'type': 'terminal', 'outcome': 'won', 'score': 40})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


_LEVEL_NAMES: Dict[str, LogLevel] = {
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARNING': LogLevel.WARNING,
    'WARN': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'OFF': LogLevel.OFF,
}

_TRUE_VALUES = ('1', 'true', 'yes', 'on')

_LEVEL_PREFIX = 'BREAKOUT_LOG_'
_STREAM_PREFIX = 'BREAKOUT_LOGGING_'
_STREAM_SUFFIX = '_ENABLED'

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'enabled_streams': set(),
}


def _parse_level(name: str) -> LogLevel:
    """Level for a name such as 'debug'; unknown names mean INFO."""
    return _LEVEL_NAMES.get(name.strip().upper(), LogLevel.INFO)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_')


def get_data_dir() -> Path:
    """Per-user data directory (scores, record files)."""
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / 'Breakout'
    if sys.platform == 'win32':
        return Path(os.environ.get('APPDATA', str(Path.home()))) / 'Breakout'
    xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return Path(xdg_data) / 'breakout'


def get_log_dir() -> Path:
    """Directory for record files: configured dir, else ``<data dir>/logs``."""
    if _config['log_dir']:
        return Path(_config['log_dir']).expanduser()
    return get_data_dir() / 'logs'


def stream_enabled(stream: str) -> bool:
    """True if records for this stream should be written to disk."""
    return stream.lower() in _config['enabled_streams']


def configure_logging(
    level: Optional[str] = None,
    modules: Optional[Mapping[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """Change levels or the record directory. Arguments left as None are kept.

    Args:
        level: Default level name for all modules
        modules: Module name -> level name
        log_dir: Directory for record files
    """
    if level is not None:
        _config['default_level'] = _parse_level(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][_module_key(module)] = _parse_level(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env(environ: Mapping[str, str]) -> None:
    for key, value in environ.items():
        if key == 'BREAKOUT_LOG_LEVEL':
            _config['default_level'] = _parse_level(value)
        elif key == 'BREAKOUT_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith(_LEVEL_PREFIX):
            _config['module_levels'][key[len(_LEVEL_PREFIX):].lower()] = _parse_level(value)
        elif key.startswith(_STREAM_PREFIX) and key.endswith(_STREAM_SUFFIX):
            stream = key[len(_STREAM_PREFIX):-len(_STREAM_SUFFIX)].lower()
            if value.strip().lower() in _TRUE_VALUES:
                _config['enabled_streams'].add(stream)
            else:
                _config['enabled_streams'].discard(stream)


_load_env(os.environ)


class BreakoutLogger:
    """Prints %-formatted messages for one module."""

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, msg: str, args: tuple) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level.name}: {msg}")

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BreakoutLogger:
    """Cached logger for a module, e.g. ``get_logger('scoring')``."""
    return BreakoutLogger(module)


def disable_logging() -> None:
    """Silence every logger until levels are configured again."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()


# =============================================================================
# Record sinks
# =============================================================================

class RecordSink(ABC):
    """Destination for structured records of one or more streams."""

    @abstractmethod
    def emit(self, stream: str, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class NullSink(RecordSink):
    """Drops every record."""

    def emit(self, stream: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


class FileSink(RecordSink):
    """Appends records as JSON lines, one file per stream.

    Files are named ``<run_name>_<stream>.jsonl`` and opened on the first
    record. Each line gets a ``wall_time`` unless the record has one.

    Args:
        log_dir: Target directory (default: get_log_dir())
        run_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, run_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._run_name = run_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def path_for(self, stream: str) -> Path:
        log_dir = self._log_dir if self._log_dir is not None else get_log_dir()
        return log_dir / f"{self._run_name}_{stream}.jsonl"

    def emit(self, stream: str, record: Dict[str, Any]) -> None:
        f = self._files.get(stream)
        if f is None:
            path = self.path_for(stream)
            path.parent.mkdir(parents=True, exist_ok=True)
            f = self._files[stream] = open(path, 'a')
        f.write(json.dumps({'wall_time': time.time(), **record}) + "\n")
        f.flush()

    def close(self) -> None:
        for f in self._files.values():
            f.close()
        self._files.clear()


_sinks: Dict[str, RecordSink] = {}


def register_sink(stream: str, sink: RecordSink) -> None:
    """Route records of ``stream`` to ``sink``, replacing any earlier one."""
    _sinks[stream] = sink


def create_sink(stream: str) -> RecordSink:
    """FileSink if the stream is enabled, else NullSink."""
    if stream_enabled(stream):
        return FileSink()
    return NullSink()


def emit_record(stream: str, record: Dict[str, Any]) -> bool:
    """Send a record to the stream's sink.

    Returns:
        False if no sink is registered for the stream
    """
    sink = _sinks.get(stream)
    if sink is None:
        return False
    sink.emit(stream, record)
    return True


def close_all_sinks() -> None:
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
