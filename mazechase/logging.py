"""
Mazechase Logging

Per-module console logging plus structured record sinks for gameplay events.

Console Logging:
    Every module asks for its own logger. Messages are printed as
    "[module] LEVEL: message" and filtered by a global or per-module level.

Structured Record Logging:
    Gameplay events (ghost eaten, life lost, trap placed, ...) can be routed to
    a sink as JSON-serializable dicts. On desktop the FileSink writes one JSONL
    file per module; when a module is not enabled the NullSink swallows records.

Usage:
    from mazechase.logging import get_logger

    log = get_logger('ghost_behavior')
    log.debug("Ghost %s turned %s", ghost.variant, direction)
    log.info("Level loaded")

    from mazechase.logging import emit_record
    emit_record('ghostmaze', {'type': 'ghost_eaten', 'tick': 120, ...})

Configuration:
    Environment variables:
        MAZECHASE_LOG_LEVEL=DEBUG              # Global default level
        MAZECHASE_LOG_GHOST_BEHAVIOR=TRACE     # Module-specific level
        MAZECHASE_LOG_DIR=/tmp/mazechase       # Where FileSink writes

        # Module-specific structured logging
        MAZECHASE_LOGGING_GHOSTMAZE_ENABLED=true

    Or programmatically:
        from mazechase.logging import configure_logging
        configure_logging(level='DEBUG', modules={'traps': 'TRACE'})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional


ENV_PREFIX = 'MAZECHASE_'


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-tick detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


# =============================================================================
# Sink-Based Structured Logging
# =============================================================================

class LogSink(ABC):
    """
    Abstract base class for log record sinks.

    Sinks receive structured log records and write them to their destination.
    """

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """
        Emit a structured log record.

        Args:
            module: Module name (e.g., 'ghostmaze')
            record: Structured data to log (must be JSON-serializable)
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered records."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        pass

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    Writes structured log records to JSONL files.

    One file per module, named "<session>_<module>.jsonl". The first line of
    each file is a header record and the last (written on close) a footer.

    Args:
        log_dir: Directory for log files (default: from get_log_dir())
        session_name: Session identifier for file naming (default: timestamp)
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, Any] = {}

    def _ensure_dir(self) -> Path:
        """Lazily create the log directory."""
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir

    def _path_for(self, module: str) -> Path:
        return self._ensure_dir() / f"{self._session_name}_{module}.jsonl"

    def _get_file(self, module: str):
        """Get or open the file handle for a module."""
        if module not in self._files:
            handle = open(self._path_for(module), 'a')
            header = {
                "type": "header",
                "module": module,
                "session_name": self._session_name,
                "start_time": time.time(),
            }
            handle.write(json.dumps(header) + "\n")
            self._files[module] = handle
        return self._files[module]

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Append a record to the module's JSONL file."""
        handle = self._get_file(module)
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        handle.write(json.dumps(record) + "\n")

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        """Write footers and close every open file."""
        for module, handle in self._files.items():
            footer = {"type": "footer", "module": module, "end_time": time.time()}
            handle.write(json.dumps(footer) + "\n")
            handle.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Paths of the files opened so far, by module."""
        return {module: self._path_for(module) for module in self._files}


class NullSink(LogSink):
    """No-op sink used when a module's structured logging is disabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


# Active sinks by module
_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """
    Register a sink for a specific module.

    Args:
        module: Module name (e.g., 'ghostmaze')
        sink: Sink instance to receive records
    """
    _sinks[module] = sink


def unregister_sink(module: str) -> Optional[LogSink]:
    """Detach and return the sink registered for a module, if any."""
    return _sinks.pop(module, None)


def get_sink(module: str) -> Optional[LogSink]:
    """Get the sink registered for a module."""
    return _sinks.get(module)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Emit a structured log record to the module's sink.

    Args:
        module: Module name
        record: Structured data to log (must be JSON-serializable)

    Returns:
        True if record was emitted, False if no sink is registered
    """
    sink = get_sink(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and forget all registered sinks."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_environment(
    module: str,
    session_name: Optional[str] = None,
) -> LogSink:
    """
    Create the sink configured for a module.

    Returns a FileSink when MAZECHASE_LOGGING_<MODULE>_ENABLED is true,
    otherwise a NullSink.

    Args:
        module: Module name for configuration lookup
        session_name: Optional session identifier
    """
    config = get_module_config(module)
    if not config.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=config.get('dir'), session_name=session_name)


# =============================================================================
# Global configuration
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,         # Override log directory (None = platform default)
    'modules': {},           # Per-module structured logging settings
}


def get_log_dir() -> str:
    """Get the log directory.

    Priority:
    1. Configured log_dir (MAZECHASE_LOG_DIR or configure_logging)
    2. Platform-specific user data directory:
       - macOS: ~/Library/Application Support/Mazechase/logs
       - Windows: %APPDATA%/Mazechase/logs
       - Linux: $XDG_DATA_HOME/mazechase/logs
    """
    if _config.get('log_dir'):
        return str(Path(_config['log_dir']).expanduser())

    if sys.platform == 'darwin':
        user_data = Path.home() / 'Library' / 'Application Support' / 'Mazechase'
    elif sys.platform == 'win32':
        user_data = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Mazechase'
    else:
        xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
        user_data = Path(xdg_data) / 'mazechase'

    return str(user_data / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Get structured logging settings for a module.

    MAZECHASE_LOGGING_GHOSTMAZE_ENABLED=true maps to {'enabled': True}.
    """
    return _config['modules'].get(module.lower(), {})


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """Set a value in a nested dict, creating intermediate dicts as needed."""
    for key in keys[:-1]:
        d = d.setdefault(key, {})
    d[keys[-1]] = value


def _parse_env_value(value: str) -> Any:
    """Parse an environment variable value to bool, int, float or str."""
    lower = value.lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def _format_message(module: str, level: str, msg: str) -> str:
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, defaulting to INFO."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
        log_dir: Directory for FileSink output
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)

    if log_dir:
        _config['log_dir'] = log_dir


def _load_env_config(environ: Optional[Dict[str, str]] = None) -> None:
    """Load configuration from environment variables.

    Two prefixes are recognised:
    - MAZECHASE_LOG_*: log levels (MAZECHASE_LOG_TRAPS=DEBUG)
    - MAZECHASE_LOGGING_*: structured logging settings
      (MAZECHASE_LOGGING_GHOSTMAZE_ENABLED=true)
    """
    environ = os.environ if environ is None else environ
    level_key = f'{ENV_PREFIX}LOG_LEVEL'
    dir_key = f'{ENV_PREFIX}LOG_DIR'
    log_prefix = f'{ENV_PREFIX}LOG_'
    logging_prefix = f'{ENV_PREFIX}LOGGING_'

    if level_key in environ:
        _config['default_level'] = _level_from_string(environ[level_key])

    if dir_key in environ:
        _config['log_dir'] = environ[dir_key]

    for key, value in environ.items():
        if key.startswith(log_prefix) and key not in (level_key, dir_key):
            module_name = key[len(log_prefix):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)
        elif key.startswith(logging_prefix):
            parts = key[len(logging_prefix):].lower().split('_')
            if len(parts) >= 2:
                settings = _config['modules'].setdefault(parts[0], {})
                _set_nested(settings, parts[1:], _parse_env_value(value))


# Load env config on import
_load_env_config()


class MazeLogger:
    """
    Logger for a specific module.

    Mirrors the standard level methods; formatting uses %-style args so that
    disabled messages cost nothing to build.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Effective log level for this module."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (per-tick detail)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def warn(self, msg: str, *args) -> None:
        """Alias for warning()."""
        self.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """
        Log an error followed by the current exception's traceback.

        Args:
            msg: Message describing what failed
        """
        import traceback

        self._log(LogLevel.ERROR, 'ERROR', msg, *args)
        tb = traceback.format_exc()
        if tb and tb.strip() != 'NoneType: None':
            for line in tb.strip().split('\n'):
                self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> MazeLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') twice returns the same
    instance.

    Args:
        module: Module name (e.g., 'game_mode', 'traps')
    """
    return MazeLogger(module)


def enable_all_logging() -> None:
    """Enable DEBUG level for all modules."""
    configure_logging(level='DEBUG')


def disable_logging() -> None:
    """Disable all console logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
