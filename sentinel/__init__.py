"""SentinelFlow duplicate-scan package.

The package root imports nothing. ``sentinel.stages`` and everything built on
it configure logging on import (see ``sentinel.utils.get_logger``), which
creates ``$LOG_DIR`` (default ``logs``).
"""

__all__: list[str] = []
