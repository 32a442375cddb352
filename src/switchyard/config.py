"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, static_dir="./public")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 9000
    debug: bool = False  # Single worker with auto-reload
    workers: int = 0  # 0 = auto-detect from CPU count

    # Logging
    log_level: str = "info"
    log_format: str = "text"  # "text" or "json" (pounce access log)

    # Static files
    static_dir: str | Path = "static"
    static_prefix: str = "/proverbs/"
    cache_control: str = "public, max-age=3600"

    # Connection lifecycle (forwarded to pounce)
    keep_alive_timeout: float = 5.0
    request_timeout: float = 30.0
