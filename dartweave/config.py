"""Application-wide configuration and settings.

Uses ``pydantic-settings`` so values can be overridden via environment
variables prefixed with ``DARTWEAVE_``.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for the dartweave generation core.

    Attributes:
        app_name: Display name of the application.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Emit JSON log lines instead of the console format.
        host: Interface the API server binds to.
        port: Port the API server listens on.
        strict_dependencies: Treat unresolved dependencies as errors
            instead of skipping them.
        import_template: Format string for one import directive; ``{path}``
            is replaced by the relative import path.
        comment_prefix: Marker of a single-line comment in generated sources,
            used to find the header block.
        max_artifacts_per_request: Upper bound on artifacts accepted by one
            HTTP request.
    """

    app_name: str = "dartweave"
    log_level: str = "INFO"
    log_json: bool = False

    host: str = "127.0.0.1"
    port: int = 8000

    strict_dependencies: bool = False
    import_template: str = "import '{path}';"
    comment_prefix: str = "//"

    max_artifacts_per_request: int = 1000

    model_config = {"env_prefix": "DARTWEAVE_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
