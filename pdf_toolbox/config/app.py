import os
from pathlib import Path

from aws_lambda_powertools.logging import Logger
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = Logger(service="pdf-toolbox")


class AppConfig(BaseModel):
    """Application configuration."""

    app_env: str = Field(
        default="local", description="Application environment (local, dev or prod)"
    )
    version: str = Field(default="unknown", description="Application version")
    producer: str = Field(
        default="PDF Toolbox",
        description="Creator/producer tag written into assembled documents",
    )
    render_debounce_ms: int = Field(
        default=100, ge=0, description="Debounce window for preview renders"
    )
    zoom_factor: float = Field(default=1.2, gt=1.0, description="Zoom step factor")
    min_scale: float = Field(default=0.5, gt=0, description="Minimum preview scale")
    max_scale: float = Field(default=3.0, gt=0, description="Maximum preview scale")
    initial_scale: float = Field(default=1.2, gt=0, description="Initial preview scale")
    thumbnail_scale: float = Field(
        default=0.3, gt=0, description="Scale used to render thumbnails"
    )
    split_max_thumbnails: int = Field(
        default=5, ge=0, description="Thumbnail limit for extraction previews"
    )
    merge_max_thumbnails: int = Field(
        default=8, ge=0, description="Thumbnail limit for merge previews"
    )
    max_error_log_entries: int = Field(
        default=100, gt=0, description="Size of the in-memory error history"
    )

    @property
    def render_debounce(self) -> float:
        """Debounce window in seconds."""
        return self.render_debounce_ms / 1000

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables.

        In 'local' mode (default), it first loads variables from a .env file.
        In 'dev' and 'prod' modes, it reads directly from environment variables.
        """

        app_env = os.getenv("APP_ENV", "local").lower()
        logger.debug("App environment", extra={"app_env": app_env})
        if app_env == "local":
            dotenv_path = Path(".env")
            load_dotenv(dotenv_path=dotenv_path, override=True)
            logger.debug("Loaded .env file", extra={"dotenv_path": str(dotenv_path)})
        elif app_env not in ["dev", "prod"]:
            raise ValueError(f"Invalid app environment: {app_env}")

        defaults = cls.model_fields
        return cls(
            app_env=app_env,
            version=os.getenv("VERSION", "unknown"),
            producer=os.getenv("PDF_PRODUCER", defaults["producer"].default),
            render_debounce_ms=int(
                os.getenv("RENDER_DEBOUNCE_MS", defaults["render_debounce_ms"].default)
            ),
            zoom_factor=float(os.getenv("ZOOM_FACTOR", defaults["zoom_factor"].default)),
            min_scale=float(os.getenv("MIN_SCALE", defaults["min_scale"].default)),
            max_scale=float(os.getenv("MAX_SCALE", defaults["max_scale"].default)),
            initial_scale=float(
                os.getenv("INITIAL_SCALE", defaults["initial_scale"].default)
            ),
            thumbnail_scale=float(
                os.getenv("THUMBNAIL_SCALE", defaults["thumbnail_scale"].default)
            ),
            split_max_thumbnails=int(
                os.getenv(
                    "SPLIT_MAX_THUMBNAILS", defaults["split_max_thumbnails"].default
                )
            ),
            merge_max_thumbnails=int(
                os.getenv(
                    "MERGE_MAX_THUMBNAILS", defaults["merge_max_thumbnails"].default
                )
            ),
            max_error_log_entries=int(
                os.getenv(
                    "MAX_ERROR_LOG_ENTRIES", defaults["max_error_log_entries"].default
                )
            ),
        )
