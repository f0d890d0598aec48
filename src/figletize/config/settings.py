"""Configuration settings for Figletize."""

from pathlib import Path

from pydantic import BaseModel, Field

from figletize.io.library import DEFAULT_FONT


class RenderConfig(BaseModel):
    """Configuration for rendering banners."""

    font: str = Field(
        default=DEFAULT_FONT,
        description="Name of the font used when none is given",
    )
    smush_override: int | None = Field(
        default=None,
        ge=0,
        le=255,
        description="Smush mode replacing the font's own (None = use the font's)",
    )


class FontSourceConfig(BaseModel):
    """Where fonts are looked up."""

    font_path: Path | None = Field(
        default=None,
        description="Directory or .zip archive of .flf fonts (None = bundled archive)",
    )
    cache_size: int = Field(
        default=1024,
        ge=1,
        description="Rendered banners kept by the render cache",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FigletizeSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    fonts: FontSourceConfig = Field(default_factory=FontSourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FigletizeSettings:
    """Get default application settings."""
    return FigletizeSettings()
