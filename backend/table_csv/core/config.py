"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TABLE_CSV_", extra="ignore")

    app_name: str = Field(default="HTML table to CSV", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level.",
    )
    html_parser: Literal["html.parser", "lxml", "html5lib"] = Field(
        default="html5lib",
        description="BeautifulSoup tree builder used to parse incoming markup.",
    )
    cell_text: Literal["flatten", "first_child"] = Field(
        default="flatten",
        description="How cell text is read: all nested text, or the first child node only.",
    )
    strip_cells: bool = Field(
        default=False,
        description="Strip leading and trailing whitespace from every cell.",
    )
    line_ending: Literal["crlf", "lf"] = Field(
        default="crlf",
        description="Line terminator written after every CSV row.",
    )
    download_filename: str = Field(
        default="table",
        description="File name stem used by the CSV download endpoint.",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )

    @property
    def line_terminator(self) -> str:
        return "\r\n" if self.line_ending == "crlf" else "\n"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
