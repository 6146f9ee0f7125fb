from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from deckstats.domain.constants import DEFAULT_OUTPUT_PATH, DEFAULT_TEMPLATE_PATH
from deckstats.domain.exceptions import ConfigurationError


def config_file_path() -> Path:
    return Path.home() / ".config/deckstats/config.toml"


class AppConfig(BaseSettings):
    """
    Resolved settings for a report run.
    Supports loading from:
    1. Config file (~/.config/deckstats/config.toml)
    2. Environment variables (DECKSTATS_*)
    3. Manual overrides (CLI)
    Later sources win.
    """

    model_config = SettingsConfigDict(
        env_prefix="DECKSTATS_",
        extra="ignore",
    )

    # Source
    collection_path: Path | None = None
    deck_id: str | None = None

    # Files
    template_path: Path = DEFAULT_TEMPLATE_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH

    verbose: int = 0

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        toml_file = config_file_path()
        if toml_file.exists():
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (init_settings, env_settings)

    @field_validator("deck_id", mode="before")
    @classmethod
    def coerce_deck_id(cls, v: Any) -> str | None:
        # deck ids are often written as TOML integers
        if v is None:
            return None
        return str(v)

    @field_validator("collection_path", mode="before")
    @classmethod
    def resolve_collection_path(cls, v: Any) -> Path | None:
        if v:
            return Path(v).expanduser()
        return None


def resolve_config(cli_overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in AppConfig
    2. ~/.config/deckstats/config.toml (if exists)
    3. Environment variables (DECKSTATS_*)
    4. cli_overrides (passed from Typer); None values are ignored
    """
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    return AppConfig(**overrides)


def require_run_settings(config: AppConfig) -> tuple[Path, str]:
    """Return (collection_path, deck_id), or raise if either is missing."""
    if config.collection_path is None:
        raise ConfigurationError(
            "No Anki collection given. Pass --collection-path or set DECKSTATS_COLLECTION_PATH."
        )
    if not config.deck_id:
        raise ConfigurationError("No deck given. Pass --deck-id or set DECKSTATS_DECK_ID.")
    return config.collection_path, config.deck_id
