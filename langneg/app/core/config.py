from pydantic_settings import BaseSettings, SettingsConfigDict

from langneg.app.negotiation.language_config import LanguageConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # First language is the default — JSON list in the environment,
    # e.g. LANGNEG_LANGUAGES='["en", "ja", "de"]'
    LANGNEG_LANGUAGES: list[str] = ["en"]
    # Any of: path_prefix, subdomain, header
    LANGNEG_METHODS: list[str] = ["header"]
    # Any of: no_content_language, no_vary, redirect_on_header_match,
    # not_acceptable_on_header_match_fail
    LANGNEG_OPTIONS: list[str] = []

    LOG_LEVEL: str = "INFO"


def build_language_config(settings: Settings) -> LanguageConfig:
    """Validate the negotiation settings; raises ``LanguageConfigError``."""
    return LanguageConfig.from_names(
        settings.LANGNEG_LANGUAGES,
        settings.LANGNEG_METHODS,
        settings.LANGNEG_OPTIONS,
    )


settings = Settings()
