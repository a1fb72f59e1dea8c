"""Configuration for the name search controller and its terminal host."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

from namesearch.errors import ConfigError

DEFAULT_HIGHLIGHT_CLASS = "name-search__highlight"
SUPPORTED_LOCALES = ("ru", "en")


@dataclass
class SearchConfig:
    """Configuration for name search."""

    # Delay between the last keystroke and the committed query
    debounce_ms: int = 300

    # CSS class of the <mark> span wrapped around matched text
    highlight_class: str = DEFAULT_HIGHLIGHT_CLASS

    # Language of the screen reader announcements ("ru" or "en")
    locale: str = "ru"

    # Logging
    log_level: str = "INFO"


def _parse_int(variable: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(variable, raw, "expected an integer number of milliseconds") from None


def load_search_config() -> SearchConfig:
    """Load search configuration from environment variables (and a .env file, if present).

    Recognised variables:
        NAMESEARCH_DEBOUNCE_MS: debounce delay in milliseconds
        NAMESEARCH_HIGHLIGHT_CLASS: class attribute of highlight spans
        NAMESEARCH_LOCALE: announcement language
        NAMESEARCH_LOG_LEVEL: loguru level name

    Raises:
        ConfigError: If a variable holds a value that cannot be used
    """
    load_dotenv()
    defaults = SearchConfig()

    debounce_raw = os.getenv("NAMESEARCH_DEBOUNCE_MS", "").strip()
    debounce_ms = _parse_int("NAMESEARCH_DEBOUNCE_MS", debounce_raw) if debounce_raw else defaults.debounce_ms

    highlight_class = os.getenv("NAMESEARCH_HIGHLIGHT_CLASS", "").strip() or defaults.highlight_class

    locale = os.getenv("NAMESEARCH_LOCALE", defaults.locale).strip().lower()
    if locale not in SUPPORTED_LOCALES:
        raise ConfigError("NAMESEARCH_LOCALE", locale, f"expected one of {', '.join(SUPPORTED_LOCALES)}")

    log_level = os.getenv("NAMESEARCH_LOG_LEVEL", defaults.log_level).strip().upper()
    try:
        logger.level(log_level)
    except ValueError:
        raise ConfigError("NAMESEARCH_LOG_LEVEL", log_level, "unknown log level") from None

    return SearchConfig(
        debounce_ms=debounce_ms,
        highlight_class=highlight_class,
        locale=locale,
        log_level=log_level,
    )
