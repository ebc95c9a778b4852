"""Runtime configuration.

Values come from (in order of precedence) explicit calls like `set_default_locale`,
environment variables (a `.env` file in the working directory is loaded on import), and
built-in defaults.
"""

from __future__ import annotations

import logging
import os

from babel import Locale, UnknownLocaleError
from babel.core import default_locale
from dotenv import load_dotenv

from suite_money.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

load_dotenv()

LOCALE_ENV_VAR = "SUITE_MONEY_LOCALE"
FALLBACK_LOCALE = "en_US"

_default_locale_override: str | None = None


def _validate_locale(locale: str) -> str:
    # Raise: $locale must be parseable by Babel (e.g., "en_GB", "de-DE")
    try:
        return str(Locale.parse(locale, sep="-" if "-" in locale else "_"))
    except (ValueError, TypeError, UnknownLocaleError) as e:
        raise InvalidArgumentError(f"Cannot use locale because $locale ('{locale}') is not a valid locale identifier") from e


def set_default_locale(locale: str | None) -> None:
    """Set the locale used when no explicit $locale is passed. None clears the override.

    Raises:
        InvalidArgumentError: If $locale is not a valid locale identifier.
    """
    global _default_locale_override

    if locale is None:
        _default_locale_override = None
        logger.debug("Cleared default locale override")
        return

    _default_locale_override = _validate_locale(locale)
    logger.debug(f"Default locale set to '{_default_locale_override}'")


def get_default_locale() -> str:
    """Return the locale used when no explicit $locale is passed."""
    if _default_locale_override is not None:
        return _default_locale_override

    env_locale = os.environ.get(LOCALE_ENV_VAR)
    if env_locale:
        return _validate_locale(env_locale)

    system_locale = default_locale()
    if system_locale:
        try:
            return _validate_locale(system_locale)
        except InvalidArgumentError:
            logger.debug(f"Ignoring unusable system locale '{system_locale}', falling back to '{FALLBACK_LOCALE}'")

    return FALLBACK_LOCALE


def resolve_locale(locale: str | None) -> str:
    """Return $locale validated, or the default locale when $locale is None."""
    if locale is None:
        return get_default_locale()

    return _validate_locale(locale)
