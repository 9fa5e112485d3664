"""Locale utilities: normalization, system locale detection, table-tag matching.

LocaleTableRegistry only does exact tag lookups. Turning a full locale such
as ``hi-IN`` or ``en_US`` into a supported table tag is the caller's policy;
select_table_tag() is the policy this package ships with (exact tag, then
language plus script, then bare language, then DEFAULT).

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

    from keytextengine.tables.locale_tables import LocaleTableRegistry

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "select_table_tag",
    "table_tag_candidates",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while Babel/POSIX and the table tags use
    underscores (en_US). Case is preserved: table tags are case-sensitive.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("hi")
        'hi'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the get_babel_locale() cache."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encodings.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'hi_IN.UTF-8'
        >>> get_system_locale()
        'hi_IN'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        logger.debug("locale.getlocale() failed; falling back to environment")

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"


def table_tag_candidates(locale_code: str) -> tuple[str, ...]:
    """List table tags to try for a locale, most specific first.

    Uses Babel to split the locale into language and script. Locales Babel
    does not know (private or very new tags such as ``zz``) are split on
    underscores instead.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Distinct candidate tags: exact, language_script (if any), language

    Example:
        >>> table_tag_candidates("hi-IN")
        ('hi_IN', 'hi')
        >>> table_tag_candidates("sr_Latn_RS")
        ('sr_Latn_RS', 'sr_Latn', 'sr')
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    candidates = [normalized]
    try:
        parsed = get_babel_locale(normalized)
        language, script = parsed.language, parsed.script
    except (UnknownLocaleError, ValueError):
        parts = normalized.split("_")
        language = parts[0]
        script = parts[1] if len(parts) > 1 and len(parts[1]) == 4 else None

    if script:
        candidates.append(f"{language}_{script}")
    candidates.append(language)
    return tuple(dict.fromkeys(c for c in candidates if c))


def select_table_tag(locale_code: str, registry: LocaleTableRegistry) -> str:
    """Pick the most specific table tag the registry supports.

    Args:
        locale_code: Requested locale (e.g., "hi-IN", "en_US", "zz")
        registry: Table registry to match against

    Returns:
        First candidate the registry contains, else the registry's default tag

    Example:
        >>> select_table_tag("hi-IN", default_table_registry())
        'hi'
        >>> select_table_tag("fr_FR", default_table_registry())
        'DEFAULT'
    """
    for candidate in table_tag_candidates(locale_code):
        if candidate in registry:
            return candidate
    logger.debug("No table for locale %r; using %s", locale_code, registry.default_tag)
    return registry.default_tag
