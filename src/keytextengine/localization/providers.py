"""Override providers for dynamically localized text names.

A small fixed set of names (action-key labels such as ``label_go_key``) is
localized by the platform rather than by the compiled-in tables. At bind
time, TextsSet asks an OverrideProvider for each of them; whatever the
provider supplies takes precedence over the tables.

Components:
    OverrideProvider - Protocol for override sources (structural typing)
    MappingOverrideProvider - In-memory provider backed by nested mappings
    PathOverrideProvider - Disk-based provider reading one JSON file per locale

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from keytextengine.constants import DEFAULT_OVERRIDE_RESOURCE
from keytextengine.localization.types import LocaleTag, TextName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "OverrideProvider",
    # Concrete providers
    "MappingOverrideProvider",
    "PathOverrideProvider",
]

logger = logging.getLogger(__name__)


class OverrideProvider(Protocol):
    """Protocol for supplying localized override strings.

    Implementations return the string for ``name`` in ``locale`` or raise.
    Raising is how a provider says "no override": TextsSet records the
    failure and falls through to the tables.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom providers.

    Example:
        >>> class GettextProvider:
        ...     def get_text(self, locale: str, name: str) -> str:
        ...         return translations[locale].gettext(name)
        ...
        >>> texts.bind("hi", GettextProvider())
    """

    def get_text(self, locale: LocaleTag, name: TextName) -> str:
        """Return the localized string for ``name``.

        Args:
            locale: Locale to localize for (e.g., 'hi', 'en_US')
            name: Override-eligible text name (e.g., 'label_go_key')

        Returns:
            Localized string

        Raises:
            LookupError: If the provider has no string for the name
            OSError: If the provider's source cannot be read
        """


@dataclass(frozen=True, slots=True)
class MappingOverrideProvider:
    """Provider backed by an in-memory ``{locale: {name: text}}`` mapping.

    Example:
        >>> provider = MappingOverrideProvider({"en": {"label_go_key": "Go"}})
        >>> provider.get_text("en", "label_go_key")
        'Go'

    Attributes:
        texts: Locale to name-to-text mapping
    """

    texts: Mapping[LocaleTag, Mapping[TextName, str]]

    def get_text(self, locale: LocaleTag, name: TextName) -> str:
        """Return the string for ``name`` in ``locale``.

        Raises:
            KeyError: If the locale or the name is not in the mapping
        """
        return self.texts[locale][name]


@dataclass(frozen=True, slots=True)
class PathOverrideProvider:
    """File system override provider using path templates.

    Reads ``<base_path with {locale} substituted>/<resource_file>``, a JSON
    object mapping text names to strings. Each locale file is parsed once
    and cached for the lifetime of the provider.

    Security:
        Locale codes containing path separators or ".." are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> provider = PathOverrideProvider("locales/{locale}")
        >>> provider.get_text("hi", "label_go_key")
        # Reads: locales/hi/strings-action-keys.json

    Attributes:
        base_path: Path template with {locale} placeholder
        resource_file: JSON file name inside each locale directory
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    resource_file: str = DEFAULT_OVERRIDE_RESOURCE
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)
    _cache: dict[LocaleTag, MappingProxyType[TextName, str]] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _lock: threading.Lock = field(
        init=False, repr=False, compare=False, default_factory=threading.Lock
    )

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path lacks the {locale} placeholder or
                resource_file is not a plain file name
        """
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)
        if not self.resource_file or Path(self.resource_file).name != self.resource_file:
            msg = f"resource_file must be a plain file name, got: {self.resource_file!r}"
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleTag) -> None:
        """Validate locale code for path traversal attacks.

        Raises:
            ValueError: If locale contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def describe_path(self, locale: LocaleTag) -> str:
        """Return human-readable path of the locale's override file."""
        locale_path = self.base_path.replace("{locale}", locale)
        return f"{locale_path}/{self.resource_file}"

    def load_texts(self, locale: LocaleTag) -> Mapping[TextName, str]:
        """Read and cache the override file for ``locale``.

        Returns:
            Read-only name to text mapping

        Raises:
            ValueError: If locale is unsafe, the path escapes the root, or the
                file is not a JSON object of strings
            FileNotFoundError: If the locale has no override file
            OSError: If the file cannot be read
        """
        with self._lock:
            cached = self._cache.get(locale)
            if cached is not None:
                return cached

            self._validate_locale(locale)
            full_path = (
                Path(self.base_path.replace("{locale}", locale)) / self.resource_file
            ).resolve()
            try:
                full_path.relative_to(self._resolved_root)
            except ValueError:
                msg = (
                    f"Path traversal detected: resolved path escapes root directory. "
                    f"locale='{locale}'"
                )
                raise ValueError(msg) from None

            data = json.loads(full_path.read_text(encoding="utf-8"))
            if not isinstance(data, dict) or not all(
                isinstance(key, str) and isinstance(value, str) for key, value in data.items()
            ):
                msg = f"Override file must be a JSON object of strings: {full_path}"
                raise ValueError(msg)

            texts = MappingProxyType(data)
            self._cache[locale] = texts
            logger.debug("Loaded %d override texts from %s", len(texts), full_path)
            return texts

    def get_text(self, locale: LocaleTag, name: TextName) -> str:
        """Return the string for ``name`` from the locale's override file.

        Raises:
            KeyError: If the file has no entry for the name
            FileNotFoundError: If the locale has no override file
            OSError: If the file cannot be read
            ValueError: If the locale is unsafe or the file is malformed
        """
        return self.load_texts(locale)[name]
