"""Locale-bound text lookup: TextsSet and its immutable TextsBinding.

A TextsBinding is the unit of lifecycle: the selected locale table plus the
override map loaded for it. It never changes after construction. TextsSet is
the holder a keyboard context keeps; bind() builds a fresh binding and
swaps it in with a single reference assignment, so readers always see
either the old binding or the new one, never a mix.

Lookup order for get_text(name):
    1. Override map (provider strings loaded at bind time)
    2. Bound locale table slot
    3. DEFAULT table slot
    4. None

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from keytextengine.constants import MAX_STRING_REFERENCE_INDIRECTION, NO_LANGUAGE
from keytextengine.diagnostics import (
    ErrorTemplate,
    KeyTextConfigurationError,
    TextsNotBoundError,
    UnknownNameError,
)
from keytextengine.enums import LoadStatus, TextSource
from keytextengine.locale_utils import get_system_locale
from keytextengine.localization.loading import (
    FallbackInfo,
    OverrideLoadResult,
    OverrideLoadSummary,
)
from keytextengine.localization.providers import OverrideProvider
from keytextengine.localization.types import LocaleTag, TextName
from keytextengine.runtime.resolver import resolve_text_reference
from keytextengine.runtime.texts_config import TextsConfig
from keytextengine.tables import (
    LocaleTableRegistry,
    LocaleTextTable,
    NameRegistry,
    default_name_registry,
    default_table_registry,
)

__all__ = ["TextLookup", "TextsBinding", "TextsSet"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextLookup:
    """Outcome of a single text lookup.

    Attributes:
        name: Looked-up text name
        value: Raw (unresolved) text, or None
        source: Where the value came from
    """

    name: TextName
    value: str | None
    source: TextSource


@dataclass(frozen=True, slots=True)
class TextsBinding:
    """Immutable (locale table, override map) pair.

    Build through TextsSet.bind(); direct construction is for tests and
    callers managing their own lifecycle.

    Attributes:
        locale_tag: Tag the binding was requested for
        names: Name registry the tables are indexed by
        table: Selected locale table (the DEFAULT table for unknown tags)
        default_table: Fallback table for absent slots
        overrides: Read-only name to text map from the override provider
        override_names: Names that may be overridden (known even when the
            registry does not list them)
        load_summary: Per-name results of the provider queries
        max_indirection: Pass bound for resolve_text_reference()
        on_fallback: Optional callback for DEFAULT-table fallbacks
    """

    locale_tag: LocaleTag
    names: NameRegistry
    table: LocaleTextTable
    default_table: LocaleTextTable
    overrides: Mapping[TextName, str] = field(default_factory=lambda: MappingProxyType({}))
    override_names: frozenset[TextName] = frozenset()
    load_summary: OverrideLoadSummary = field(default_factory=OverrideLoadSummary)
    max_indirection: int = MAX_STRING_REFERENCE_INDIRECTION
    on_fallback: Callable[[FallbackInfo], None] | None = field(
        default=None, repr=False, compare=False
    )

    def lookup(self, name: TextName) -> TextLookup:
        """Look up the raw text for ``name`` and report its source.

        Raises:
            UnknownNameError: If the name is neither registered nor
                override-eligible
        """
        text = self.overrides.get(name)
        if text is not None:
            return TextLookup(name, text, TextSource.OVERRIDE)

        name_id = self.names.find_id(name)
        if name_id is None:
            if name in self.override_names:
                return TextLookup(name, None, TextSource.MISSING)
            raise UnknownNameError(ErrorTemplate.unknown_name(name), name=name)

        text = self.table.slot(name_id)
        if text is not None:
            source = TextSource.DEFAULT if self.table is self.default_table else TextSource.LOCALE
            return TextLookup(name, text, source)

        if self.on_fallback is not None:
            self.on_fallback(FallbackInfo(locale_tag=self.locale_tag, name=name))
        text = self.default_table.slot(name_id)
        if text is not None:
            return TextLookup(name, text, TextSource.DEFAULT)
        return TextLookup(name, None, TextSource.MISSING)

    def get_text(self, name: TextName) -> str | None:
        """Return the raw text for ``name``, or None if it has none.

        Raises:
            UnknownNameError: If the name is neither registered nor
                override-eligible
        """
        return self.lookup(name).value

    def resolve_text_reference(self, raw_text: str | None) -> str | None:
        """Expand ``!text/<name>`` references using this binding.

        Raises:
            IndirectionDepthError: If references do not settle within
                max_indirection passes
        """
        return resolve_text_reference(
            raw_text, self.get_text, max_indirection=self.max_indirection
        )


class TextsSet:
    """Holder of the current TextsBinding for one keyboard context.

    Example:
        >>> texts = TextsSet()
        >>> _ = texts.bind("en", MappingOverrideProvider({"en": {"label_go_key": "Go"}}))
        >>> texts.resolve_text_reference("!text/label_to_alpha_key")
        'ABC'
        >>> texts.get_text("label_go_key")
        'Go'

    Thread Safety:
        bind() calls are serialized by a lock. Readers take no lock: they
        read the current binding reference once and use that immutable
        object for the whole call.
    """

    __slots__ = ("_binding", "_config", "_lock", "_names", "_on_fallback", "_tables")

    def __init__(
        self,
        names: NameRegistry | None = None,
        tables: LocaleTableRegistry | None = None,
        *,
        config: TextsConfig | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize an unbound texts set.

        Args:
            names: Name registry (default: built-in name list)
            tables: Table registry (default: built-in tables)
            config: Pass bound and override names (default: TextsConfig())
            on_fallback: Callback invoked when a lookup reads the DEFAULT
                table because the bound table's slot is absent

        Raises:
            KeyTextConfigurationError: If a table is longer than the name list
        """
        self._names = names if names is not None else default_name_registry()
        self._tables = tables if tables is not None else default_table_registry()
        self._config = config if config is not None else TextsConfig()
        self._on_fallback = on_fallback
        self._lock = threading.Lock()
        self._binding: TextsBinding | None = None

        for tag in self._tables:
            table = self._tables.table_for(tag)
            if len(table) > len(self._names):
                raise KeyTextConfigurationError(
                    ErrorTemplate.table_too_long(tag, len(table), len(self._names))
                )

    @property
    def names(self) -> NameRegistry:
        """Name registry used by every binding of this set."""
        return self._names

    @property
    def tables(self) -> LocaleTableRegistry:
        """Table registry bindings select from."""
        return self._tables

    @property
    def config(self) -> TextsConfig:
        """Configuration of this set."""
        return self._config

    @property
    def is_bound(self) -> bool:
        """Whether bind() has been called."""
        return self._binding is not None

    @property
    def binding(self) -> TextsBinding:
        """Current binding.

        Raises:
            TextsNotBoundError: If bind() has not been called yet
        """
        binding = self._binding
        if binding is None:
            raise TextsNotBoundError(ErrorTemplate.not_bound())
        return binding

    def bind(
        self,
        locale_tag: LocaleTag,
        override_provider: OverrideProvider | None = None,
        *,
        provider_locale: LocaleTag | None = None,
    ) -> TextsBinding:
        """Bind to a locale and load its override strings.

        Args:
            locale_tag: Table tag to bind (unknown tags bind the DEFAULT table)
            override_provider: Source of override strings (None: no overrides)
            provider_locale: Locale to query the provider with. Defaults to
                ``locale_tag``, or to the system locale for the no-language
                tag ``zz``.

        Returns:
            The new binding, already published
        """
        with self._lock:
            table = self._tables.table_for(locale_tag)
            if provider_locale is None:
                provider_locale = locale_tag
                if locale_tag == NO_LANGUAGE:
                    provider_locale = get_system_locale()
                    logger.info(
                        "No-language tag %r: loading overrides for system locale %r",
                        locale_tag,
                        provider_locale,
                    )

            overrides: dict[TextName, str] = {}
            results: list[OverrideLoadResult] = []
            if override_provider is not None:
                for name in self._config.override_names:
                    result, text = self._load_override(override_provider, provider_locale, name)
                    results.append(result)
                    if text is not None:
                        overrides[name] = text

            binding = TextsBinding(
                locale_tag=locale_tag,
                names=self._names,
                table=table,
                default_table=self._tables.default_table,
                overrides=MappingProxyType(overrides),
                override_names=frozenset(self._config.override_names),
                load_summary=OverrideLoadSummary(tuple(results)),
                max_indirection=self._config.max_indirection,
                on_fallback=self._on_fallback,
            )
            self._binding = binding

        logger.debug(
            "Bound texts to %r (table %r, %d overrides)",
            locale_tag,
            table.locale_tag,
            len(overrides),
        )
        return binding

    @staticmethod
    def _load_override(
        provider: OverrideProvider, locale: LocaleTag, name: TextName
    ) -> tuple[OverrideLoadResult, str | None]:
        """Query the provider for one name and record the outcome."""
        try:
            text = provider.get_text(locale, name)
        except (LookupError, FileNotFoundError) as e:
            return OverrideLoadResult(locale, name, LoadStatus.NOT_FOUND, e), None
        except (OSError, ValueError) as e:
            logger.warning("Override provider failed for %s/%s: %s", locale, name, e)
            return OverrideLoadResult(locale, name, LoadStatus.ERROR, e), None

        if text is None:
            return OverrideLoadResult(locale, name, LoadStatus.NOT_FOUND), None
        return OverrideLoadResult(locale, name, LoadStatus.SUCCESS), text

    def get_text(self, name: TextName) -> str | None:
        """Return the raw text for ``name`` in the current binding.

        Raises:
            TextsNotBoundError: If bind() has not been called yet
            UnknownNameError: If the name is neither registered nor
                override-eligible
        """
        return self.binding.get_text(name)

    def lookup(self, name: TextName) -> TextLookup:
        """Return the raw text for ``name`` with its source."""
        return self.binding.lookup(name)

    def resolve_text_reference(self, raw_text: str | None) -> str | None:
        """Expand ``!text/<name>`` references with the current binding.

        Raises:
            TextsNotBoundError: If bind() has not been called yet
            IndirectionDepthError: If references do not settle within the
                configured pass bound
        """
        return self.binding.resolve_text_reference(raw_text)

    def __repr__(self) -> str:
        locale_tag = self._binding.locale_tag if self._binding is not None else None
        return f"TextsSet(locale_tag={locale_tag!r}, names={len(self._names)})"
