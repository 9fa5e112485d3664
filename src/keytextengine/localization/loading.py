"""Override load tracking and fallback observability.

Components:
    OverrideLoadResult - Immutable result of one provider query at bind time
    OverrideLoadSummary - Immutable aggregate of all queries for one binding
    FallbackInfo - Immutable record of a DEFAULT-table fallback event

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from keytextengine.enums import LoadStatus
from keytextengine.localization.types import LocaleTag, TextName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Load result types
    "OverrideLoadResult",
    "OverrideLoadSummary",
    # Fallback observability
    "FallbackInfo",
]


@dataclass(frozen=True, slots=True)
class OverrideLoadResult:
    """Result of querying the override provider for one name.

    Attributes:
        locale: Locale the provider was queried with
        name: Override-eligible text name
        status: Load status (success, not_found, error)
        error: Exception if status is not SUCCESS, None otherwise
    """

    locale: LocaleTag
    name: TextName
    status: LoadStatus
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the provider returned a string."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the provider had no string for the name."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the provider failed while reading its source."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class OverrideLoadSummary:
    """Immutable aggregate of override queries made by one bind() call.

    A failed query is not an error for the binding: the name simply falls
    through to the tables. The summary makes those misses visible.

    Attributes:
        results: All individual query results (immutable tuple)

    Example:
        >>> binding = texts.bind("hi", provider)
        >>> summary = binding.load_summary
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.locale}/{result.name}: {result.error}")
    """

    results: tuple[OverrideLoadResult, ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"OverrideLoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of provider queries."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of names the provider supplied."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of names the provider did not have."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of failed queries."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[OverrideLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[OverrideLoadResult, ...]:
        """Get all results where the name was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[OverrideLoadResult, ...]:
        """Get all successful results."""
        return tuple(r for r in self.results if r.is_success)

    @property
    def has_errors(self) -> bool:
        """Check if any query failed with an error."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every override-eligible name was supplied."""
        return self.errors == 0 and self.not_found == 0


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a DEFAULT-table fallback event.

    Provided to the on_fallback callback when a lookup finds no override and
    an absent slot in the bound locale's table, and therefore reads the
    DEFAULT table.

    Attributes:
        locale_tag: Tag of the bound table
        name: Text name that fell back

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.name} missing in {info.locale_tag}")
        >>> texts = TextsSet(on_fallback=log_fallback)
    """

    locale_tag: LocaleTag
    name: TextName
