"""Configuration for TextsSet.

Provides a single frozen dataclass that encapsulates the tunable parameters
of a TextsSet: the expansion pass bound and the list of names whose texts
come from the override provider.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from keytextengine.constants import MAX_STRING_REFERENCE_INDIRECTION
from keytextengine.core.name_validation import is_valid_name
from keytextengine.tables.builtin_names import OVERRIDE_NAMES

__all__ = ["TextsConfig"]


@dataclass(frozen=True, slots=True)
class TextsConfig:
    """Immutable configuration for TextsSet.

    All fields have sensible defaults; constructing ``TextsConfig()`` with no
    arguments reproduces the built-in keyboard behavior.

    Attributes:
        max_indirection: Maximum scan passes per resolve_text_reference()
            call (default: 10).
        override_names: Names queried from the override provider at bind
            time (default: the built-in action-key labels).

    Example:
        >>> config = TextsConfig(override_names=("label_go_key",))
        >>> texts = TextsSet(config=config)
    """

    max_indirection: int = MAX_STRING_REFERENCE_INDIRECTION
    override_names: tuple[str, ...] = OVERRIDE_NAMES

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_indirection is not positive or an override
                name is not a valid text name
        """
        if self.max_indirection <= 0:
            msg = "max_indirection must be positive"
            raise ValueError(msg)
        object.__setattr__(self, "override_names", tuple(self.override_names))
        for name in self.override_names:
            if not is_valid_name(name):
                msg = f"Invalid override name: {name!r}"
                raise ValueError(msg)
