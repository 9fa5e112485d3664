"""Pass counting for bounded reference expansion.

Reference expansion runs as an explicit loop: every pass that substitutes at
least one reference forces another pass over the result. IndirectionGuard
counts those passes and fails fast once the bound is exceeded, so cyclic or
runaway table data surfaces as an error instead of an endless loop.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from keytextengine.constants import MAX_STRING_REFERENCE_INDIRECTION
from keytextengine.diagnostics import ErrorTemplate, IndirectionDepthError

__all__ = ["IndirectionGuard"]


@dataclass(slots=True)
class IndirectionGuard:
    """Counter for expansion passes with a hard upper bound.

    Usage in resolution:
        guard = IndirectionGuard()
        while True:
            guard.enter_pass(text)
            ...

    Mutability Note:
        Intentionally mutable (not frozen=True); passes is incremented on
        each enter_pass() call. Create one guard per resolution.

    Attributes:
        max_passes: Maximum number of passes allowed
        passes: Passes entered so far
    """

    max_passes: int = MAX_STRING_REFERENCE_INDIRECTION
    passes: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Reject a non-positive bound.

        Raises:
            ValueError: If max_passes < 1
        """
        if self.max_passes < 1:
            msg = f"max_passes must be positive, got {self.max_passes}"
            raise ValueError(msg)

    def enter_pass(self, text: str) -> None:
        """Count a new pass over ``text``.

        Validates the bound BEFORE incrementing, so a failed call leaves
        passes unchanged.

        Args:
            text: Text the new pass will scan (carried in the error)

        Raises:
            IndirectionDepthError: If max_passes passes were already made
        """
        if self.passes >= self.max_passes:
            raise IndirectionDepthError(
                ErrorTemplate.indirection_depth_exceeded(text, self.max_passes),
                text=text,
                max_indirection=self.max_passes,
            )
        self.passes += 1

    def is_exhausted(self) -> bool:
        """Check if no further pass is allowed."""
        return self.passes >= self.max_passes

    def reset(self) -> None:
        """Reset the counter (useful for reuse across resolutions)."""
        self.passes = 0
