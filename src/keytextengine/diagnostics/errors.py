"""KeyText exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Taxonomy:
    Configuration errors are data or build defects: a duplicate or malformed
    name in the static list, an unknown name, a table that does not line up
    with the name list, or a reference chain that never settles. They abort
    the operation. Soft misses (no text for a name) are not exceptions at all;
    lookups return None.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class KeyTextError(Exception):
    """Base exception for all KeyTextEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize KeyTextError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class KeyTextConfigurationError(KeyTextError):
    """Static data defect detected at build or lookup time.

    Not recoverable at runtime: fix the name list or the tables.
    """


class DuplicateNameError(KeyTextConfigurationError):
    """Same name registered twice in a NameRegistry.

    Attributes:
        name: The duplicated name
    """

    def __init__(self, message: str | Diagnostic, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class InvalidNameError(KeyTextConfigurationError):
    """Name does not match [a-z_0-9]+.

    Attributes:
        name: The rejected name
    """

    def __init__(self, message: str | Diagnostic, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class UnknownNameError(KeyTextConfigurationError, LookupError):
    """Lookup of a name the registry does not know.

    Also a LookupError so callers probing names can catch it generically.

    Attributes:
        name: The unregistered name
    """

    def __init__(self, message: str | Diagnostic, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class IndirectionDepthError(KeyTextConfigurationError):
    """Reference expansion exceeded the pass bound.

    Raised by resolve_text_reference() when text keeps producing references
    after the maximum number of passes, which means a cycle or a chain that
    is too deep in the table data.

    Attributes:
        text: Partially expanded text when the bound was hit
        max_indirection: The pass bound that was exceeded
    """

    def __init__(
        self, message: str | Diagnostic, *, text: str, max_indirection: int
    ) -> None:
        super().__init__(message)
        self.text = text
        self.max_indirection = max_indirection


class TextsNotBoundError(KeyTextError):
    """Lookup on a TextsSet that has never been bound to a locale."""
