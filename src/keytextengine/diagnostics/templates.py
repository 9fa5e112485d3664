"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from keytextengine.constants import PREFIX_TEXT

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def duplicate_name(name: str, first_id: int, second_id: int) -> Diagnostic:
        """Name registered twice in the static name list.

        Args:
            name: The duplicated name
            first_id: Position of the first registration
            second_id: Position of the duplicate

        Returns:
            Diagnostic for DUPLICATE_NAME
        """
        msg = f"Duplicate text name '{name}' at positions {first_id} and {second_id}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_NAME,
            message=msg,
            hint="Names must be unique; remove or rename the later entry",
            name=name,
        )

    @staticmethod
    def invalid_name(name: str) -> Diagnostic:
        """Name does not match [a-z_0-9]+.

        Args:
            name: The rejected name

        Returns:
            Diagnostic for INVALID_NAME
        """
        msg = f"Invalid text name {name!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NAME,
            message=msg,
            hint="Names consist of lowercase ASCII letters, digits and underscores",
            name=name,
        )

    @staticmethod
    def unknown_name(name: str) -> Diagnostic:
        """Lookup of a name that is not in the registry.

        Args:
            name: The unregistered name

        Returns:
            Diagnostic for UNKNOWN_NAME
        """
        msg = f"Text name '{name}' is not registered"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_NAME,
            message=msg,
            hint="Add the name to the name list or fix the reference",
            name=name,
        )

    @staticmethod
    def default_table_missing(default_tag: str) -> Diagnostic:
        """Table registry built without its default table.

        Args:
            default_tag: The tag the default table was expected under

        Returns:
            Diagnostic for DEFAULT_TABLE_MISSING
        """
        msg = f"No table registered under default tag '{default_tag}'"
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_TABLE_MISSING,
            message=msg,
            hint="Every table registry needs a default table to fall back to",
            locale_tag=default_tag,
        )

    @staticmethod
    def table_too_long(locale_tag: str, length: int, size: int) -> Diagnostic:
        """Locale table has more slots than there are names.

        Args:
            locale_tag: Tag of the offending table
            length: Number of slots in the table
            size: Number of registered names

        Returns:
            Diagnostic for TABLE_TOO_LONG
        """
        msg = f"Table '{locale_tag}' has {length} slots but only {size} names are registered"
        return Diagnostic(
            code=DiagnosticCode.TABLE_TOO_LONG,
            message=msg,
            hint="Tables must be aligned to the name list; append names before slots",
            locale_tag=locale_tag,
        )

    @staticmethod
    def indirection_depth_exceeded(text: str, max_indirection: int) -> Diagnostic:
        """Reference expansion did not settle within the pass bound.

        Args:
            text: Text still containing references when the bound was hit
            max_indirection: The pass bound

        Returns:
            Diagnostic for INDIRECTION_DEPTH_EXCEEDED
        """
        msg = f"Too many {PREFIX_TEXT}name indirection: {text}"
        return Diagnostic(
            code=DiagnosticCode.INDIRECTION_DEPTH_EXCEEDED,
            message=msg,
            hint=(
                f"References must settle within {max_indirection} passes; "
                "look for a reference cycle in the locale table"
            ),
            text=text,
        )

    @staticmethod
    def not_bound() -> Diagnostic:
        """Text lookup before any locale was bound.

        Returns:
            Diagnostic for NOT_BOUND
        """
        return Diagnostic(
            code=DiagnosticCode.NOT_BOUND,
            message="No locale bound to this texts set",
            hint="Call bind() with a locale tag before looking up texts",
        )
