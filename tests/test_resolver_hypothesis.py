"""Property-based tests for resolve_text_reference().

Properties:
- Text without references is returned unchanged (escapes included)
- References to literal texts are replaced in place, escapes copied verbatim
- Acyclic chains resolve iff they fit in the pass bound
- Cycles always raise IndirectionDepthError

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from keytextengine.constants import MAX_STRING_REFERENCE_INDIRECTION, PREFIX_TEXT
from keytextengine.diagnostics import IndirectionDepthError
from keytextengine.runtime import resolve_text_reference
from tests.strategies import (
    join_template,
    literal_texts,
    reference_chains,
    template_parts,
    text_names,
)

_NAMES = ("a", "ab", "b_1", "quotes", "x9")


class TestUnchangedText:
    """Text with no live reference comes back unchanged."""

    @given(text=literal_texts(min_size=1))
    def test_literal_text_unchanged(self, text: str) -> None:
        """Literal text is returned as is."""
        assert resolve_text_reference(text, {}.get) == text

    @given(parts=template_parts(names=()))
    def test_escapes_without_references_unchanged(
        self, parts: list[tuple[str, str]]
    ) -> None:
        """Backslash escapes survive when nothing is substituted."""
        template = join_template(parts)
        assert resolve_text_reference(template, {}.get) == (template or None)

    @given(text=literal_texts(), name=text_names())
    def test_escaped_marker_never_expanded(self, text: str, name: str) -> None:
        """An escaped marker is not a reference."""
        template = f"{text}\\{PREFIX_TEXT}{name}"
        assert resolve_text_reference(template, {name: "X"}.get) == template


class TestSubstitution:
    """References to literal texts."""

    @given(
        parts=template_parts(names=_NAMES),
        values=st.tuples(*(literal_texts(max_size=6) for _ in _NAMES)),
    )
    def test_references_replaced_in_place(
        self, parts: list[tuple[str, str]], values: tuple[str, ...]
    ) -> None:
        """Every reference is replaced; literals and escapes are kept."""
        texts = dict(zip(_NAMES, values, strict=True))
        expected = "".join(
            texts[text] + "," if kind == "ref" else text for kind, text in parts
        )
        event(f"has_refs={any(kind == 'ref' for kind, _ in parts)}")

        result = resolve_text_reference(join_template(parts), texts.get)

        assert result == (expected or None)

    @given(
        parts=template_parts(names=_NAMES),
        values=st.tuples(*(literal_texts(max_size=6) for _ in _NAMES)),
    )
    def test_resolution_is_idempotent(
        self, parts: list[tuple[str, str]], values: tuple[str, ...]
    ) -> None:
        """Resolved text has no live reference left."""
        texts = dict(zip(_NAMES, values, strict=True))
        once = resolve_text_reference(join_template(parts), texts.get)

        assert resolve_text_reference(once, texts.get) == once


class TestIndirectionBound:
    """Chains and cycles against the pass bound."""

    @given(data=st.data(), depth=st.integers(min_value=1, max_value=15))
    def test_chain_resolves_iff_within_bound(self, data: st.DataObject, depth: int) -> None:
        """A chain of depth d needs d + 1 passes."""
        texts, literal = data.draw(reference_chains(depth))
        fits = depth + 1 <= MAX_STRING_REFERENCE_INDIRECTION
        event(f"chain_fits={fits}")

        if fits:
            assert resolve_text_reference("!text/n0", texts.get) == literal
        else:
            with pytest.raises(IndirectionDepthError):
                resolve_text_reference("!text/n0", texts.get)

    @given(size=st.integers(min_value=1, max_value=6), prefix=literal_texts(max_size=3))
    def test_cycle_always_raises(self, size: int, prefix: str) -> None:
        """A ring of references never settles."""
        names = [f"c{i}" for i in range(size)]
        texts = {
            name: prefix + PREFIX_TEXT + names[(i + 1) % size] for i, name in enumerate(names)
        }

        with pytest.raises(IndirectionDepthError) as exc_info:
            resolve_text_reference("!text/c0", texts.get)

        assert exc_info.value.max_indirection == MAX_STRING_REFERENCE_INDIRECTION

    @given(
        bound=st.integers(min_value=1, max_value=12),
        depth=st.integers(min_value=1, max_value=12),
    )
    def test_custom_bound(self, bound: int, depth: int) -> None:
        """max_indirection applies the same d + 1 rule."""
        texts = {f"n{i}": f"!text/n{i + 1}" for i in range(depth - 1)}
        texts[f"n{depth - 1}"] = "END"

        if depth + 1 <= bound:
            assert resolve_text_reference("!text/n0", texts.get, max_indirection=bound) == "END"
        else:
            with pytest.raises(IndirectionDepthError):
                resolve_text_reference("!text/n0", texts.get, max_indirection=bound)
