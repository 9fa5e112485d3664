"""Texts fuzzer - arbitrary table data through bind and resolution.

Builds random name lists and locale tables whose texts reference each other
freely (cycles included) and checks that resolution either settles or fails
with IndirectionDepthError, never with anything else, and that settled text
holds no live reference.

Run with:
    pytest -m fuzz tests/fuzz/test_texts_fuzz.py

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from keytextengine.diagnostics import IndirectionDepthError
from keytextengine.runtime import TextsConfig, TextsSet
from keytextengine.tables import LocaleTableRegistry, NameRegistry
from tests.strategies import literal_texts, templates, text_names

# Mark entire module as fuzz tests
pytestmark = pytest.mark.fuzz


@st.composite
def _text_data(draw: st.DrawFn) -> tuple[list[str], dict[str, list[str | None]]]:
    names = draw(st.lists(text_names(max_size=8), min_size=1, max_size=8, unique=True))
    slot = st.one_of(templates(names, max_parts=4), literal_texts(max_size=6))
    default = draw(st.lists(slot, min_size=len(names), max_size=len(names)))
    locale = draw(st.lists(st.one_of(st.none(), slot), max_size=len(names)))
    return names, {"DEFAULT": default, "xx": locale}


class TestResolutionFuzz:
    """Random tables never break resolution."""

    @given(data=_text_data(), bound=st.integers(min_value=1, max_value=12))
    @settings(max_examples=1000, deadline=None)
    def test_settles_or_raises_depth_error(
        self, data: tuple[list[str], dict[str, list[str | None]]], bound: int
    ) -> None:
        names, tables = data
        texts = TextsSet(
            NameRegistry(names),
            LocaleTableRegistry(tables, size=len(names)),
            config=TextsConfig(max_indirection=bound, override_names=()),
        )
        texts.bind("xx")

        for name in names:
            try:
                result = texts.resolve_text_reference(f"!text/{name}")
            except IndirectionDepthError:
                event("outcome=depth_error")
                continue
            event("outcome=settled")
            if result is not None:
                assert texts.resolve_text_reference(result) == result
