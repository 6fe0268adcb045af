import typing as tp

import pytest
from pydantic import ValidationError
from seqfn.core.types import NOT_FOUND, Entry, R, T, U
from seqfn.functional import sequences


def test_not_found_sentinel():
    assert NOT_FOUND == -1


def test_entry_keeps_value_identity():
    payload = object()
    assert Entry(index=2, value=payload).value is payload


def test_entry_rejects_negative_index():
    with pytest.raises(ValidationError):
        Entry(index=-1, value=1)


def test_entry_requires_value():
    with pytest.raises(ValidationError):
        Entry(index=0)


def test_callback_aliases_bind_element_types():
    hints = tp.get_type_hints(sequences.filter)
    assert tp.get_args(hints["predicate"])[0] == [T, int]
    hints = tp.get_type_hints(sequences.map)
    assert tp.get_args(hints["transform"]) == ([T, int], U)
    hints = tp.get_type_hints(sequences.reduce)
    assert tp.get_args(hints["accumulator"]) == ([R, T, int], R)
    assert hints["initial"] is R
