import pytest

from molecules.errors import DuplicateKeyError
from molecules.library import DerivedMapping, DerivedSequence, derive_grouped_mapping, derive_mapping, derive_sequence

WORDS = ("apple", "kiwi", "banana", "fig", "cherry")


def _long_upper(word):
    return word.upper() if len(word) > 4 else None


def test_derive_sequence_filters_and_keeps_order():
    result = derive_sequence(WORDS, _long_upper)
    assert isinstance(result, DerivedSequence)
    assert list(result) == ["APPLE", "BANANA", "CHERRY"]
    assert result[1] == "BANANA"
    assert len(result) == 3


def test_derive_sequence_is_deterministic():
    assert derive_sequence(WORDS, _long_upper) == derive_sequence(WORDS, _long_upper)


def test_derive_sequence_keeps_falsy_values():
    assert list(derive_sequence([0, 1, 2], lambda n: n - 1 if n else 0)) == [0, 0, 1]


def test_derive_mapping_uses_value_key_pairs():
    result = derive_mapping(WORDS, lambda word: (len(word), word[0]) if word != "cherry" else None)
    assert isinstance(result, DerivedMapping)
    assert dict(result) == {"a": 5, "k": 4, "b": 6, "f": 3}
    assert list(result) == ["a", "k", "b", "f"]


def test_derive_mapping_rejects_repeated_keys():
    with pytest.raises(DuplicateKeyError) as excinfo:
        derive_mapping(WORDS, lambda word: (word, len(word)))
    # banana and cherry both have six letters
    assert excinfo.value.key == 6
    assert excinfo.value.first == "banana"
    assert excinfo.value.second == "cherry"


def test_collections_are_read_only():
    sequence = derive_sequence(WORDS, _long_upper)
    mapping = derive_mapping(WORDS, lambda word: (word, word))
    with pytest.raises(TypeError):
        sequence[0] = "x"
    with pytest.raises(TypeError):
        mapping["apple"] = "x"


def test_derive_grouped_mapping_collects_shared_keys():
    result = derive_grouped_mapping(WORDS, lambda word: (word, len(word)) if word != "fig" else None)
    assert isinstance(result, DerivedMapping)
    assert dict(result) == {5: ("apple",), 4: ("kiwi",), 6: ("banana", "cherry")}
