import random

import pytest

from codec.constants import ALPHABET, MIN_SUBSTITUTE, MAX_SUBSTITUTE
from codec.table import SubstitutionTable, generate_substitution_table
from utils.exceptions import InvalidTableError, TableGenerationError


class _StuckRandom:
    """Random source that always draws the same number."""

    def randint(self, a, b):
        return a


def test_generated_table_covers_alphabet_with_distinct_values():
    table = generate_substitution_table()
    mapping = table.to_dict()

    assert len(table) == 26
    assert set(mapping) == set(ALPHABET)
    assert len(set(mapping.values())) == 26
    assert all(MIN_SUBSTITUTE <= n <= MAX_SUBSTITUTE for n in mapping.values())
    assert table.is_complete


def test_generated_tables_differ_between_calls():
    tables = {generate_substitution_table() for _ in range(5)}
    assert len(tables) > 1


def test_seeded_generation_is_reproducible():
    first = generate_substitution_table(random.Random(1234))
    second = generate_substitution_table(random.Random(1234))
    assert first == second


def test_stuck_random_source_fails_instead_of_looping():
    with pytest.raises(TableGenerationError, match="B"):
        generate_substitution_table(_StuckRandom())


def test_partial_table_is_allowed():
    table = SubstitutionTable({"A": 5, "B": 12})
    assert not table.is_complete
    assert table.number_for("A") == 5
    assert table.letter_for(12) == "B"
    assert table.number_for("C") is None
    assert table.letter_for(99) is None


@pytest.mark.parametrize("mapping", [
    {"a": 5},
    {"AB": 5},
    {"1": 5},
    {"A": 0},
    {"A": 101},
    {"A": "5"},
    {"A": True},
    {"A": 5, "B": 5},
])
def test_invalid_tables_are_rejected(mapping):
    with pytest.raises(InvalidTableError):
        SubstitutionTable(mapping)


def test_table_is_read_only():
    table = SubstitutionTable({"A": 5})
    with pytest.raises(TypeError):
        table.forward["A"] = 6


def test_json_form_is_compact_and_parses_back():
    table = SubstitutionTable({"A": 5, "B": 12})
    assert table.to_json() == '{"A":5,"B":12}'
    assert SubstitutionTable.from_json(table.to_json()) == table


@pytest.mark.parametrize("text", ["not json", "[1, 2]", '{"A": 5, "B": 5}'])
def test_from_json_rejects_bad_payloads(text):
    with pytest.raises(InvalidTableError):
        SubstitutionTable.from_json(text)
