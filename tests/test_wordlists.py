"""Unit tests for word categories, word list preconditions and profile capacity."""

import pytest

import uuid_readable as ur
from uuid_readable.category import WordCategory, WordTable, get_table, list_categories
from uuid_readable.errors import (
    CategoryError,
    ContractViolation,
    WordListError,
    WordNotFoundError,
)
from uuid_readable.profile import Profile, Slot, check_profile


# Word list preconditions
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("category", list(WordCategory))
def test_word_list_has_no_duplicates(category):
    """Every category lists each word once."""
    words = get_table(category).words
    assert len(words) == len(set(words))


@pytest.mark.parametrize("category", list(WordCategory))
def test_word_list_has_no_whitespace(category):
    """Every word is a single whitespace-free token."""
    for word in get_table(category):
        assert word
        assert word.split() == [word]


@pytest.mark.parametrize("category", list(WordCategory))
def test_word_list_is_ascii(category):
    """Sentences stay plain ASCII."""
    assert all(word.isascii() for word in get_table(category))


def test_table_sizes():
    """Each list has exactly the capacity the profiles need."""
    assert len(get_table("names")) == 1 << 14
    assert len(get_table("personal_nouns")) == 1 << 13
    assert len(get_table("places")) == 1 << 13
    assert len(get_table("verbs")) == 1 << 10
    assert len(get_table("adjectives")) == 1 << 8
    assert len(get_table("animals")) == 1 << 7


# Capacity invariant
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("profile", [ur.NORMAL, ur.SHORT], ids=["normal", "short"])
def test_every_slot_fits_its_category(profile):
    """Each category slot of width w has at least 2**w words."""
    for slot in profile.slots:
        if slot.is_numeric:
            continue
        assert len(get_table(slot.category)) >= 1 << slot.width


def test_profile_shapes():
    """Normal covers the whole token, short only its leading 32 bits."""
    assert ur.NORMAL.widths == (12, 11, 14, 13, 13, 10, 12, 11, 14, 5, 6, 7)
    assert ur.NORMAL.bit_length == 128
    assert ur.NORMAL.token_count == 15
    assert ur.NORMAL.invertible

    assert ur.SHORT.widths == (6, 6, 7, 8, 5)
    assert ur.SHORT.bit_length == 32
    assert ur.SHORT.token_count == 6
    assert not ur.SHORT.invertible


def test_profile_describe():
    """describe() shows the template with placeholders."""
    assert ur.SHORT.describe() == "{names} {verbs} by {number} {adjectives} {animals}"


def test_oversized_slot_is_contract_violation():
    """A slot wider than its category can hold is rejected before use."""
    too_wide = Profile("too-wide", (Slot(8, WordCategory.ANIMALS),))
    with pytest.raises(ContractViolation):
        check_profile(too_wide)


def test_profile_over_128_bits_is_contract_violation():
    """A profile cannot consume more bits than the token has."""
    greedy = Profile("greedy", tuple(Slot(14, WordCategory.NAMES) for _ in range(10)))
    with pytest.raises(ContractViolation):
        check_profile(greedy)


@pytest.mark.parametrize("connective", ["of the", "", " with", "and\t"])
def test_multiword_connective_is_contract_violation(connective):
    """Connectives must split back into exactly one sentence token."""
    custom = Profile(
        "spaced",
        tuple(Slot(14, WordCategory.NAMES) for _ in range(9)) + (connective, Slot(2)),
    )
    with pytest.raises(ContractViolation, match="connective"):
        ur.encode("0ee001c7-12f3-4b29-a4cc-f48838b3587a", custom)


def test_custom_profile_roundtrip():
    """A custom full-width profile works through the generic encode/decode."""
    custom = Profile(
        "custom",
        tuple(Slot(14, WordCategory.NAMES) for _ in range(9)) + ("with", Slot(2)),
    )
    token = "0ee001c7-12f3-4b29-a4cc-f48838b3587a"
    sentence = ur.encode(token, custom)
    assert sentence.split()[9] == "with"
    assert str(ur.decode(sentence, custom)) == token


def test_list_profiles():
    """Built-in profiles are listed by name."""
    assert ur.list_profiles() == ["normal", "short"]
    assert ur.get_profile("NORMAL") is ur.NORMAL


# Table lookups
# ---------------------------------------------------------------------------


def test_index_of_inverts_word_at():
    """index_of and word_at are inverse lookups."""
    table = get_table(WordCategory.VERBS)
    for index in (0, 255, 256, 1023):
        assert table.index_of(table.word_at(index)) == index


def test_index_of_missing_word():
    """Missing words raise WordNotFoundError with the category."""
    with pytest.raises(WordNotFoundError) as exc:
        get_table("animals").index_of("unicorns")
    assert exc.value.category == "animals"
    assert exc.value.position is None


def test_word_at_out_of_range():
    """Indexing past the table is a contract violation."""
    table = get_table("animals")
    with pytest.raises(ContractViolation):
        table.word_at(len(table))


def test_tables_are_shared():
    """Each category table is built once and shared."""
    assert get_table("names") is get_table(WordCategory.NAMES)
    assert get_table("personal-nouns") is get_table(WordCategory.PERSONAL_NOUNS)


def test_unknown_category():
    """Unknown category names raise CategoryError."""
    with pytest.raises(CategoryError):
        get_table("colours")
    assert "names" in list_categories()


def test_table_rejects_duplicates():
    """Duplicate words cannot form a table."""
    with pytest.raises(WordListError):
        WordTable(WordCategory.ANIMALS, ["cats", "dogs", "cats"])


@pytest.mark.parametrize("bad", ["sea lions", "", "tab\tword"])
def test_table_rejects_whitespace(bad):
    """Empty words and words with whitespace cannot form a table."""
    with pytest.raises(WordListError):
        WordTable(WordCategory.ANIMALS, ["cats", bad])
