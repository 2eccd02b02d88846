import pytest

from suspect_index import SuspectIndex


@pytest.fixture()
def index():
    return SuspectIndex(10)


def test_hash_sums_character_codes_modulo_bucket_count(index):
    assert index.hash("ab") == (97 + 98) % 10
    assert index.hash("A maça") == sum(ord(c) for c in "A maça") % 10


def test_hash_of_empty_string_is_bucket_zero(index):
    assert index.hash("") == 0


def test_hash_is_deterministic(index):
    assert index.hash("Uma luva de seda preta no chao.") == index.hash(
        "Uma luva de seda preta no chao."
    )


def test_lookup_returns_registered_suspect(index):
    index.insert("O cofre estava aberto e vazio.", "Empregado")
    index.insert("Havia um forte cheiro de cigarro barato.", "Mordomo")

    assert index.lookup("O cofre estava aberto e vazio.") == "Empregado"
    assert index.lookup("Havia um forte cheiro de cigarro barato.") == "Mordomo"


def test_lookup_of_unregistered_text_is_none(index):
    index.insert("registered", "Chef")
    assert index.lookup("never registered") is None
    assert index.lookup("") is None


def test_lookup_is_case_sensitive(index):
    index.insert("Clue", "Chef")
    assert index.lookup("clue") is None


def test_colliding_keys_are_chained_head_first(index):
    # "a" (97) and "k" (107) share bucket 7.
    index.insert("a", "Senhora")
    index.insert("k", "Chef")

    assert index.chain(7) == ["k", "a"]
    assert index.lookup("a") == "Senhora"
    assert index.lookup("k") == "Chef"


def test_reinserting_a_clue_shadows_the_older_entry(index):
    index.insert("x", "Senhora")
    index.insert("x", "Mordomo")

    assert index.lookup("x") == "Mordomo"
    assert len(index) == 2
    assert index.chain(index.hash("x")) == ["x", "x"]


def test_suspects_are_distinct(index):
    index.insert("one", "Chef")
    index.insert("two", "Chef")
    index.insert("three", "Senhora")
    assert sorted(index.suspects()) == ["Chef", "Senhora"]


def test_teardown_releases_everything_and_is_repeatable(index):
    index.insert("a", "Senhora")
    index.insert("k", "Chef")

    index.teardown()
    index.teardown()

    assert len(index) == 0
    assert index.lookup("a") is None
    assert "a" not in index


def test_bucket_count_must_be_positive():
    with pytest.raises(ValueError):
        SuspectIndex(0)
