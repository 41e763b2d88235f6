from spellsuggest.spellcheck.engine import (
    DistanceEngine,
    distance,
    distance_matrix,
    is_vowel,
    substitution_cost,
)


def test_distance_identity_is_zero() -> None:
    for word in ["", "a", "hello", "Mississippi", "123-abc!"]:
        assert distance(word, word) == 0


def test_distance_against_empty_costs_two_per_character() -> None:
    for word in ["a", "abc", "queue", "x1 y2"]:
        assert distance("", word) == 2 * len(word)
        assert distance(word, "") == 2 * len(word)


def test_single_character_costs() -> None:
    assert distance("a", "e") == 1
    assert distance("b", "c") == 1
    assert distance("a", "b") == 3
    assert distance("b", "a") == 3
    assert distance("a", "a") == 0


def test_vowel_classification_ignores_case() -> None:
    assert is_vowel("A")
    assert is_vowel("u")
    assert not is_vowel("y")
    assert not is_vowel("7")
    assert not is_vowel("")
    assert distance("A", "e") == 1
    assert distance("A", "a") == 1
    assert distance("E", "b") == 3


def test_non_letters_count_as_consonants() -> None:
    assert substitution_cost("!", "?") == 1
    assert substitution_cost("1", "b") == 1
    assert substitution_cost("a", "1") == 3
    assert substitution_cost(" ", "o") == 3


def test_cheaper_of_cross_class_substitution_and_gap_pair() -> None:
    # One cross-class substitution (3) beats a delete plus an insert (4).
    assert distance("bat", "bbt") == 3
    assert distance("ab", "ba") == 4


def test_known_multi_character_distances() -> None:
    assert distance("kitten", "sitting") == 4
    assert distance("hwllo", "hello") == 3
    assert distance("hwllo", "hallo") == 3
    assert distance("hwllo", "jello") == 4
    assert distance("hwllo", "world") == 7


def test_distance_is_symmetric_and_bounded() -> None:
    pairs = [("hello", "world"), ("spell", "spelling"), ("", "abc"), ("aeiou", "bcdfg")]
    for a, b in pairs:
        assert distance(a, b) == distance(b, a)
        assert 0 <= distance(a, b) <= 2 * (len(a) + len(b))


def test_distance_matrix_base_cases_and_result() -> None:
    dp = distance_matrix("cat", "cart")

    assert len(dp) == 4
    assert all(len(row) == 5 for row in dp)
    assert [row[0] for row in dp] == [0, 2, 4, 6]
    assert dp[0] == [0, 2, 4, 6, 8]
    assert dp[-1][-1] == distance("cat", "cart") == 2


def test_rolling_rows_agree_with_full_table() -> None:
    engine = DistanceEngine()
    words = ["", "a", "spell", "spelling", "speling", "Apple", "orange", "xyz?"]
    for a in words:
        for b in words:
            assert engine.distance(a, b) == engine.distance_matrix(a, b)[-1][-1]
