import pytest

from algodrills.dynamic import (
    change,
    climb_stairs,
    coin_change,
    exist,
    find_length,
    longest_common_subsequence,
    longest_palindrome,
)


def _board():
    return [
        ["A", "B", "C", "E"],
        ["S", "F", "C", "S"],
        ["A", "D", "E", "E"],
    ]


def test_change_source_case():
    assert change(5, [1, 2, 5]) == 4


def test_change_zero_amount():
    assert change(0, [1, 2]) == 1


def test_change_impossible():
    assert change(3, [2]) == 0


def test_change_negative_amount_raises():
    with pytest.raises(ValueError):
        change(-1, [1])


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 2), (3, 3), (7, 21)])
def test_climb_stairs(n, expected):
    assert climb_stairs(n) == expected


def test_coin_change_source_case():
    assert coin_change([1, 2, 3, 3, 9], 10) == 2


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_zero_amount():
    assert coin_change([1], 0) == 0


def test_coin_change_negative_coin_raises():
    with pytest.raises(ValueError):
        coin_change([-1], 4)


def test_find_length_source_case():
    assert find_length([2, 3, 4, 1], [1, 2, 3, 4]) == 3


def test_find_length_example():
    assert find_length([1, 2, 3, 2, 1], [3, 2, 1, 4, 7]) == 3


def test_find_length_no_common():
    assert find_length([1, 2], [3, 4]) == 0


@pytest.mark.parametrize(
    "word, expected", [("ABCCED", True), ("SEE", True), ("ABCB", False)]
)
def test_exist_source_cases(word, expected):
    assert exist(_board(), word) is expected


def test_exist_leaves_board_untouched():
    board = _board()
    exist(board, "ABCCED")
    assert board == _board()


def test_exist_empty_board():
    assert exist([], "A") is False


def test_longest_common_subsequence_source_case():
    assert longest_common_subsequence("abc", "acb") == 2


def test_longest_common_subsequence_empty():
    assert longest_common_subsequence("", "abc") == 0


def test_longest_palindrome_source_case():
    assert longest_palindrome("abaabbba") == "abbba"


def test_longest_palindrome_picks_last_of_equal_length():
    assert longest_palindrome("babad") == "aba"


@pytest.mark.parametrize("text", ["", "a"])
def test_longest_palindrome_short(text):
    assert longest_palindrome(text) == text


def test_longest_palindrome_result_is_palindrome_substring():
    text = "forgeeksskeegfor"
    result = longest_palindrome(text)
    assert result == "geeksskeeg"
    assert result in text
    assert result == result[::-1]