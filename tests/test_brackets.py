import pytest

from algodrills.brackets import is_valid, longest_valid_parentheses


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()(){()}", True),
        ("()", True),
        ("{[]}", True),
        ("", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("(a)", False),
    ],
)
def test_is_valid(text, expected):
    assert is_valid(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (")()", 2),
        ("(()", 2),
        (")()())", 4),
        ("", 0),
        ("((((", 0),
        ("()(())", 6),
    ],
)
def test_longest_valid_parentheses(text, expected):
    assert longest_valid_parentheses(text) == expected