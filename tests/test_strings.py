import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.strings import is_palindrome, is_valid_parentheses


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        (" ", True),
        ("", True),
        ("0P", False),
        ("No 'x' in Nixon", True),
    ],
)
def test_is_palindrome_examples(text, expected):
    assert is_palindrome(text) is expected


@given(st.text(alphabet="abcXYZ019 ,.!-", max_size=30))
def test_mirrored_text_is_palindrome(text):
    assert is_palindrome(text + text[::-1])
    assert is_palindrome(text + "?" + text[::-1])


@given(st.text(alphabet="abcdef", max_size=20))
def test_palindrome_ignores_case_and_punctuation(text):
    decorated = ", ".join(text.upper())
    assert is_palindrome(decorated) is is_palindrome(text)


def test_non_ascii_letters_are_ignored():
    assert is_palindrome("aé b a")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("{[]}", True),
        ("", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("a", False),
    ],
)
def test_is_valid_parentheses_examples(text, expected):
    assert is_valid_parentheses(text) is expected


_balanced = st.recursive(
    st.just(""),
    lambda inner: st.one_of(
        st.tuples(st.sampled_from(["()", "[]", "{}"]), inner).map(lambda p: p[0][0] + p[1] + p[0][1]),
        st.tuples(inner, inner).map(lambda p: p[0] + p[1]),
    ),
    max_leaves=10,
)


@given(_balanced)
def test_balanced_strings_are_valid(text):
    assert is_valid_parentheses(text)


@given(_balanced, st.sampled_from(")]}"))
def test_extra_closer_is_invalid(text, closer):
    assert not is_valid_parentheses(text + closer)


@given(_balanced, st.sampled_from("([{"))
def test_unclosed_opener_is_invalid(text, opener):
    assert not is_valid_parentheses(opener + text)