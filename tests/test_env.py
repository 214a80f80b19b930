import pytest

from kuttl.env import expand, expand_with_map


@pytest.fixture(autouse=True)
def _environment(monkeypatch):
    monkeypatch.setenv("KUTTL_TEST_123", "hello")
    for name in ("DOES_NOT_EXIST_1234", "EXPAND_ME", "NOT_PROVIDED"):
        monkeypatch.delenv(name, raising=False)


def test_expand_with_map():
    result = expand_with_map(
        "$KUTTL_TEST_123 $$ $DOES_NOT_EXIST_1234 ${EXPAND_ME}",
        {"EXPAND_ME": "world"},
    )
    assert result == "hello $  world"


@pytest.mark.parametrize(
    "text, want",
    [
        ("test $$", "test $"),
        ("$KUTTL_TEST_123 $$", "hello $"),
        ("$KUTTL_TEST_123 $$ ${NOT_PROVIDED}", "hello $ "),
    ],
)
def test_expand(text, want):
    assert expand(text) == want


def test_map_overrides_environment():
    assert expand_with_map("$KUTTL_TEST_123", {"KUTTL_TEST_123": "bye"}) == "bye"


def test_trailing_dollar_is_kept():
    assert expand("cost$") == "cost$"


def test_empty_braces_are_dropped():
    assert expand("a${}b") == "ab"


def test_unclosed_brace_drops_only_prefix():
    assert expand("a ${KUTTL_TEST_123") == "a KUTTL_TEST_123"


def test_text_without_references_is_unchanged():
    assert expand("plain text") == "plain text"