import pytest

from kuttl.version import clean, from_github_version, get, parse


@pytest.mark.parametrize(
    "actual, expected, val",
    [
        ("1.5", "1.4", -1),
        ("1.5", "1.5", 0),
        ("1.5", "1.6", 1),
        ("1.5.8", "1.5.0", 0),
    ],
)
def test_compare_major_minor(actual, expected, val):
    assert parse(expected).compare_major_minor(parse(actual)) == val


@pytest.mark.parametrize(
    "actual, expected",
    [("1.0.0", "1.0.0"), ("v1.0.0", "1.0.0"), ("v1.0", "1.0")],
)
def test_clean(actual, expected):
    assert clean(actual) == expected


def test_parse_fills_missing_parts():
    version = parse("1.5")
    assert (version.major, version.minor, version.patch) == (1, 5, 0)
    assert str(version) == "1.5.0"


def test_parse_prerelease_and_metadata():
    version = parse("2.3.4-beta.1+build.7")
    assert version.prerelease == "beta.1"
    assert version.metadata == "build.7"
    assert str(version) == "2.3.4-beta.1+build.7"


@pytest.mark.parametrize("text", ["abc", "1.2.3.4", "", "1.2.3-01"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse(text)


def test_from_github_version():
    version = from_github_version("v1.5.2")
    assert (version.major, version.minor, version.patch) == (1, 5, 2)


def test_get_uses_dev_version_env(monkeypatch):
    monkeypatch.setenv("KUTTL_DEV_VERSION", "1.2.3")
    info = get()
    assert info.git_version == "1.2.3"
    assert info.git_commit == "dev"
    assert str(info) == "1.2.3"
    assert info.build_date == "1970-01-01T00:00:00Z"


def test_get_defaults_to_dev(monkeypatch):
    monkeypatch.delenv("KUTTL_DEV_VERSION", raising=False)
    info = get()
    assert info.git_version == "dev"
    assert "/" in info.platform