import pytest

from minobjects.markdown.autolink import (
    AutolinkFlags,
    autolink_email,
    autolink_url,
    autolink_www,
    is_safe,
)


@pytest.mark.parametrize(
    "text", ["http://example.com", "HTTPS://example.com", "/path", "#anchor", "mailto:a"]
)
def test_is_safe_accepts_known_schemes(text):
    assert is_safe(text) is True


@pytest.mark.parametrize("text", ["javascript:alert", "http://", "http:///x", "data:x"])
def test_is_safe_rejects_others(text):
    assert is_safe(text) is False


def test_www_link_drops_trailing_period():
    data = b"see www.example.com."
    found = autolink_www(data, 4)
    assert found.link == b"www.example.com"
    assert found.rewind == 0
    assert found.length == len(found.link)


def test_www_requires_separator_before():
    assert autolink_www(b"awww.example.com", 1) is None


def test_www_requires_a_dot_in_domain():
    assert autolink_www(b"www", 0) is None


def test_www_drops_trailing_entity():
    found = autolink_www(b"www.example.com&amp;", 0)
    assert found.link == b"www.example.com"


def test_www_stops_at_angle_bracket():
    found = autolink_www(b"www.example.com<b>", 0)
    assert found.link == b"www.example.com"


def test_email_found_around_at_sign():
    data = b"mail user@example.com now"
    found = autolink_email(data, data.index(b"@"))
    assert found.link == b"user@example.com"
    assert found.rewind == len(b"user")
    assert data.index(b"@") - found.rewind == data.index(b"user")


def test_email_needs_a_dot_after_at():
    data = b"a user@localhost"
    assert autolink_email(data, data.index(b"@")) is None


def test_email_needs_text_before_at():
    assert autolink_email(b"@example.com", 0) is None


def test_url_found_from_colon():
    data = b"go to http://example.com/path, ok"
    found = autolink_url(data, data.index(b":"))
    assert found.link == b"http://example.com/path"
    assert found.rewind == len(b"http")


def test_url_keeps_balanced_parenthesis():
    data = b"foo http://example.com/Pikachu_(Electric) bar"
    found = autolink_url(data, data.index(b":"))
    assert found.link == b"http://example.com/Pikachu_(Electric)"


def test_url_drops_unbalanced_closing_parenthesis():
    data = b"foo (http://example.com/Pikachu_(Electric)) bar"
    found = autolink_url(data, data.index(b":"))
    assert found.link == b"http://example.com/Pikachu_(Electric)"


def test_url_short_domain_needs_flag():
    data = b"http://localhost/x"
    offset = data.index(b":")
    assert autolink_url(data, offset) is None
    found = autolink_url(data, offset, AutolinkFlags.SHORT_DOMAINS)
    assert found.link == data


def test_url_with_unsafe_scheme_is_ignored():
    data = b"javascript://example.com"
    assert autolink_url(data, data.index(b":")) is None


def test_accepts_text_input():
    text = "visit www.example.com"
    found = autolink_www(text, text.index("www"))
    assert found.link.decode() == "www.example.com"