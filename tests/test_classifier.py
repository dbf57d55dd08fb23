import pytest

from sublaunch.classifier import (
    CommandIntent,
    Empty,
    SearchIntent,
    UrlIntent,
    classify,
    search_url,
    status_for,
)


def test_plain_url():
    assert classify("http://example.com") == UrlIntent(target="http://example.com")


@pytest.mark.parametrize(
    "text",
    [
        "https://example.com",
        "https://sub.example-site.org:8080/path?q=1",
        "HTTP://Example.COM/",
        "http://subtle.subforge.org/projects/subtle/wiki",
    ],
)
def test_url_shapes(text):
    assert isinstance(classify(text), UrlIntent)


@pytest.mark.parametrize("text", ["urxvt @editor #work", "urxvt", "urxvt #work", "google-chrome @www"])
def test_command_shapes(text):
    assert classify(text) == CommandIntent(raw=text)


def test_free_text_becomes_search():
    intent = classify("subtle wm")
    assert isinstance(intent, SearchIntent)
    assert intent.query == "subtle wm"
    assert intent.target == "https://www.google.com/search?q=subtle%20wm"


@pytest.mark.parametrize("text", ["ftp://example.com", "example.com", "urxvt -e vim", "what is #1?"])
def test_non_matching_input_falls_through_to_search(text):
    assert isinstance(classify(text), SearchIntent)


@pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
def test_blank_input_is_empty(text):
    assert classify(text) == Empty()


def test_surrounding_whitespace_is_ignored():
    assert classify("  urxvt @editor  ") == CommandIntent(raw="urxvt @editor")


def test_custom_search_template():
    intent = classify("a&b", search_template="https://duckduckgo.com/?q={query}")
    assert intent.target == "https://duckduckgo.com/?q=a%26b"
    assert search_url("x/y") == "https://www.google.com/search?q=x%2Fy"


def test_status_lines():
    assert status_for(classify("http://example.com")) == "Goto http://example.com"
    assert status_for(classify("urxvt @editor")) == "Launch urxvt @editor"
    assert status_for(classify("subtle wm")) == "Goto https://www.google.com/search?q=subtle%20wm"
    assert status_for(classify("")) == "Nothing selected"
    assert status_for(Empty(), idle="Idle") == "Idle"
