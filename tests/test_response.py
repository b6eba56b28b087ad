"""Tests for quoted replies (format_response_raw)."""

from milestoner.plugins.response import format_response_raw, quote


def test_quote_prefixes_each_line() -> None:
    assert quote("a\nb\n") == "> a\n> b"
    assert quote("a\r\nb") == "> a\n> b"
    assert quote("") == "> "


def test_format_response_raw() -> None:
    text = format_response_raw(
        "/milestone v9\nplease",
        "https://github.com/o/r/issues/1#issuecomment-2",
        "alice",
        "Not valid.",
    )
    assert text.startswith("@alice: Not valid.\n\n<details>")
    assert "In response to [this](https://github.com/o/r/issues/1#issuecomment-2):" in text
    assert "> /milestone v9\n> please" in text
    assert text.endswith("</details>")


def test_quoted_command_does_not_retrigger() -> None:
    """The reply never contains a line starting with the command itself."""
    text = format_response_raw("/milestone v9", "u", "bot", "msg")
    assert not any(line.startswith("/milestone") for line in text.splitlines())
