"""Format bot replies that quote the comment they respond to."""

ABOUT_FOOTER = (
    "Instructions for interacting with me using PR comments are available "
    "via the `/plugins/help` endpoint of this bot."
)


def quote(body: str) -> str:
    """Prefix every line of body with a Markdown quote marker."""
    lines = body.rstrip("\n").split("\n") if body else [""]
    return "\n".join(f"> {line.rstrip(chr(13))}" for line in lines)


def format_response_raw(body: str, html_url: str, author: str, message: str) -> str:
    """Reply mentioning author, with the original comment quoted in a
    collapsible block linking to it."""
    return (
        f"@{author}: {message}\n\n"
        "<details>\n\n"
        f"In response to [this]({html_url}):\n\n"
        f"{quote(body)}\n\n"
        f"{ABOUT_FOOTER}\n"
        "</details>"
    )
