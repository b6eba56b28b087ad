"""Slash-command triggers recognized in comment bodies.

A trigger is a line-anchored, case-sensitive ``/keyword`` followed by
whitespace and an argument running to the end of the line. Some commands
only honour their first occurrence in a comment; others act on every
matching line.
"""

import re
from typing import List, Pattern


class CommandTrigger:
    """Pattern plus extraction rule for one command family."""

    def __init__(self, name: str, pattern: str, multiple: bool = False) -> None:
        self.name = name
        self.pattern: Pattern[str] = re.compile(pattern, re.MULTILINE)
        self.multiple = multiple

    def match(self, body: str) -> List[str]:
        """Return the trimmed arguments found in body, in document order.

        For single-occurrence triggers at most one argument is returned.
        Whitespace-only arguments are dropped.
        """
        if not body:
            return []
        if not self.multiple:
            m = self.pattern.search(body)
            args = [m.group(1).strip()] if m else []
        else:
            args = [m.group(1).strip() for m in self.pattern.finditer(body)]
        return [arg for arg in args if arg]


MILESTONE_TRIGGER = CommandTrigger("milestone", r"^/milestone\s+(.+?)\s*$")
STATUS_TRIGGER = CommandTrigger("status", r"^/status\s+(.+)$", multiple=True)
