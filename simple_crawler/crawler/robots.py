"""
Exclusion rules taken from the wildcard block of robots.txt.
"""
from __future__ import annotations

from typing import FrozenSet, Iterable

_WILDCARD_AGENT = "User-agent: *"
_AGENT_PREFIX = "User-agent: "
_DISALLOW = "Disallow: "


class RobotsPolicy:
    """Disallowed URL prefixes for the ``User-agent: *`` group.

    Only the first wildcard block is honoured: scanning starts at the line
    ``User-agent: *`` and stops at the next block addressed to any other
    agent. By default a URL is blocked only when it equals a rule exactly;
    ``prefix_match=True`` blocks everything below a rule as well.
    """

    def __init__(self, rules: Iterable[str] = (), *, prefix_match: bool = False) -> None:
        self.rules: FrozenSet[str] = frozenset(rules)
        self.prefix_match = prefix_match

    @classmethod
    def empty(cls, *, prefix_match: bool = False) -> RobotsPolicy:
        return cls((), prefix_match=prefix_match)

    @classmethod
    def parse(
        cls,
        text: str,
        protocol: str,
        domain: str,
        *,
        prefix_match: bool = False,
    ) -> RobotsPolicy:
        """Build the policy from the document body."""
        lines = iter(text.splitlines())
        for line in lines:
            if line == _WILDCARD_AGENT:
                break

        rules = []
        for line in lines:
            if _AGENT_PREFIX in line and not line.endswith("*"):
                break
            pos = line.find(_DISALLOW)
            if pos == -1:
                continue
            path = line[pos + len(_DISALLOW):]
            # an empty Disallow allows everything
            if not path:
                continue
            rules.append(f"{protocol}://{domain}{path}")
        return cls(rules, prefix_match=prefix_match)

    def is_blocked(self, url: str) -> bool:
        if url in self.rules:
            return True
        if self.prefix_match:
            return any(url.startswith(rule) for rule in self.rules)
        return False

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return f"RobotsPolicy(rules={sorted(self.rules)!r}, prefix_match={self.prefix_match})"
