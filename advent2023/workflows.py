"""Workflows that sort machine parts by their ratings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

CATEGORIES = "xmas"
START_WORKFLOW = "in"
ACCEPT = "A"
REJECT = "R"


@dataclass(frozen=True)
class Rule:
    """One rule of a workflow: an optional comparison and the target it sends to."""

    target: str
    category: str | None = None
    op: str | None = None
    value: int = 0

    @property
    def is_conditional(self) -> bool:
        return self.op is not None

    @classmethod
    def parse(cls, text: str) -> Rule:
        """Parse a rule such as ``a<2006:qkq``, ``A``, ``R`` or ``rfg``."""
        text = text.strip()
        if ":" not in text:
            return cls(target=text)

        condition, target = text.split(":", 1)
        if "<" in condition:
            op = "<"
        elif ">" in condition:
            op = ">"
        else:
            raise ValueError(f"rule condition has no comparison: {text!r}")

        letters, number = condition.split(op, 1)
        if not letters or letters[0] not in CATEGORIES:
            raise ValueError(f"unknown rating category in rule: {text!r}")
        try:
            value = int(number)
        except ValueError:
            raise ValueError(f"rule threshold is not a number: {text!r}") from None
        return cls(target=target, category=letters[0], op=op, value=value)

    def apply(self, part: Mapping[str, int]) -> str | None:
        """The target this rule sends ``part`` to, or None if the rule does not match."""
        if self.op is None:
            return self.target
        rating = part[self.category]
        matched = rating < self.value if self.op == "<" else rating > self.value
        return self.target if matched else None


def _parse_part(line: str) -> dict[str, int]:
    ratings = dict.fromkeys(CATEGORIES, 0)
    for item in line.strip().strip("{}").split(","):
        if "=" not in item:
            raise ValueError(f"malformed rating: {item!r}")
        letter, number = item.split("=", 1)
        letter = letter.strip()
        if not letter or letter[0] not in CATEGORIES:
            raise ValueError(f"unknown rating category: {item!r}")
        ratings[letter[0]] = int(number)
    return ratings


@dataclass
class System:
    """Named workflows together with the parts to be sorted."""

    workflows: dict[str, list[Rule]] = field(default_factory=dict)
    parts: list[dict[str, int]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> System:
        """Parse workflows and parts separated by a blank line."""
        sections = text.split("\n\n")
        if len(sections) < 2:
            raise ValueError("expected workflows and parts separated by a blank line")

        workflows: dict[str, list[Rule]] = {}
        for line in sections[0].splitlines():
            if not line.strip():
                continue
            name, _, body = line.strip().rstrip("}").partition("{")
            if name in workflows:
                raise ValueError("duplicate names")
            workflows[name] = [Rule.parse(item) for item in body.split(",")]

        parts = [_parse_part(line) for line in sections[1].splitlines() if line.strip()]
        return cls(workflows=workflows, parts=parts)

    def _is_accepted(self, part: Mapping[str, int]) -> bool:
        name = START_WORKFLOW
        while True:
            try:
                rules = self.workflows[name]
            except KeyError:
                raise ValueError(f"unknown workflow: {name!r}") from None
            target = next(
                (result for result in (rule.apply(part) for rule in rules) if result is not None),
                None,
            )
            if target is None:
                raise ValueError("last rule must apply, doesn't.")
            if target == ACCEPT:
                return True
            if target == REJECT:
                return False
            name = target

    def process(self) -> int:
        """Sum of all ratings of the parts that end up accepted."""
        return sum(sum(part.values()) for part in self.parts if self._is_accepted(part))