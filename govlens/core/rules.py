# govlens/core/rules.py
"""
Named pattern rules for entity mentions.

Each rule runs on raw (case-preserved) document text, since capitalization
is what the patterns key on. Rules trade recall for precision in known ways;
the limits are recorded on each rule so they can be tested on their own.
"""

import re
from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class PatternRule:
    """One entity kind: its pattern, noise threshold and display label."""

    kind: str
    label: str
    pattern: re.Pattern
    min_length: int
    limitation: str

    def find_all(self, text: str) -> List[str]:
        """Return every match of this rule in ``text``, in order of appearance."""
        if not text:
            return []
        return [match.group(0) for match in self.pattern.finditer(text)]


MINISTRY_RULE = PatternRule(
    kind='ministries',
    label='Ministry',
    # "Ministry of" + one capitalized word, optionally a second one that is
    # either adjacent or joined by "and" / "&"
    pattern=re.compile(
        r"Ministry\s+of\s+[A-Z][a-z]+"
        r"(?:\s+(?:and|&)\s+[A-Z][a-z]+|\s+[A-Z][a-z]+)?"
    ),
    min_length=5,
    limitation=(
        "Captures at most two capitalized words after 'of': "
        "'Ministry of Road Transport and Highways' yields 'Ministry of Road Transport'."
    ),
)

DEPARTMENT_RULE = PatternRule(
    kind='departments',
    label='Department',
    pattern=re.compile(r"Department\s+of\s+[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*"),
    min_length=5,
    limitation=(
        "Stops at the first word that is not capitalized, so "
        "'Department of Science and Technology' yields 'Department of Science'."
    ),
)

ACT_RULE = PatternRule(
    kind='acts',
    label='Act',
    # Run of capitalized words (letters only) ending in the word "Act",
    # optionally followed by ", <year>"
    pattern=re.compile(r"\b(?:[A-Z][a-zA-Z]*\s+)+Act\b(?:,\s+\d{4})?"),
    min_length=5,
    limitation=(
        "Lowercase connectors break the phrase: "
        "'Prevention of Money Laundering Act' yields 'Money Laundering Act'."
    ),
)

ENTITY_RULES: Dict[str, PatternRule] = {
    rule.kind: rule
    for rule in (MINISTRY_RULE, DEPARTMENT_RULE, ACT_RULE)
}


def get_rule(kind: str) -> PatternRule:
    """Look up a rule by entity kind"""
    if kind not in ENTITY_RULES:
        raise KeyError(
            f"Unknown entity kind '{kind}'. Available: {', '.join(ENTITY_RULES)}"
        )
    return ENTITY_RULES[kind]
