"""Filename filter rules."""

import re
from enum import Enum

from pydantic import BaseModel


class RuleKind(str, Enum):
    """How a rule's pattern is compared against a filename."""

    LITERAL = "literal"  # Exact name
    REGEX = "regex"  # Whole-name regular expression


class FilterRule(BaseModel):
    """Exclusion rule matched against a bare filename (never a full path)."""

    pattern: str
    kind: RuleKind = RuleKind.LITERAL
    ignore_case: bool = False

    model_config = {"frozen": True}

    @classmethod
    def literal(cls, name: str, ignore_case: bool = False) -> "FilterRule":
        """Rule matching one exact filename."""
        return cls(pattern=name, kind=RuleKind.LITERAL, ignore_case=ignore_case)

    @classmethod
    def regex(cls, pattern: str, ignore_case: bool = True) -> "FilterRule":
        """Rule matching filenames the pattern fully matches."""
        return cls(pattern=pattern, kind=RuleKind.REGEX, ignore_case=ignore_case)

    def matches(self, filename: str) -> bool:
        """Check whether the filename is matched by this rule."""
        if self.kind == RuleKind.LITERAL:
            if self.ignore_case:
                return filename.casefold() == self.pattern.casefold()
            return filename == self.pattern

        # DOTALL so ".*" also spans newlines in unusual filenames
        flags = re.DOTALL | (re.IGNORECASE if self.ignore_case else 0)
        return re.fullmatch(self.pattern, filename, flags) is not None
