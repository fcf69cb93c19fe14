"""
Configuration for the scan/parse/evaluate pipeline.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict

DIVISION_POLICIES = ("ieee", "strict")


@dataclass
class CalcConfig:
    """
    Policy knobs for evaluating expressions.

    Args:
        division_policy: "ieee" lets division by zero produce inf/nan,
                         "strict" reports it as an EvaluationError.
        allow_trailing_dot: Accept numbers such as "5." that end in a bare dot.
        max_depth: Maximum parenthesis nesting the parser will accept.
        prompt: Text shown by the read-loop before each line.
    """

    division_policy: str = "ieee"
    allow_trailing_dot: bool = True
    max_depth: int = 100
    prompt: str = "Enter your calculation\n> "

    def __post_init__(self):
        if self.division_policy not in DIVISION_POLICIES:
            raise ValueError(
                f"Unknown division policy: {self.division_policy!r}. "
                f"Available: {list(DIVISION_POLICIES)}"
            )
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

    @property
    def strict_division(self) -> bool:
        return self.division_policy == "strict"

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "CalcConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Available: {sorted(known)}")
        return cls(**values)
