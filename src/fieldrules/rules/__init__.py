"""Rule checkers for fieldrules."""

# Import checkers to trigger registration
import fieldrules.rules.bounds as _bounds  # noqa: F401
import fieldrules.rules.length as _length  # noqa: F401
import fieldrules.rules.membership as _membership  # noqa: F401
from fieldrules.rules.base import RuleChecker, ValueKind, classify
from fieldrules.rules.registry import RuleRegistry, UnknownRuleError

__all__ = [
    "RuleChecker",
    "RuleRegistry",
    "UnknownRuleError",
    "ValueKind",
    "classify",
]
