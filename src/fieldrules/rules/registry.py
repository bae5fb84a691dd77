"""Rule checker registry: maps annotation rule names to checkers."""

from __future__ import annotations

from fieldrules.rules.base import RuleChecker


class UnknownRuleError(Exception):
    """Raised when a requested rule has no registered checker."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.rule_name = name
        self.available = available
        super().__init__(f"Unknown rule '{name}'. Available: {', '.join(available)}")


class RuleRegistry:
    """Registry of rule checker classes keyed by rule name."""

    _checkers: dict[str, type[RuleChecker]] = {}

    @classmethod
    def register(cls, checker_class: type[RuleChecker]) -> type[RuleChecker]:
        """Register a checker class. Can be used as a decorator."""
        # Instantiate to read the name property
        instance = checker_class()
        cls._checkers[instance.name] = checker_class
        return checker_class

    @classmethod
    def get(cls, name: str) -> RuleChecker:
        """Get an instance of the named checker."""
        if name not in cls._checkers:
            raise UnknownRuleError(name, available=cls.available())
        return cls._checkers[name]()

    @classmethod
    def find(cls, name: str) -> RuleChecker | None:
        """Like :meth:`get`, but returns None for unregistered names."""
        try:
            return cls.get(name)
        except UnknownRuleError:
            return None

    @classmethod
    def available(cls) -> list[str]:
        """List registered rule names."""
        return sorted(cls._checkers.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered checkers (for tests)."""
        cls._checkers.clear()
