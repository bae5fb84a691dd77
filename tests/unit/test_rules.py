"""Tests for the rule checkers and their registry."""

from __future__ import annotations

from enum import IntEnum

import pytest

from fieldrules.models.errors import FailureCode
from fieldrules.models.rules import LengthRule, MaximumRule, MembershipRule, MinimumRule
from fieldrules.rules import RuleRegistry, UnknownRuleError, ValueKind, classify
from fieldrules.rules.bounds import MaximumChecker, MinimumChecker
from fieldrules.rules.length import LengthChecker
from fieldrules.rules.membership import MembershipChecker


class Priority(IntEnum):
    LOW = 1
    HIGH = 3


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ("abc", ValueKind.TEXT),
            (5, ValueKind.INTEGER),
            (Priority.HIGH, ValueKind.INTEGER),
            (True, ValueKind.OTHER),
            (1.5, ValueKind.OTHER),
            (None, ValueKind.OTHER),
            (["a", "b"], ValueKind.TEXT_SEQUENCE),
            (("a",), ValueKind.TEXT_SEQUENCE),
            ([1, 2], ValueKind.INTEGER_SEQUENCE),
            ([], ValueKind.EMPTY_SEQUENCE),
            (["a", 1], ValueKind.OTHER),
            ([True, False], ValueKind.OTHER),
            ({"a": 1}, ValueKind.OTHER),
        ],
    )
    def test_kinds(self, value: object, kind: ValueKind) -> None:
        assert classify(value) == kind


class TestRuleRegistry:
    def test_available_rules(self) -> None:
        assert RuleRegistry.available() == ["in", "len", "max", "min"]

    def test_get_len(self) -> None:
        assert isinstance(RuleRegistry.get("len"), LengthChecker)

    def test_find_unknown_returns_none(self) -> None:
        assert RuleRegistry.find("regexp") is None

    def test_find_known_returns_checker(self) -> None:
        assert isinstance(RuleRegistry.find("max"), MaximumChecker)

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(UnknownRuleError) as exc_info:
            RuleRegistry.get("regexp")
        assert "regexp" in str(exc_info.value)
        assert "len" in str(exc_info.value)

    def test_reset_then_register(self) -> None:
        saved = dict(RuleRegistry._checkers)
        try:
            RuleRegistry.reset()
            assert RuleRegistry.available() == []
            assert RuleRegistry.find("len") is None

            RuleRegistry.register(LengthChecker)
            assert RuleRegistry.available() == ["len"]
            assert isinstance(RuleRegistry.get("len"), LengthChecker)
        finally:
            RuleRegistry._checkers.clear()
            RuleRegistry._checkers.update(saved)
        assert RuleRegistry.available() == ["in", "len", "max", "min"]


class TestLengthChecker:
    @pytest.fixture
    def checker(self) -> LengthChecker:
        return LengthChecker()

    def test_exact_length_passes(self, checker: LengthChecker) -> None:
        assert checker.check("Name", "Anna", LengthRule(length=4)) is None

    @pytest.mark.parametrize("length", [3, 5])
    def test_off_by_one_fails(self, checker: LengthChecker, length: int) -> None:
        failure = checker.check("Name", "Anna", LengthRule(length=length))
        assert failure is not None
        assert failure.code == FailureCode.LENGTH_FAILED
        assert failure.field == "Name"

    def test_counts_characters_not_bytes(self, checker: LengthChecker) -> None:
        assert checker.check("Name", "Łódź", LengthRule(length=4)) is None

    def test_sequence_all_match(self, checker: LengthChecker) -> None:
        assert checker.check("Codes", ["ab", "cd"], LengthRule(length=2)) is None

    def test_sequence_reports_once(self, checker: LengthChecker) -> None:
        failure = checker.check("Codes", ["a", "bcd", "e"], LengthRule(length=2))
        assert failure is not None
        assert failure.code == FailureCode.LENGTH_FAILED

    def test_empty_sequence_passes(self, checker: LengthChecker) -> None:
        assert checker.check("Codes", [], LengthRule(length=2)) is None

    @pytest.mark.parametrize("value", [42, [1, 2], 1.0, None])
    def test_unsupported(self, checker: LengthChecker, value: object) -> None:
        failure = checker.check("Field", value, LengthRule(length=2))
        assert failure is not None
        assert failure.code == FailureCode.UNSUPPORTED_TYPE


class TestMembershipChecker:
    @pytest.fixture
    def checker(self) -> MembershipChecker:
        return MembershipChecker()

    def test_text_member(self, checker: MembershipChecker) -> None:
        assert checker.check("Role", "admin", MembershipRule(allowed=("admin", "user"))) is None

    def test_text_not_member(self, checker: MembershipChecker) -> None:
        failure = checker.check("Role", "root", MembershipRule(allowed=("admin", "user")))
        assert failure is not None
        assert failure.code == FailureCode.MEMBERSHIP_FAILED
        assert str(failure) == "Role: in validation failed"

    def test_integer_uses_decimal_form(self, checker: MembershipChecker) -> None:
        assert checker.check("Code", 200, MembershipRule(allowed=("200", "404"))) is None
        assert checker.check("Code", 500, MembershipRule(allowed=("200", "404"))) is not None

    def test_int_enum_uses_value(self, checker: MembershipChecker) -> None:
        assert checker.check("Prio", Priority.HIGH, MembershipRule(allowed=("3",))) is None

    def test_tokens_are_not_trimmed(self, checker: MembershipChecker) -> None:
        failure = checker.check("Role", "user", MembershipRule(allowed=("admin", " user")))
        assert failure is not None

    @pytest.mark.parametrize("value", [1.0, True, None, ["admin"]])
    def test_unsupported(self, checker: MembershipChecker, value: object) -> None:
        failure = checker.check("Role", value, MembershipRule(allowed=("admin", "1", "True")))
        assert failure is not None
        assert failure.code == FailureCode.UNSUPPORTED_TYPE


class TestBoundCheckers:
    @pytest.mark.parametrize(
        ("value", "bound", "fails"),
        [
            (17, 18, True),
            (18, 18, False),
            (19, 18, False),
            (-5, -4, True),
            ("abc", 3, False),
            ("ab", 3, True),
            ([5, 6, 7], 5, False),
            ([5, 4, 7], 5, True),
            (["abc", "de"], 3, True),
            (["abc", "defg"], 3, False),
            ([], 100, False),
        ],
    )
    def test_minimum(self, value: object, bound: int, fails: bool) -> None:
        failure = MinimumChecker().check("Field", value, MinimumRule(bound=bound))
        assert (failure is not None) is fails
        if fails:
            assert failure is not None
            assert failure.code == FailureCode.MINIMUM_FAILED

    @pytest.mark.parametrize(
        ("value", "bound", "fails"),
        [
            (11, 10, True),
            (10, 10, False),
            ("abcd", 3, True),
            ("abc", 3, False),
            ([1, 2, 30], 10, True),
            ([1, 2, 3], 10, False),
            (["a", "abcd"], 3, True),
            ([], -1, False),
        ],
    )
    def test_maximum(self, value: object, bound: int, fails: bool) -> None:
        failure = MaximumChecker().check("Field", value, MaximumRule(bound=bound))
        assert (failure is not None) is fails
        if fails:
            assert failure is not None
            assert failure.code == FailureCode.MAXIMUM_FAILED

    @pytest.mark.parametrize("value", [1.5, None, True, {"a": 1}, [1, "a"], [1.5]])
    def test_unsupported(self, value: object) -> None:
        for checker, rule in (
            (MinimumChecker(), MinimumRule(bound=0)),
            (MaximumChecker(), MaximumRule(bound=0)),
        ):
            failure = checker.check("Field", value, rule)
            assert failure is not None
            assert failure.code == FailureCode.UNSUPPORTED_TYPE
