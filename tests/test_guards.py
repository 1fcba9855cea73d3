"""
Tests for the evaluation guards.
"""

import pytest
from pydantic import BaseModel
from structlog.testing import capture_logs

from comply import (
    define_policy,
    check,
    assert_,
    check_all_settle,
    match_schema,
    not_null,
    PolicyRejection,
    InvalidPolicyError,
)
from comply.guards import resolve_call, PolicyCall
from comply.utils.sentinel import MISSING


class Params(BaseModel):
    id: str


class TestInlinePolicies:
    """Test the name-plus-condition call shape."""

    def test_check_inline(self):
        """Test defining a policy on the fly."""
        params = {"id": "123"}

        assert check(define_policy("params are valid", match_schema(Params)), params) is True
        assert check("params are valid", match_schema(Params), params) is True
        assert check("params are valid", match_schema(Params), {}) is False

    def test_assert_inline(self):
        """Test asserting an inline policy."""
        label = "label"

        assert_("not null", not_null, label)

        with pytest.raises(PolicyRejection) as exc_info:
            assert_("not null", not_null, None)

        assert exc_info.value.name == "PolicyRejection: [not null]"
        assert str(exc_info.value) == "[not null] policy is not met for the argument: <no value>"

    def test_inline_no_arg_condition(self):
        """Test an inline zero-argument condition."""
        assert check("is true", lambda: True) is True
        assert check("is false", False) is False

        with pytest.raises(PolicyRejection):
            assert_("is false", lambda: False)


class TestCallShapes:
    """Test resolution of the guard call shapes."""

    def test_policy_shape(self):
        """Test that a policy with an argument resolves to itself."""
        policy = define_policy("is true", True)

        assert resolve_call(policy, ()) == PolicyCall(policy, MISSING)
        assert resolve_call(policy, ("x",)) == PolicyCall(policy, "x")

    def test_inline_shape(self):
        """Test that an inline call builds a policy with that name."""
        call = resolve_call("is positive", (lambda n: n > 0, 3))

        assert call.policy.name == "is positive"
        assert call.arg == 3

    def test_too_many_arguments(self):
        """Test that extra arguments are rejected."""
        policy = define_policy("is true", True)

        with pytest.raises(TypeError):
            check(policy, 1, 2)

        with pytest.raises(TypeError):
            check("is true", True, 1, 2)

    def test_missing_condition(self):
        """Test that an inline call needs a condition."""
        with pytest.raises(TypeError):
            check("is true")

    def test_unknown_target(self):
        """Test that only policies and names are accepted."""
        with pytest.raises(TypeError):
            check(42, True)


class TestAssertLogging:
    """Test the debug events emitted by assert_."""

    def test_rejection_logged(self):
        """Test that a rejection is logged before raising."""
        with capture_logs() as logs:
            with pytest.raises(PolicyRejection):
                assert_("has items", lambda items: len(items) > 0, [])

        assert logs == [{"event": "policy_rejected", "policy": "has items", "log_level": "debug"}]

    def test_success_not_logged(self):
        """Test that a met policy emits nothing."""
        with capture_logs() as logs:
            assert_("has items", lambda items: len(items) > 0, [1])

        assert logs == []


class TestCheckAllSettle:
    """Test bulk evaluation."""

    def test_settle_all(self):
        """Test that every entry is evaluated and reported by name."""
        has_items = define_policy("has items", lambda items: len(items) > 0)

        results = check_all_settle([
            (has_items, []),
            ("is positive", lambda n: n > 0, 5),
            ("is true", lambda: True),
            (define_policy("is false", False),),
        ])

        assert results == {
            "has items": False,
            "is positive": True,
            "is true": True,
            "is false": False,
        }
        assert list(results) == ["has items", "is positive", "is true", "is false"]

    def test_no_short_circuit(self):
        """Test that rejections do not stop later evaluations."""
        evaluated = []

        def condition(name, result):
            def evaluate():
                evaluated.append(name)
                return result
            return evaluate

        check_all_settle([
            ("a", condition("a", False)),
            ("b", condition("b", False)),
            ("c", condition("c", True)),
        ])

        assert evaluated == ["a", "b", "c"]

    def test_never_raises_on_rejection(self):
        """Test that rejected policies are reported, not raised."""
        results = check_all_settle([(define_policy("never", False, "never met"),)])

        assert results == {"never": False}

    def test_empty(self):
        """Test settling no entries."""
        assert check_all_settle([]) == {}

    def test_invalid_entry(self):
        """Test that entries must be non-empty tuples."""
        with pytest.raises(InvalidPolicyError):
            check_all_settle([()])

        with pytest.raises(InvalidPolicyError):
            check_all_settle([define_policy("is true", True)])

    def test_settle_logged(self):
        """Test the summary event."""
        with capture_logs() as logs:
            check_all_settle([("a", True), ("b", False)])

        assert logs == [{
            "event": "policies_settled",
            "total": 2,
            "rejected": ["b"],
            "log_level": "debug",
        }]
