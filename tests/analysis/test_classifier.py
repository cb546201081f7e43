"""Tests for analysis/classifier.py - the exclusive-usage heuristic."""

from srp_insight.analysis import classify, group_responsibilities
from srp_insight.models import DependencyDescriptor, MethodUsage


def _deps(*names):
    return [DependencyDescriptor(type_name=n, parameter_name=n.lower()) for n in names]


def _usage(name, *keys, start=0):
    return MethodUsage(
        method_name=name,
        start_index=start,
        end_index=start + 10,
        dependency_keys=frozenset(keys),
    )


class TestClassify:
    def test_no_dependencies(self):
        verdict = classify([], [])
        assert verdict.has_multiple_responsibilities is False
        assert verdict.mixed_methods == ()

    def test_single_dependency_never_flagged(self):
        verdict = classify(_deps("IA"), [_usage("Run", "IA"), _usage("Stop", "IA")])
        assert verdict.has_multiple_responsibilities is False

    def test_two_exclusive_consumers_flagged(self):
        verdict = classify(
            _deps("IOrderService", "IEmailService"),
            [_usage("ProcessOrder", "IOrderService"), _usage("SendEmail", "IEmailService")],
        )
        assert verdict.has_multiple_responsibilities is True
        assert verdict.mixed_methods == ()

    def test_always_used_together_not_flagged(self):
        verdict = classify(
            _deps("IA", "IB"),
            [_usage("One", "IA", "IB"), _usage("Two", "IA", "IB")],
        )
        assert verdict.has_multiple_responsibilities is False
        assert verdict.mixed_methods == ("One", "Two")

    def test_one_exclusive_consumer_not_flagged(self):
        verdict = classify(
            _deps("IA", "IB", "IC"),
            [_usage("OnlyA", "IA"), _usage("Both", "IA", "IB")],
        )
        assert verdict.has_multiple_responsibilities is False
        assert verdict.mixed_methods == ("Both",)

    def test_unused_dependencies_do_not_count(self):
        verdict = classify(_deps("IA", "IB", "IC"), [_usage("GetWorkpieces", "IA")])
        assert verdict.has_multiple_responsibilities is False

    def test_exclusive_consumers_alongside_mixed_method(self):
        verdict = classify(
            _deps("IA", "IB"),
            [_usage("OnlyA", "IA"), _usage("OnlyB", "IB"), _usage("Both", "IA", "IB")],
        )
        assert verdict.has_multiple_responsibilities is True
        assert verdict.mixed_methods == ("Both",)

    def test_overload_judged_by_first_declaration(self):
        """Overloads share a name; the first one seen decides."""
        verdict = classify(
            _deps("IA", "IB"),
            [
                _usage("Save", "IA", "IB", start=0),
                _usage("Save", "IA", start=20),
                _usage("Send", "IB", start=40),
            ],
        )
        assert verdict.has_multiple_responsibilities is False

    def test_keys_for_unknown_types_ignored(self):
        verdict = classify(_deps("IA"), [_usage("Run", "IZ")])
        assert verdict.has_multiple_responsibilities is False


class TestGroupResponsibilities:
    def test_groups_in_dependency_order(self):
        groups = group_responsibilities(
            _deps("IA", "IB", "IC"),
            [_usage("Both", "IA", "IB"), _usage("OnlyB", "IB")],
        )
        assert [(g.dependency, g.methods) for g in groups] == [
            ("IA", ("Both",)),
            ("IB", ("Both", "OnlyB")),
        ]

    def test_empty(self):
        assert group_responsibilities(_deps("IA"), []) == []
