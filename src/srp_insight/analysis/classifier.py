"""Responsibility heuristic over dependency usage.

A class whose dependencies are always used together looks cohesive: one
responsibility working with several collaborators. A class where two or
more dependencies each have their own single-dependency method looks like
several responsibilities sharing a class.

The threshold of two exclusively-used dependencies is heuristic policy,
not a proof of low cohesion.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import Classification, DependencyDescriptor, MethodUsage, ResponsibilityGroup

EXCLUSIVE_DEPENDENCY_THRESHOLD = 2


def classify(
    dependencies: Sequence[DependencyDescriptor], method_usages: Sequence[MethodUsage]
) -> Classification:
    """Decide whether the class shows signs of multiple responsibilities.

    Returns:
        Classification with the verdict and the names of methods that
        already couple more than one dependency.
    """
    mixed = tuple(usage.method_name for usage in method_usages if usage.is_mixed)
    return Classification(
        has_multiple_responsibilities=_has_multiple_responsibilities(dependencies, method_usages),
        mixed_methods=mixed,
    )


def _has_multiple_responsibilities(
    dependencies: Sequence[DependencyDescriptor], method_usages: Sequence[MethodUsage]
) -> bool:
    if len(dependencies) < EXCLUSIVE_DEPENDENCY_THRESHOLD:
        return False

    users: dict[str, set[str]] = {dep.type_name: set() for dep in dependencies}
    for usage in method_usages:
        for key in usage.dependency_keys:
            if key in users:
                users[key].add(usage.method_name)

    # Overloads share a name; the first one seen speaks for all of them.
    key_count: dict[str, int] = {}
    for usage in method_usages:
        key_count.setdefault(usage.method_name, len(usage.dependency_keys))

    exclusive = [
        type_name
        for type_name, methods in users.items()
        if any(key_count[method] == 1 for method in methods)
    ]
    return len(exclusive) >= EXCLUSIVE_DEPENDENCY_THRESHOLD


def group_responsibilities(
    dependencies: Sequence[DependencyDescriptor], method_usages: Sequence[MethodUsage]
) -> list[ResponsibilityGroup]:
    """List, per dependency, the methods that reference it (source order)."""
    groups = []
    for dep in dependencies:
        methods = tuple(
            usage.method_name for usage in method_usages if dep.type_name in usage.dependency_keys
        )
        if methods:
            groups.append(ResponsibilityGroup(dependency=dep.type_name, methods=methods))
    return groups
