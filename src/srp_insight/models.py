"""Data models for SRP Insight analysis results.

All models are frozen dataclasses. Every ``analyze`` call builds a fresh
set of them; nothing here is shared between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class DependencyDescriptor:
    """One distinct injected dependency type found in the class.

    Attributes:
        type_name: Declared type token, unique within one analysis
        parameter_name: Constructor parameter bound to the type ("" if none)
        field_name: ``private readonly`` field bound to the type, if any
        color: Palette color assigned in discovery order
    """

    type_name: str
    parameter_name: str = ""
    field_name: Optional[str] = None
    color: str = ""

    @property
    def name(self) -> str:
        return self.type_name

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Names that count as a use of this dependency inside a method."""
        return tuple(n for n in (self.parameter_name, self.field_name) if n)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type_name": self.type_name,
            "parameter_name": self.parameter_name,
            "field_name": self.field_name,
            "color": self.color,
        }


@dataclass(frozen=True)
class MethodUsage:
    """Dependency footprint of one method body.

    ``source[start_index:end_index]`` is the method from its first modifier
    through the closing brace, or through the ``;`` of an expression body.
    """

    method_name: str
    start_index: int
    end_index: int
    dependency_keys: frozenset[str]
    name_index: int = -1

    @property
    def is_mixed(self) -> bool:
        return len(self.dependency_keys) > 1

    def to_dict(self, order: Optional[list[str]] = None) -> dict[str, Any]:
        keys = sorted(self.dependency_keys)
        if order is not None:
            keys = [k for k in order if k in self.dependency_keys]
        return {
            "method_name": self.method_name,
            "start_index": self.start_index,
            "end_index": self.end_index,
            "dependency_keys": keys,
        }


@dataclass(frozen=True)
class ResponsibilityGroup:
    """Methods that touch one dependency."""

    dependency: str
    methods: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"dependency": self.dependency, "methods": list(self.methods)}


@dataclass(frozen=True)
class Classification:
    """Verdict of the responsibility heuristic."""

    has_multiple_responsibilities: bool
    mixed_methods: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one ``analyze`` call learned about a class."""

    dependencies: tuple[DependencyDescriptor, ...] = ()
    method_usages: tuple[MethodUsage, ...] = ()
    has_multiple_responsibilities: bool = False
    mixed_methods: tuple[str, ...] = ()
    responsibility_groups: tuple[ResponsibilityGroup, ...] = field(default_factory=tuple)
    class_name: Optional[str] = None

    @property
    def dependency_types(self) -> list[str]:
        return [dep.type_name for dep in self.dependencies]

    def dependency(self, type_name: str) -> Optional[DependencyDescriptor]:
        """Look up a dependency by its type name."""
        for dep in self.dependencies:
            if dep.type_name == type_name:
                return dep
        return None

    def to_dict(self) -> dict[str, Any]:
        order = self.dependency_types
        return {
            "class_name": self.class_name,
            "dependencies": [dep.to_dict() for dep in self.dependencies],
            "method_usages": [usage.to_dict(order) for usage in self.method_usages],
            "has_multiple_responsibilities": self.has_multiple_responsibilities,
            "mixed_methods": list(self.mixed_methods),
            "responsibility_groups": [g.to_dict() for g in self.responsibility_groups],
        }


@dataclass(frozen=True)
class SourceReport:
    """One analyzed input as handed to the formatters."""

    origin: str
    source: str
    result: AnalysisResult
    selected: Optional[str] = None
