"""Dependency extraction from constructor parameters and readonly fields."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Optional

from ..config import DEFAULT_FRAMEWORK_TYPES, DEFAULT_PALETTE
from ..logging_config import get_logger
from ..models import DependencyDescriptor
from .patterns import (
    FIELD_PATTERN,
    GENERIC_ARGS,
    base_type_name,
    find_class_name,
    find_closing,
    is_keyword,
    parse_parameters,
)

logger = get_logger(__name__)

_CONSTRUCTOR_INITIALIZER = re.compile(r"\s*:\s*(?:base|this)\s*\(")
_CONSTRUCTOR_BODY = re.compile(r"\s*(?:\{|=>)")
_PRECEDED_BY_NEW = re.compile(r"\bnew\s*$")


def extract_dependencies(
    source_text: str,
    filter_framework_types: bool = True,
    *,
    palette: Sequence[str] = DEFAULT_PALETTE,
    framework_types: Iterable[str] = DEFAULT_FRAMEWORK_TYPES,
) -> list[DependencyDescriptor]:
    """Find the injected dependencies of the first class in *source_text*.

    Constructor parameters are read first: a primary constructor on the
    class declaration, or else the conventional constructor. Then every
    ``private readonly <type> <name>`` field either attaches its name to the
    descriptor with the same type or creates a field-only descriptor.

    Args:
        source_text: Source of a single C#-like class
        filter_framework_types: Skip types whose base name is in *framework_types*
        palette: Colors assigned by discovery index, cycling when exhausted
        framework_types: Base type names of cross-cutting framework services

    Returns:
        Descriptors in discovery order, unique by ``type_name``
    """
    denylist = frozenset(framework_types) if filter_framework_types else frozenset()
    found: dict[str, DependencyDescriptor] = {}

    def include(type_name: str) -> bool:
        base = base_type_name(type_name)
        return base not in denylist and not is_keyword(base)

    def add(type_name: str, parameter_name: str = "", field_name: Optional[str] = None) -> None:
        color = palette[len(found) % len(palette)]
        found[type_name] = DependencyDescriptor(
            type_name=type_name,
            parameter_name=parameter_name,
            field_name=field_name,
            color=color,
        )

    class_name = find_class_name(source_text)
    if class_name is not None:
        params = _primary_constructor_params(source_text, class_name)
        if params is None:
            params = _conventional_constructor_params(source_text, class_name)
        for type_name, parameter_name in parse_parameters(params or ""):
            if type_name not in found and include(type_name):
                add(type_name, parameter_name=parameter_name)

    for match in FIELD_PATTERN.finditer(source_text):
        type_name, field_name = match.group("type"), match.group("name")
        if type_name in found:
            found[type_name] = replace(found[type_name], field_name=field_name)
        elif include(type_name):
            add(type_name, field_name=field_name)

    logger.debug(
        "Found %d dependencies in class %s", len(found), class_name or "<anonymous>"
    )
    return list(found.values())


def _primary_constructor_params(source: str, class_name: str) -> Optional[str]:
    """Parameter text of ``class Name(...)``, or None without a primary constructor."""
    pattern = re.compile(rf"\bclass\s+{re.escape(class_name)}\s*(?:{GENERIC_ARGS})?\s*\(")
    match = pattern.search(source)
    if match is None:
        return None
    open_index = match.end() - 1
    close_index = find_closing(source, open_index)
    if close_index == -1:
        return None
    return source[open_index + 1 : close_index]


def _conventional_constructor_params(source: str, class_name: str) -> Optional[str]:
    """Parameter text of the first ``Name(...)`` followed by a constructor body.

    The body may be preceded by a ``: base(...)`` or ``: this(...)`` call and
    may be expression-bodied. Object creations (``new Name(...)``) are skipped.
    """
    pattern = re.compile(rf"(?<![\w.]){re.escape(class_name)}\s*\(")
    scanned_to = 0
    for match in pattern.finditer(source):
        # Candidates nested in an earlier candidate's parentheses
        if match.start() < scanned_to:
            continue
        if _PRECEDED_BY_NEW.search(source, max(0, match.start() - 64), match.start()):
            continue
        open_index = match.end() - 1
        close_index = find_closing(source, open_index)
        if close_index == -1:
            return None
        scanned_to = close_index

        position = close_index + 1
        initializer = _CONSTRUCTOR_INITIALIZER.match(source, position)
        if initializer is not None:
            initializer_close = find_closing(source, initializer.end() - 1)
            if initializer_close == -1:
                continue
            position = initializer_close + 1

        if _CONSTRUCTOR_BODY.match(source, position):
            return source[open_index + 1 : close_index]
    return None
