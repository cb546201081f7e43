"""Method span detection and per-method dependency usage."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

from ..logging_config import get_logger
from ..models import DependencyDescriptor, MethodUsage
from .patterns import (
    CONTROL_KEYWORDS,
    STATEMENT_KEYWORDS,
    find_class_name,
    find_statement_end,
    iter_method_signatures,
    match_braces,
    whole_word,
)

logger = get_logger(__name__)


def extract_method_usages(
    source_text: str, dependencies: Sequence[DependencyDescriptor]
) -> list[MethodUsage]:
    """Map each method in *source_text* to the dependencies it references.

    A dependency counts as used when its parameter name or field name occurs
    as a whole word anywhere in the method's span. Constructors and methods
    that touch no dependency are left out.

    Args:
        source_text: Source of a single C#-like class
        dependencies: Output of ``extract_dependencies`` for the same text

    Returns:
        Usages in source order, each with a non-empty ``dependency_keys``
    """
    class_name = find_class_name(source_text) or ""
    block_ends = match_braces(source_text)
    semicolons = [i for i, char in enumerate(source_text) if char == ";"]
    # Sorted offsets of every whole-word occurrence, per dependency
    occurrences = [
        (
            dep.type_name,
            sorted(
                match.start()
                for name in dep.identifiers
                for match in whole_word(name).finditer(source_text)
            ),
        )
        for dep in dependencies
    ]

    usages: list[MethodUsage] = []
    scanned = 0
    for signature in iter_method_signatures(source_text):
        name = signature.name
        if name == class_name or name in CONTROL_KEYWORDS:
            continue
        if signature.return_type in STATEMENT_KEYWORDS:
            continue
        scanned += 1

        start = signature.start
        if signature.expression_bodied:
            end = find_statement_end(source_text, signature.body_index, semicolons)
        else:
            end = block_ends[signature.body_index]

        keys = frozenset(
            type_name
            for type_name, offsets in occurrences
            if _occurs_within(offsets, start, end)
        )
        if keys:
            usages.append(
                MethodUsage(
                    method_name=name,
                    start_index=start,
                    end_index=end,
                    dependency_keys=keys,
                    name_index=signature.name_index,
                )
            )

    logger.debug("Scanned %d methods, %d use dependencies", scanned, len(usages))
    return usages


def _occurs_within(offsets: list[int], start: int, end: int) -> bool:
    i = bisect_left(offsets, start)
    return i < len(offsets) and offsets[i] < end
