"""Lexical patterns and scanners for C#-like class source.

This is a deliberately scoped pattern matcher, not a parser. The grammar
subset it understands:

    class_decl   := "class" NAME [GENERICS] ["(" PARAMS ")"]
    field_decl   := "private" "readonly" TYPE NAME ("=" | ";")
    method_decl  := MODIFIER* RETURN_TYPE NAME [GENERICS] "(" PARAMS ")"
                    ["where" CONSTRAINT] ("{" | "=>")
    TYPE         := IDENT ("." IDENT)* [GENERICS] ["[]"] ["?"]
    GENERICS     := "<" (ARG | "<" ARG ">")+ ">"      (one nested level)
    RETURN_TYPE  := TYPE, with generics balanced to any depth

Known limitations: generic constraints containing braces, nested classes,
conditional compilation directives, tuple return types, and braces inside
string literals or comments are not understood.

Declarations are found from a ``NAME (`` anchor: the parameter list and
body opener are checked forward from the anchor, and the return type and
modifiers are read backward from it. No step retries a split of the same
words, so detection stays linear in the length of the text.
"""

from __future__ import annotations

import re
from bisect import bisect_left
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

CLASS_NAME_PATTERN = re.compile(r"\bclass\s+(?P<name>[A-Za-z_]\w*)")

# Generic argument list with at most one nested level: <A, B<C>>
GENERIC_ARGS = r"<(?:[^<>;{}()=]|<[^<>;{}()=]*>)*>"

TYPE_TOKEN = rf"[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*(?:{GENERIC_ARGS})?(?:\[\])?\??"

PARAMETER_PATTERN = re.compile(
    rf"(?P<type>{TYPE_TOKEN})\s+(?P<name>@?[A-Za-z_]\w*)"
)

FIELD_PATTERN = re.compile(
    rf"""
    \bprivate\s+readonly\s+
    (?P<type>{TYPE_TOKEN})\s+
    (?P<name>[A-Za-z_]\w*)\s*
    (?:=|;)
    """,
    re.VERBOSE,
)

METHOD_MODIFIERS = frozenset(
    {
        "public",
        "private",
        "protected",
        "internal",
        "static",
        "async",
        "virtual",
        "override",
        "sealed",
        "abstract",
        "new",
        "extern",
        "unsafe",
        "partial",
    }
)

# An identifier directly followed by "(" or a generic list: the only
# places a method name can sit.
_NAME_ANCHOR = re.compile(r"(?<![\w.])(?P<name>[A-Za-z_]\w*)\s*(?=[(<])")

# Type parameters of a generic method: Map<TIn, TOut>(...)
_TYPE_PARAMETERS = re.compile(rf"{GENERIC_ARGS}\s*")

# What may follow a parameter list: an optional constraint clause of at
# most 256 characters, then the body opener. Possessive, never rescanned.
_SIGNATURE_TAIL = re.compile(r"\s*+(?:where\s[^{};=]{0,256}+\s*+)?(?P<body>\{|=>)")

_QUALIFIED_NAME = re.compile(r"[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*")

# Characters that cannot appear inside a generic argument list.
_NOT_IN_GENERIC_ARGS = frozenset(";{}()=")

# Longest generic argument list considered, in characters.
MAX_GENERIC_CHARS = 512

# Words that can sit in the name slot of a signature but open a
# statement, not a method: `else if (x) {`, `await foreach (...) {`.
CONTROL_KEYWORDS = frozenset(
    {
        "if",
        "while",
        "for",
        "foreach",
        "switch",
        "catch",
        "using",
        "lock",
        "fixed",
        "when",
        "nameof",
        "typeof",
        "sizeof",
        "checked",
        "unchecked",
        "return",
    }
)

# Words that can sit in the "return type" slot but are statements or
# expressions: `return Build(x) => ...`, `new Order(a) { ... }`.
STATEMENT_KEYWORDS = frozenset(
    {
        "return",
        "new",
        "await",
        "else",
        "throw",
        "yield",
        "in",
        "is",
        "as",
        "case",
        "goto",
        "do",
        "class",
        "struct",
        "record",
        "interface",
        "namespace",
        "using",
        "var",
    }
)

PARAMETER_MODIFIERS = frozenset({"ref", "in", "out", "params", "this", "scoped", "readonly"})

# Reserved words, including the built-in type aliases. None of these can
# name an injected dependency.
CSHARP_KEYWORDS = frozenset(
    """
    abstract as base bool break byte case catch char checked class const
    continue decimal default delegate do double else enum event explicit
    extern false finally fixed float for foreach goto if implicit in int
    interface internal is lock long namespace new null object operator out
    override params private protected public readonly ref return sbyte
    sealed short sizeof stackalloc static string struct switch this throw
    true try typeof uint ulong unchecked unsafe ushort using virtual void
    volatile while dynamic var nint nuint record
    """.split()
)

_ATTRIBUTE = re.compile(r"\[[^\[\]]+\]")
_GENERIC_ARGS = re.compile(r"<.*>", re.DOTALL)

_OPENERS = {"(": ")", "<": ">", "[": "]", "{": "}"}


def find_class_name(source: str) -> Optional[str]:
    """Return the name of the first ``class <Name>`` declaration, if any."""
    match = CLASS_NAME_PATTERN.search(source)
    return match.group("name") if match else None


def base_type_name(type_name: str) -> str:
    """``IOptions<Settings>`` -> ``IOptions``; array and nullable marks are dropped too."""
    return _GENERIC_ARGS.sub("", type_name).rstrip("?").removesuffix("[]")


def is_keyword(word: str) -> bool:
    return word in CSHARP_KEYWORDS


def whole_word(identifier: str) -> re.Pattern[str]:
    """Compile a whole-word pattern for an identifier."""
    return re.compile(rf"(?<!\w){re.escape(identifier)}(?!\w)")


def find_closing(source: str, open_index: int, opener: str = "(", closer: str = ")") -> int:
    """Return the index of the delimiter closing the one at *open_index*.

    Returns -1 when the text ends before depth returns to zero.
    """
    depth = 0
    for i in range(open_index, len(source)):
        char = source[i]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return i
    return -1


@dataclass(frozen=True)
class MethodSignature:
    """A method declaration located in source text.

    ``start`` is the offset of the first modifier (or of the return type
    when there is none); ``body_index`` is the offset of ``{`` or ``=>``.
    """

    name: str
    return_type: str
    start: int
    name_index: int
    body_index: int
    body: str

    @property
    def expression_bodied(self) -> bool:
        return self.body == "=>"


def iter_method_signatures(source: str) -> Iterator[MethodSignature]:
    """Yield every method declaration in *source*, in source order.

    Anchors that fail any part of ``method_decl`` are skipped, as are
    anchors whose return-type slot holds a modifier (constructors,
    ``new Order(...) {`` initializers).
    """
    for anchor in _NAME_ANCHOR.finditer(source):
        position = anchor.end()
        if source[position] == "<":
            type_parameters = _TYPE_PARAMETERS.match(source, position)
            if type_parameters is None or not source.startswith("(", type_parameters.end()):
                continue
            position = type_parameters.end()

        params_end = _parameter_list_end(source, position)
        if params_end == -1:
            continue
        tail = _SIGNATURE_TAIL.match(source, params_end)
        if tail is None:
            continue

        name_index = anchor.start()
        type_end = _skip_space_back(source, name_index)
        if type_end == name_index:
            continue
        type_start = _return_type_start(source, type_end)
        if type_start == -1:
            continue
        return_type = source[type_start:type_end]
        if return_type in METHOD_MODIFIERS:
            continue

        yield MethodSignature(
            name=anchor.group("name"),
            return_type=return_type,
            start=_modifiers_start(source, type_start),
            name_index=name_index,
            body_index=tail.start("body"),
            body=tail.group("body"),
        )


def _generic_args_start(source: str, close_index: int) -> int:
    """Offset of the ``<`` matching the ``>`` at *close_index*, or -1.

    Nesting may go to any depth. A character that cannot sit in a type
    argument list, or a list longer than ``MAX_GENERIC_CHARS``, ends the
    search.
    """
    depth = 0
    for i in range(close_index, max(-1, close_index - MAX_GENERIC_CHARS), -1):
        char = source[i]
        if char == ">":
            depth += 1
        elif char == "<":
            depth -= 1
            if depth == 0:
                return i
        elif char in _NOT_IN_GENERIC_ARGS:
            return -1
    return -1


def _parameter_list_end(source: str, open_index: int) -> int:
    """Offset just past the ``)`` closing *open_index*, or -1.

    One nested level of parentheses is allowed (default values such as
    ``default(T)``). Statement punctuation ends the search.
    """
    depth = 0
    for i in range(open_index, len(source)):
        char = source[i]
        if char == "(":
            depth += 1
            if depth > 2:
                return -1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return i + 1
        elif char in ";{}":
            return -1
    return -1


def _return_type_start(source: str, end: int) -> int:
    """Offset where the type token ending at *end* starts, or -1."""
    i = end
    if i > 0 and source[i - 1] == "?":
        i -= 1
    if source.endswith("[]", 0, i):
        i -= 2
    if i > 0 and source[i - 1] == ">":
        i = _generic_args_start(source, i - 1)
        if i == -1:
            return -1
    start = i
    while start > 0 and _is_name_char(source[start - 1], dotted=True):
        start -= 1
    if start == i or not _QUALIFIED_NAME.fullmatch(source, start, i):
        return -1
    return start


def _modifiers_start(source: str, type_start: int) -> int:
    """Walk back over modifier keywords preceding the return type."""
    start = type_start
    while True:
        word_end = _skip_space_back(source, start)
        if word_end == start:
            return start
        word_start = word_end
        while word_start > 0 and _is_name_char(source[word_start - 1]):
            word_start -= 1
        if source[word_start:word_end] not in METHOD_MODIFIERS:
            return start
        if word_start > 0 and source[word_start - 1] == ".":
            return start
        start = word_start


def _is_name_char(char: str, dotted: bool = False) -> bool:
    return char.isalnum() or char == "_" or (dotted and char == ".")


def _skip_space_back(source: str, index: int) -> int:
    while index > 0 and source[index - 1].isspace():
        index -= 1
    return index


def match_braces(source: str) -> dict[int, int]:
    """Pair every ``{`` with the offset just past its closing ``}``.

    One pass with an explicit depth counter. Closing braces seen at depth
    zero are ignored; blocks still open at end of text map to
    ``len(source)``.
    """
    ends: dict[int, int] = {}
    open_at: list[int] = []
    depth = 0
    for i, char in enumerate(source):
        if char == "{":
            open_at.append(i)
            depth += 1
        elif char == "}" and depth > 0:
            ends[open_at.pop()] = i + 1
            depth -= 1
    for index in open_at:
        ends[index] = len(source)
    return ends


def find_statement_end(
    source: str, start: int, semicolons: Optional[Sequence[int]] = None
) -> int:
    """Return the offset just past the first ``;`` at or after *start*.

    *semicolons* holds the sorted offsets of every ``;`` in *source*; with
    it the lookup is a binary search instead of a rescan of the text.
    """
    if semicolons is None:
        end = source.find(";", start)
    else:
        i = bisect_left(semicolons, start)
        end = semicolons[i] if i < len(semicolons) else -1
    return len(source) if end == -1 else end + 1


def split_top_level(text: str, separator: str = ",") -> list[str]:
    """Split on *separator* where it is not nested in ``<>``, ``()``, ``[]`` or ``{}``."""
    parts: list[str] = []
    stack: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(_OPENERS[char])
        elif stack and char == stack[-1]:
            stack.pop()
        elif char == separator and not stack:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def parse_parameters(params: str) -> list[tuple[str, str]]:
    """Parse a constructor parameter list into ``(type, name)`` pairs.

    Attributes and parameter modifiers are dropped before matching. Parts
    without a ``<type> <name>`` pair (a lone keyword, ``__arglist``) are
    skipped.
    """
    pairs: list[tuple[str, str]] = []
    for part in split_top_level(params):
        part = _ATTRIBUTE.sub(" ", part).split("=", 1)[0]
        words = part.split()
        while words and words[0] in PARAMETER_MODIFIERS:
            words.pop(0)
        match = PARAMETER_PATTERN.search(" ".join(words))
        if match:
            pairs.append((match.group("type"), match.group("name").lstrip("@")))
    return pairs
