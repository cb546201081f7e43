"""Tests for analysis/patterns.py - regexes and forward scanners."""

import time

from srp_insight.analysis.patterns import (
    base_type_name,
    find_class_name,
    find_closing,
    find_statement_end,
    is_keyword,
    iter_method_signatures,
    match_braces,
    parse_parameters,
    split_top_level,
    whole_word,
)


class TestClassName:
    def test_first_class_wins(self):
        assert find_class_name("public class Alpha { } class Beta { }") == "Alpha"

    def test_no_class(self):
        assert find_class_name("interface IFoo { }") is None

    def test_word_boundary(self):
        """'subclassX Foo' is not a class declaration."""
        assert find_class_name("// subclassX Foo\npublic class Real") == "Real"


class TestBaseTypeName:
    def test_strips_generics(self):
        assert base_type_name("IOptions<Settings>") == "IOptions"

    def test_strips_nested_generics(self):
        assert base_type_name("IRepository<Dictionary<string, int>>") == "IRepository"

    def test_strips_nullable_and_array(self):
        assert base_type_name("IFoo?") == "IFoo"
        assert base_type_name("IFoo[]") == "IFoo"

    def test_plain_name_unchanged(self):
        assert base_type_name("IOrderService") == "IOrderService"


class TestKeywords:
    def test_modifiers_are_keywords(self):
        for word in ("public", "class", "private", "readonly", "static"):
            assert is_keyword(word)

    def test_builtin_types_are_keywords(self):
        assert is_keyword("string")
        assert is_keyword("int")

    def test_type_names_are_not_keywords(self):
        assert not is_keyword("IOrderService")
        assert not is_keyword("String")


class TestWholeWord:
    def test_matches_exact_identifier(self):
        assert whole_word("_order").search("_order.Save();")

    def test_rejects_prefix_match(self):
        assert whole_word("_order").search("_orderService.Save();") is None

    def test_rejects_suffix_match(self):
        assert whole_word("order").search("var preorder = 1;") is None

    def test_escapes_identifier(self):
        assert whole_word("IRepo<Order>").search("IRepo<Order> repo")


class TestScanners:
    def test_find_closing_nested(self):
        text = "(a, (b, c), d)"
        assert find_closing(text, 0) == len(text) - 1

    def test_find_closing_unbalanced(self):
        assert find_closing("(a, (b)", 0) == -1

    def test_block_end_nested(self):
        text = "void M() { if (x) { y(); } } void N() { }"
        end = match_braces(text)[text.index("{")]
        assert text[:end] == "void M() { if (x) { y(); } }"

    def test_block_end_ignores_leading_closers(self):
        """Closing braces before the first opening brace are not the end."""
        text = "} void M() { } tail"
        end = match_braces(text)[text.index("{")]
        assert text[:end] == "} void M() { }"

    def test_block_end_unclosed(self):
        text = "void M() { if (x) {"
        ends = match_braces(text)
        assert ends[text.index("{")] == len(text)
        assert ends[text.rindex("{")] == len(text)

    def test_statement_end(self):
        text = "=> 42; int x;"
        assert text[: find_statement_end(text, 0)] == "=> 42;"

    def test_statement_end_missing_semicolon(self):
        assert find_statement_end("=> 42", 0) == 5

    def test_statement_end_with_known_semicolons(self):
        text = "=> a; => b; => c"
        semicolons = [4, 10]
        assert find_statement_end(text, 0, semicolons) == 5
        assert find_statement_end(text, 5, semicolons) == 11
        assert find_statement_end(text, 11, semicolons) == len(text)


class TestSplitTopLevel:
    def test_simple(self):
        assert split_top_level("IA a, IB b") == ["IA a", "IB b"]

    def test_generic_commas_are_not_split(self):
        assert split_top_level("IDictionary<string, int> map, IB b") == [
            "IDictionary<string, int> map",
            "IB b",
        ]

    def test_empty(self):
        assert split_top_level("   ") == []


class TestParseParameters:
    def test_pairs(self):
        assert parse_parameters("IA a, IB b") == [("IA", "a"), ("IB", "b")]

    def test_multiline(self):
        assert parse_parameters("\n    IA a,\n    IB b") == [("IA", "a"), ("IB", "b")]

    def test_generic_type(self):
        assert parse_parameters("IRepository<Order> orders") == [("IRepository<Order>", "orders")]

    def test_attributes_and_defaults_dropped(self):
        pairs = parse_parameters("[FromServices] IClock clock, ILogger<Foo> logger = null")
        assert pairs == [("IClock", "clock"), ("ILogger<Foo>", "logger")]

    def test_modifiers_dropped(self):
        pairs = parse_parameters("ref int count, params IHandler[] handlers")
        assert pairs == [("int", "count"), ("IHandler[]", "handlers")]

    def test_verbatim_identifier(self):
        assert parse_parameters("IEvents @event") == [("IEvents", "event")]

    def test_lone_keyword_skipped(self):
        assert parse_parameters("public") == []


def _signatures(text):
    return list(iter_method_signatures(text))


class TestMethodSignatures:
    def test_block_method(self):
        (sig,) = _signatures("    public void ProcessOrder(Order order)\n    {")
        assert sig.name == "ProcessOrder"
        assert sig.return_type == "void"
        assert sig.body == "{"
        assert not sig.expression_bodied

    def test_expression_bodied(self):
        (sig,) = _signatures("public int Method2() => 42;")
        assert sig.name == "Method2"
        assert sig.expression_bodied

    def test_start_covers_modifiers(self):
        text = "  protected internal static async Task Run() { }"
        (sig,) = _signatures(text)
        assert text[sig.start :].startswith("protected internal static async Task Run")
        assert text[sig.name_index :].startswith("Run(")
        assert text[sig.body_index] == "{"

    def test_generic_return_type(self):
        (sig,) = _signatures("public async Task<IReadOnlyCollection<Item>> GetItems(int id) {")
        assert sig.return_type == "Task<IReadOnlyCollection<Item>>"
        assert sig.name == "GetItems"

    def test_three_level_generic_return_type(self):
        text = "public async Task<Dictionary<string, List<Order>>> GroupOrders() {"
        (sig,) = _signatures(text)
        assert sig.return_type == "Task<Dictionary<string, List<Order>>>"
        assert sig.name == "GroupOrders"
        assert sig.start == 0

    def test_nullable_array_and_qualified_return_types(self):
        text = "int? A() => 1; Order[] B() => x; System.IO.Stream C() { }"
        assert [(s.return_type, s.name) for s in _signatures(text)] == [
            ("int?", "A"),
            ("Order[]", "B"),
            ("System.IO.Stream", "C"),
        ]

    def test_generic_method_and_constraint(self):
        (sig,) = _signatures("public T Load<T>(string key) where T : class, new() {")
        assert sig.name == "Load"
        assert sig.return_type == "T"

    def test_call_statement_is_not_a_method(self):
        assert _signatures("        _orderService.Process(order);") == []

    def test_constructor_and_initializer_skipped(self):
        text = "public Shop(IA a) { var o = new Order(a) { Id = 1 }; }"
        assert _signatures(text) == []

    def test_unbalanced_generic_return_type(self):
        assert _signatures("if (a < b) Foo() {") == []


class TestSignatureScanTime:
    """Detection must stay linear on long runs of keyword-like words."""

    def test_long_modifier_run(self):
        text = "class C {\n" + "public " * 12000 + "\n}"
        started = time.perf_counter()
        assert _signatures(text) == []
        assert time.perf_counter() - started < 2.0

    def test_long_modifier_run_before_method(self):
        text = "class C {\n" + "public static " * 6000 + "void Run() { }\n}"
        started = time.perf_counter()
        (sig,) = _signatures(text)
        assert time.perf_counter() - started < 2.0
        assert sig.name == "Run"
        assert text[sig.start :].startswith("public static public")

    def test_many_unbalanced_generics(self):
        text = "x" + " a < b" * 20000 + " Foo() { }"
        started = time.perf_counter()
        assert [s.name for s in _signatures(text)] == ["Foo"]
        assert time.perf_counter() - started < 2.0
