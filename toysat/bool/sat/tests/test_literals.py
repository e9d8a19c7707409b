from toysat.bool.sat.literals import LiteralUniverse, collect_literals, resolve_literals
from toysat.bool.sat.tokenizer import tokenize


def test_first_occurrence_order():
    universe = collect_literals(tokenize("b & a | b & (c | a)"))
    assert universe.names == ("b", "a", "c")
    assert list(universe) == ["b", "a", "c"]
    assert str(universe) == "b a c"


def test_no_alphabetic_sorting():
    assert collect_literals(tokenize("zeta & alpha")).names == ("zeta", "alpha")


def test_names_are_case_sensitive():
    assert collect_literals(tokenize("a & A")).names == ("a", "A")


def test_no_literals():
    assert len(collect_literals(tokenize("& | ~ ( )"))) == 0


def test_lookup():
    universe = LiteralUniverse(["x", "y", "x"])
    assert len(universe) == 2
    assert universe.index_of("y") == 1
    assert universe.index_of("z") is None
    assert "x" in universe
    assert "z" not in universe
    assert universe[0] == "x"


def test_equality():
    assert LiteralUniverse(["a", "b"]) == LiteralUniverse(["a", "b"])
    assert LiteralUniverse(["a", "b"]) != LiteralUniverse(["b", "a"])


def test_resolve_attaches_indices():
    tokens = tokenize("b & ~a | b")
    universe = collect_literals(tokens)
    resolved = resolve_literals(tokens, universe)
    assert [tok.index for tok in resolved if tok.is_literal()] == [0, 1, 0]
    # operators and input tokens untouched
    assert resolved[1] == tokens[1]
    assert all(tok.index == -1 for tok in tokens)


def test_resolve_against_other_universe():
    tokens = tokenize("a & c")
    resolved = resolve_literals(tokens, LiteralUniverse(["a", "b"]))
    assert resolved[0].index == 0
    assert resolved[2].index == -1
