from toysat.bool.sat.tokenizer import Token, Tokenizer, TokType, render_tokens, tokenize
from toysat.tests.grammar_gene import gen_formula


def kinds(text):
    return [tok.kind for tok in tokenize(text)]


def test_operators_and_literals():
    tokens = tokenize("a & ~b")
    assert [tok.kind for tok in tokens] == [
        TokType.LITERAL, TokType.AND, TokType.NOT, TokType.LITERAL,
    ]
    assert tokens[0].text == "a"
    assert tokens[3].text == "b"


def test_all_symbols():
    assert kinds("&|~()") == [
        TokType.AND, TokType.OR, TokType.NOT,
        TokType.OPEN_BRACKET, TokType.CLOSE_BRACKET,
    ]


def test_literal_names_use_maximal_munch():
    tokens = tokenize("abc12 x9y&z")
    assert [tok.text for tok in tokens if tok.is_literal()] == ["abc12", "x9y", "z"]


def test_literal_must_start_with_letter():
    tokens = tokenize("1a")
    assert tokens == (Token(TokType.UNKNOWN, "1"), Token(TokType.LITERAL, "a"))


def test_whitespace_is_skipped():
    assert kinds(" a\t&\n b \r\n") == [TokType.LITERAL, TokType.AND, TokType.LITERAL]


def test_unknown_characters():
    tokens = tokenize("a # b é")
    assert [tok.kind for tok in tokens] == [
        TokType.LITERAL, TokType.UNKNOWN, TokType.LITERAL, TokType.UNKNOWN,
    ]
    assert tokens[1].text == "#"


def test_empty_and_blank_input():
    assert tokenize("") == ()
    assert tokenize("  \t ") == ()


def test_tokenizer_keeps_returning_eof():
    tokenizer = Tokenizer("a")
    assert tokenizer.get_token() == Token(TokType.LITERAL, "a")
    assert tokenizer.get_token().is_eof()
    assert tokenizer.get_token().is_eof()


def test_eof_is_not_part_of_sequence():
    assert not any(tok.is_eof() for tok in tokenize("a | b"))


def test_literals_start_unresolved():
    assert all(tok.index == -1 for tok in tokenize("a & b"))


def test_render():
    assert render_tokens(tokenize("~(mike&sally)|x")) == "~ ( mike & sally ) | x"
    assert render_tokens(tokenize("a $ b")) == "a $ b"
    assert render_tokens(()) == ""
    assert str(Token(TokType.EOF)) == "Eof"


def test_render_then_tokenize_is_identity():
    samples = ["a & ~b", "((x)|y1)&~~z", "a ! b", "1a & 2", ") ( ~"]
    samples += [gen_formula(5, 3, seed) for seed in range(30)]
    for text in samples:
        tokens = tokenize(text)
        assert tokenize(render_tokens(tokens)) == tokens, text
