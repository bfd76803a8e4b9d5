from __future__ import annotations

from chem_balancer.tokens import DotToken, ElementToken, GroupToken, NumberToken, tokenize


def test_group_with_multiplier():
    assert tokenize("Mg(OH)2") == [
        ElementToken("Mg", 1),
        GroupToken("("),
        ElementToken("O", 1),
        ElementToken("H", 1),
        GroupToken(")"),
        NumberToken(2),
    ]


def test_hydrate_dot_and_number():
    expected = [
        ElementToken("Cu"),
        ElementToken("S"),
        ElementToken("O", 4),
        DotToken(),
        NumberToken(5),
        ElementToken("H", 2),
        ElementToken("O"),
    ]
    assert tokenize("CuSO4·5H2O") == expected
    # ASCII period is the same separator
    assert tokenize("CuSO4.5H2O") == expected


def test_whitespace_is_ignored():
    # digits separated from their symbol by spaces still attach to it
    assert tokenize(" H 2 O ") == [ElementToken("H", 2), ElementToken("O")]


def test_unknown_characters_are_skipped():
    assert tokenize("H2$O!") == [ElementToken("H", 2), ElementToken("O")]
    assert tokenize("h2o") == [NumberToken(2)]


def test_symbol_is_at_most_two_letters():
    assert tokenize("Uuo") == [ElementToken("Uu")]
    assert tokenize("C12H22O11") == [
        ElementToken("C", 12),
        ElementToken("H", 22),
        ElementToken("O", 11),
    ]


def test_bracket_families():
    toks = tokenize("[{()}]")
    assert [t.char for t in toks] == list("[{()}]")
    assert [t.is_open for t in toks] == [True, True, True, False, False, False]
    assert all(t.is_close for t in toks[3:])


def test_empty():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_overlong_digit_runs_are_skipped():
    assert tokenize("H" + "1" * 5000 + "O") == [ElementToken("O")]
    assert tokenize("(OH)" + "2" * 5000) == [
        GroupToken("("),
        ElementToken("O"),
        ElementToken("H"),
        GroupToken(")"),
    ]
    # long but within the limit still parses
    assert tokenize("H" + "9" * 30) == [ElementToken("H", int("9" * 30))]
