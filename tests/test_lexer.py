from minnow.lexer import tokenize, Token


def types(source):
    return [t.type for t in tokenize(source)]


def test_let_statement_tokens():
    tokens = tokenize('let x = 5;')
    assert [t.type for t in tokens] == ['LET', 'IDENT', 'EQUALS', 'INT', 'SEMI', 'EOF']
    assert [t.value for t in tokens] == ['let', 'x', '', '5', '', '']


def test_operators():
    assert types('+-*/=;') == ['PLUS', 'MINUS', 'STAR', 'SLASH', 'EQUALS', 'SEMI', 'EOF']


def test_keywords_only_match_whole_words():
    tokens = tokenize('letter exit2 exit let LET')
    assert [(t.type, t.value) for t in tokens[:-1]] == [
        ('IDENT', 'letter'),
        ('IDENT', 'exit2'),
        ('EXIT', 'exit'),
        ('LET', 'let'),
        ('IDENT', 'LET'),
    ]


def test_digits_then_letters_split():
    tokens = tokenize('12abc')
    assert [(t.type, t.value) for t in tokens] == [('INT', '12'), ('IDENT', 'abc'), ('EOF', '')]


def test_unknown_characters_are_skipped():
    tokens = tokenize('a_b @ $ (1) # é')
    assert [(t.type, t.value) for t in tokens] == [
        ('IDENT', 'a'),
        ('IDENT', 'b'),
        ('INT', '1'),
        ('EOF', ''),
    ]


def test_empty_and_blank_input_yield_only_eof():
    assert types('') == ['EOF']
    assert types('  \n\t  ') == ['EOF']


def test_exactly_one_eof():
    tokens = tokenize('exit 1;\n\n')
    assert [t.type for t in tokens].count('EOF') == 1
    assert tokens[-1].type == 'EOF'


def test_positions():
    tokens = tokenize('let x\n  = 5;')
    assert (tokens[0].line, tokens[0].column) == (1, 1)
    assert (tokens[1].line, tokens[1].column) == (1, 5)
    assert (tokens[2].line, tokens[2].column) == (2, 3)


def test_tokens_are_plain_records():
    token = tokenize('x')[0]
    assert isinstance(token, Token)
    assert token == Token('IDENT', 'x', 1, 1)


def test_only_names_numbers_and_keywords_keep_text():
    tokens = tokenize('let a = b + 1 - 2 * 3 / c;')
    assert {t.value for t in tokens if t.type not in ('INT', 'IDENT', 'LET', 'EXIT')} == {''}
    assert [t.value for t in tokens if t.value] == ['let', 'a', 'b', '1', '2', '3', 'c']
