from edsh.tokenizer import Substitution, is_balanced, substitution_body, tokenize


def test_tokenize_words():
    assert tokenize('create Foo --with Rigidbody,Collider') == [
        'create', 'Foo', '--with', 'Rigidbody,Collider']


def test_tokenize_whitespace():
    assert tokenize('') == []
    assert tokenize('   ') == []
    assert tokenize('  a \t b  ') == ['a', 'b']


def test_tokenize_quotes():
    assert tokenize('select "My Object"') == ['select', 'My Object']
    assert tokenize('echo a"b c"d') == ['echo', 'ab cd']
    assert tokenize('echo ""') == ['echo']


def test_tokenize_unterminated_quote():
    assert tokenize('select "My Object') == ['select', 'My Object']


def test_tokenize_escape():
    assert tokenize(r'echo a\ b') == ['echo', 'a b']
    assert tokenize(r'echo \"a\"') == ['echo', '"a"']
    assert tokenize(r'echo "a\"b"') == ['echo', 'a"b']
    assert tokenize('echo a\\\\b') == ['echo', 'a\\b']


def test_tokenize_trailing_escape():
    assert tokenize('echo a\\') == ['echo', 'a\\']


def test_tokenize_substitution():
    assert tokenize('set $x $(list Foo)') == ['set', '$x', '$(list Foo)']


def test_tokenize_substitution_is_a_separate_token():
    tokens = tokenize('echo a$(echo b)c')
    assert tokens == ['echo', 'a', '$(echo b)', 'c']
    assert isinstance(tokens[2], Substitution)
    assert not isinstance(tokens[1], Substitution)


def test_tokenize_nested_substitution():
    line = 'echo $(echo $(list ^Root/*) "x y") z'
    assert tokenize(line) == ['echo', '$(echo $(list ^Root/*) "x y")', 'z']


def test_tokenize_substitution_keeps_escapes():
    assert tokenize(r'echo $(echo \) x)') == ['echo', r'$(echo \) x)']


def test_tokenize_quoted_substitution_is_text():
    assert tokenize('echo "$(a b)"') == ['echo', '$(a b)']
    assert not isinstance(tokenize('echo "$(a b)"')[1], Substitution)


def test_tokenize_unterminated_substitution():
    tokens = tokenize('set $x $(list (Foo)')
    assert tokens == ['set', '$x', '$(list (Foo)']
    assert substitution_body(tokens[2]) == 'list (Foo)'


def test_substitution_body():
    assert substitution_body('$(list Foo)') == 'list Foo'
    assert substitution_body('$(a $(b))') == 'a $(b)'
    assert Substitution('$(echo x)').inner == 'echo x'


def test_is_balanced():
    assert is_balanced('$(a (b))')
    assert not is_balanced('$(a (b)')
    assert is_balanced(r'$(a \()')
