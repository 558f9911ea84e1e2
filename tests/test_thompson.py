from lea.automata import Automaton, ThompsonBuilder


def test_char():
    tb = ThompsonBuilder()
    n = tb.char("a")
    assert n.accepts("a")
    assert not n.accepts("")
    assert not n.accepts("aa")
    assert len(n) == 2


def test_epsilon():
    n = ThompsonBuilder().epsilon()
    assert n.accepts("")
    assert not n.accepts("a")


def test_charset():
    n = ThompsonBuilder().charset("abc")
    for c in "abc":
        assert n.accepts(c)
    assert not n.accepts("d")
    assert not n.accepts("ab")


def test_string():
    tb = ThompsonBuilder()
    n = tb.string("hello")
    assert n.accepts("hello")
    assert not n.accepts("hell")
    assert not n.accepts("helloo")
    assert tb.string("").accepts("")


def test_choice():
    tb = ThompsonBuilder()
    n = tb.choice(tb.string("ab"), tb.char("c"))
    assert n.accepts("ab")
    assert n.accepts("c")
    assert not n.accepts("abc")
    assert not n.accepts("")


def test_concat():
    tb = ThompsonBuilder()
    n = tb.concat(tb.char("a"), tb.char("b"))
    assert n.accepts("ab")
    assert not n.accepts("a")
    assert not n.accepts("ba")


def test_concat_same_operand():
    tb = ThompsonBuilder()
    a = tb.char("a")
    n = tb.concat(a, a)
    assert n.accepts("aa")
    assert not n.accepts("a")
    assert not n.accepts("aaa")


def test_star():
    tb = ThompsonBuilder()
    n = tb.star(tb.string("ab"))
    for word in ("", "ab", "abab", "ababab"):
        assert n.accepts(word)
    for word in ("a", "aba", "ba"):
        assert not n.accepts(word)


def test_plus():
    tb = ThompsonBuilder()
    n = tb.plus(tb.char("a"))
    assert not n.accepts("")
    assert n.accepts("a")
    assert n.accepts("aaaa")
    assert not n.accepts("ab")


def test_question():
    tb = ThompsonBuilder()
    n = tb.concat(tb.question(tb.char("a")), tb.char("b"))
    assert n.accepts("b")
    assert n.accepts("ab")
    assert not n.accepts("aab")


def test_foreign_operands():
    # Automata built elsewhere may reuse the builder's state numbers
    x = Automaton(initials=[0], finals=[1], transitions=[(0, "x", 1)])
    tb = ThompsonBuilder()
    n = tb.concat(tb.char("a"), x)
    assert n.accepts("ax")
    assert not n.accepts("a")
    assert not n.accepts("x")


def test_fresh_states():
    tb = ThompsonBuilder(start=100)
    a = tb.char("a")
    b = tb.char("b")
    assert min(a.states()) == 100
    assert a.states().isdisjoint(b.states())
    assert tb.new_state() == 104


def test_determinize_built_automaton():
    tb = ThompsonBuilder()
    # (a|b)*abb
    n = tb.concat(tb.star(tb.charset("ab")), tb.string("abb"))
    assert not n.is_deterministic()

    d = n.determinize()
    assert d.is_deterministic()
    for word in ("abb", "aabb", "babb", "ababb"):
        assert d.accepts(word)
    for word in ("", "ab", "abba", "bbb"):
        assert not d.accepts(word)
    assert len(d) == 5
