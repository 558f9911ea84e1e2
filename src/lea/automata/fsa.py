import itertools
import sys
from collections import namedtuple

from cached_property import cached_property

from lea.support.finiteset import FiniteSet

# Marker constants


class Marker:
    """
    Represents a marker object.

    Markers are named sentinels that can never collide with a real label.

    Attributes:
        name (str): The name of the marker.

    Example:
        >>> marker = Marker("start")
        >>> repr(marker)
        '<start>'
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


EPSILON = Marker("EPSILON")


class MalformedAutomatonError(ValueError):
    """
    Exception raised when a transition or an automaton is built from values
    that are not states or symbols.

    States must be non-negative integers. Labels must be single-character
    strings or the EPSILON marker.
    """


def _check_state(state):
    if isinstance(state, bool) or not isinstance(state, int) or state < 0:
        raise MalformedAutomatonError(f"{state!r} is not a valid state")
    return state


def _check_label(label):
    if label is EPSILON:
        return label
    if not isinstance(label, str) or len(label) != 1:
        raise MalformedAutomatonError(f"{label!r} is not a valid label")
    return label


class Transition(namedtuple("Transition", ["start", "label", "end"])):
    """
    An immutable labelled edge ``(start, label, end)`` of an automaton.

    The label is either a single character or the EPSILON marker. Two
    transitions are equal if all three fields are equal, so an epsilon
    transition never equals a labelled transition between the same states.

    >>> str(Transition(0, "a", 1))
    '0 |-a-> 1'
    >>> str(Transition(0, EPSILON, 1))
    '0 |--> 1'
    """

    __slots__ = ()

    def __new__(cls, start, label, end):
        return super().__new__(
            cls, _check_state(start), _check_label(label), _check_state(end)
        )

    def is_epsilon(self):
        """
        Returns True if the transition consumes no input.
        """
        return self.label is EPSILON

    def __str__(self):
        if self.is_epsilon():
            return f"{self.start} |--> {self.end}"
        return f"{self.start} |-{self.label}-> {self.end}"


def _as_transition(t):
    if isinstance(t, Transition):
        return t
    start, label, end = t
    return Transition(start, label, end)


class Automaton:
    """
    Finite state automaton whose states are integers and whose transitions
    are labelled by characters or by EPSILON.

    An automaton has a name, a set of initial states, a set of final states
    and a set of transitions. The set of states is not stored: it is every
    state mentioned by the initials, the finals or a transition endpoint.

    Automata are immutable. The ``initials``, ``finals`` and ``transitions``
    properties return copies, and derived data (alphabet, states, indexes of
    the transitions) is computed once on first use. To build an automaton
    incrementally, use :class:`AutomatonBuilder`.

    Example:
        >>> a = Automaton("ab", initials=[0], finals=[2],
        ...               transitions=[(0, "a", 1), (1, "b", 2)])
        >>> a.accepts("ab")
        True
        >>> str(a)
        'ab = { initial 0; final 2; 0 |-a-> 1; 1 |-b-> 2; }'
    """

    __hash__ = None

    def __init__(self, name="", initials=(), finals=(), transitions=()):
        """
        Initializes an automaton.

        Args:
            name (str, optional): Name of the automaton, or of the language it
                recognizes. Defaults to "".
            initials (iterable, optional): Initial states.
            finals (iterable, optional): Final (accepting) states.
            transitions (iterable, optional): Transition objects or
                ``(start, label, end)`` tuples.

        Raises:
            MalformedAutomatonError: If a state or a label is invalid.
        """
        self._name = name
        self._initials = FiniteSet(_check_state(s) for s in initials)
        self._finals = FiniteSet(_check_state(s) for s in finals)
        self._transitions = FiniteSet(_as_transition(t) for t in transitions)

    @property
    def name(self):
        return self._name

    @property
    def initials(self):
        return self._initials.copy()

    @property
    def finals(self):
        return self._finals.copy()

    @property
    def transitions(self):
        return self._transitions.copy()

    def __len__(self):
        """
        Returns the number of states in the automaton.
        """
        return len(self._states)

    def __eq__(self, other):
        """
        Two automata are equal if they have the same name and equal sets of
        initial states, final states and transitions. Set equality is
        defined by double inclusion.
        """
        if not isinstance(other, Automaton):
            return NotImplemented
        return (
            self._name == other._name
            and self._initials == other._initials
            and self._finals == other._finals
            and self._transitions == other._transitions
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Derived data

    @cached_property
    def _states(self):
        states = self._initials.union(self._finals)
        for t in self._transitions:
            states.add(t.start)
            states.add(t.end)
        return states

    @cached_property
    def _alphabet(self):
        labels = {t.label for t in self._transitions if not t.is_epsilon()}
        return FiniteSet(sorted(labels))

    @cached_property
    def _epsilon_targets(self):
        targets = {}
        for t in self._transitions:
            if t.is_epsilon():
                targets.setdefault(t.start, []).append(t.end)
        return targets

    @cached_property
    def _targets(self):
        targets = {}
        for t in self._transitions:
            if not t.is_epsilon():
                targets.setdefault((t.start, t.label), []).append(t.end)
        return targets

    @cached_property
    def _deterministic(self):
        if self._initials.size() != 1:
            return False
        ends = {}
        for t in self._transitions:
            if t.is_epsilon():
                return False
            if ends.setdefault((t.start, t.label), t.end) != t.end:
                return False
        return True

    def states(self):
        """
        Returns the set of states of the automaton.

        A state is in the returned set if it is an initial state, a final
        state, or the start or end of any transition.

        Returns:
            FiniteSet: The states of the automaton.
        """
        return self._states.copy()

    def alphabet(self):
        """
        Returns the set of characters that label at least one transition.

        EPSILON is never part of the alphabet. The characters are enumerated
        in sorted order.

        Returns:
            FiniteSet: The alphabet of the automaton.
        """
        return self._alphabet.copy()

    def triples(self):
        """
        Generates the ``(start, label, end)`` triple of every transition.
        """
        for t in self._transitions:
            yield tuple(t)

    # Set-of-states semantics

    def epsilon_closure(self, from_states):
        """
        Returns the states reachable from ``from_states`` by following only
        epsilon transitions.

        The result is the smallest superset of ``from_states`` such that if a
        state x is in it and ``x |--> y`` is a transition, y is in it as well.

        Args:
            from_states (iterable): A set of states of the automaton.

        Returns:
            FiniteSet: The epsilon-closure of ``from_states``.

        Example:
            >>> a = Automaton(initials=[0], transitions=[(0, EPSILON, 1)])
            >>> str(a.epsilon_closure([0]))
            '{0, 1}'
        """
        targets = self._epsilon_targets
        closure = FiniteSet(from_states)
        frontier = list(closure)
        while frontier:
            state = frontier.pop()
            for dest in targets.get(state, ()):
                if dest not in closure:
                    closure.add(dest)
                    frontier.append(dest)
        return closure

    def move(self, from_states, symbol):
        """
        Returns the states reachable from ``from_states`` by following exactly
        one transition labelled ``symbol``.

        The epsilon-closure is not applied; compose with
        :meth:`epsilon_closure` where it is needed.

        Args:
            from_states (iterable): A set of states of the automaton.
            symbol (str): A character of the alphabet.

        Returns:
            FiniteSet: The states reached.
        """
        targets = self._targets
        result = FiniteSet()
        for state in from_states:
            result.update(targets.get((state, symbol), ()))
        return result

    def is_deterministic(self):
        """
        Checks whether the automaton is deterministic.

        An automaton is deterministic if it has exactly one initial state, no
        epsilon transition, and no two transitions leaving the same state
        with the same label towards different states.

        Returns:
            bool: True if the automaton is deterministic, False otherwise.
        """
        return self._deterministic

    def accepts(self, word):
        """
        Checks if a word is in the language of the automaton.

        Args:
            word (iterable): The symbols to read.

        Returns:
            bool: True if some run over the word ends in a final state.
        """
        current = self.epsilon_closure(self._initials)
        for symbol in word:
            current = self.epsilon_closure(self.move(current, symbol))
            if current.is_empty():
                return False
        return not current.isdisjoint(self._finals)

    def determinize(self, name=None):
        """
        Returns a deterministic automaton that recognizes the same language.

        See :func:`lea.automata.determinize.determinize`.

        Args:
            name (str, optional): Name of the result. Defaults to the name of
                this automaton.

        Returns:
            Automaton: A deterministic automaton.
        """
        from lea.automata.determinize import determinize

        return determinize(self, name=name)

    # Display

    def dump(self, stream=sys.stdout):
        """
        Prints a textual representation of the automaton to the specified
        stream, one state per line followed by its outgoing transitions.

        Initial states are prefixed with ``@`` and final states are followed
        by ``||``.

        Args:
            stream (file, optional): The stream to print to. Defaults to
                sys.stdout.

        Example:
            >>> Automaton(initials=[0], finals=[1],
            ...           transitions=[(0, "a", 1)]).dump()
            @ 0
                a -> 1
              1 ||
        """
        outgoing = {}
        for t in self._transitions:
            outgoing.setdefault(t.start, []).append(t)
        for src in sorted(self._states):
            beg = "@" if src in self._initials else " "
            if src in self._finals:
                print(beg, src, "||", file=stream)
            else:
                print(beg, src, file=stream)
            edges = sorted(outgoing.get(src, ()), key=lambda e: (str(e.label), e.end))
            for t in edges:
                print("   ", t.label, "->", t.end, file=stream)

    def __str__(self):
        parts = [f"{self._name} = {{ "]
        parts.extend(f"initial {s}; " for s in self._initials)
        parts.extend(f"final {s}; " for s in self._finals)
        parts.extend(f"{t}; " for t in self._transitions)
        parts.append("}")
        return "".join(parts)

    def __repr__(self):
        return (
            f"<Automaton {self._name!r} with {len(self)} states and "
            f"{len(self._transitions)} transitions>"
        )


class AutomatonBuilder:
    """
    Accumulates states and transitions and produces an immutable
    :class:`Automaton`.

    All sets grow by union, so adding the same state or transition twice is
    harmless.

    Example:
        >>> b = AutomatonBuilder("a_or_b")
        >>> b.add_initial_state(0)
        >>> b.add_transition(0, "a", 1)
        >>> b.add_transition(0, "b", 1)
        >>> b.add_final_state(1)
        >>> b.build().accepts("b")
        True
    """

    def __init__(self, name=""):
        self.name = name
        self.initials = FiniteSet()
        self.finals = FiniteSet()
        self.transitions = FiniteSet()

    def add_initial_state(self, state):
        self.initials.add(_check_state(state))

    def add_final_state(self, state):
        self.finals.add(_check_state(state))

    def add_transition(self, start, label, end):
        """
        Adds a transition from start to end with the given label.

        Args:
            start (int): The source state.
            label (str or Marker): A single character or EPSILON.
            end (int): The destination state.

        Raises:
            MalformedAutomatonError: If a state or the label is invalid.
        """
        self.transitions.add(Transition(start, label, end))

    def add_epsilon(self, start, end):
        self.transitions.add(Transition(start, EPSILON, end))

    def embed(self, other):
        """
        Copies all transitions of another automaton into this builder. The
        initial and final states of ``other`` are not copied.
        """
        self.transitions.update(other._transitions)

    def insert(self, src, other, dest):
        """
        Embeds another automaton and connects it between two states.

        ``src`` gets an epsilon transition to each initial state of ``other``
        and each final state of ``other`` gets an epsilon transition to
        ``dest``.

        Args:
            src (int): The state to connect from.
            other (Automaton): The automaton to embed.
            dest (int): The state to connect to.
        """
        self.embed(other)
        for initial in other._initials:
            self.add_epsilon(src, initial)
        for finalstate in other._finals:
            self.add_epsilon(finalstate, dest)

    def build(self):
        return Automaton(self.name, self.initials, self.finals, self.transitions)


# Useful functions


def renumber(automaton, base=0):
    """
    Renumbers the states of an automaton consecutively, starting from base.

    States are numbered in order of first appearance: initial states, then
    the endpoints of each transition, then any remaining final state.

    Args:
        automaton (Automaton): The automaton to renumber.
        base (int, optional): The first state number. Defaults to 0.

    Returns:
        Automaton: A copy of the automaton with renumbered states.
    """
    c = itertools.count(base)
    mapping = {}

    def remap(state):
        if state in mapping:
            newnum = mapping[state]
        else:
            newnum = next(c)
            mapping[state] = newnum
        return newnum

    initials = [remap(s) for s in automaton._initials]
    transitions = [
        (remap(t.start), t.label, remap(t.end)) for t in automaton._transitions
    ]
    finals = [remap(s) for s in automaton._finals]
    return Automaton(automaton.name, initials, finals, transitions)
