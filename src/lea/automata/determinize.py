"""
Subset construction: converts an automaton with epsilon transitions and
non-deterministic choices into an equivalent deterministic automaton.

The states of the deterministic automaton are indices into a table of
discovered sets of states of the original automaton. Entry 0 is the
epsilon-closure of the initial states. Entries are discovered by following
each symbol of the alphabet from existing entries, and no two entries are
ever equal as sets, which bounds the table by the powerset of the original
states and guarantees termination.
"""

from collections import deque

from loguru import logger

from lea.automata.fsa import Automaton, Transition
from lea.support.finiteset import FiniteSet


def _explore(automaton):
    finals = automaton.finals
    alphabet = automaton.alphabet()

    table = [automaton.epsilon_closure(automaton.initials)]
    index = {table[0].frozen(): 0}
    dfa_finals = FiniteSet()
    dfa_transitions = FiniteSet()
    if not table[0].isdisjoint(finals):
        dfa_finals.add(0)

    queue = deque([0])
    while queue:
        i = queue.popleft()
        current = table[i]
        for symbol in alphabet:
            target = automaton.epsilon_closure(automaton.move(current, symbol))
            if target.is_empty():
                # No transition: the result may be a partial automaton
                continue

            key = target.frozen()
            j = index.get(key)
            if j is None:
                table.append(target)
                j = len(table) - 1
                index[key] = j
                # Finality is decided once, when the entry is created
                if not target.isdisjoint(finals):
                    dfa_finals.add(j)
                queue.append(j)
                logger.debug("New state {} = {} via {} |-{}->", j, target, i, symbol)
            dfa_transitions.add(Transition(i, symbol, j))

    return table, dfa_finals, dfa_transitions


def subset_table(automaton):
    """
    Returns the table of state sets discovered by the subset construction.

    Entry ``i`` of the returned list is the set of states of ``automaton``
    represented by state ``i`` of the deterministic automaton. Unlike
    :func:`determinize`, the construction is always carried out, even when
    the automaton is already deterministic.

    Args:
        automaton (Automaton): The automaton to explore.

    Returns:
        list: A list of FiniteSet objects.
    """
    table, _, _ = _explore(automaton)
    return table


def determinize(automaton, name=None):
    """
    Returns a deterministic automaton that recognizes the same language as
    the given automaton.

    If the automaton is already deterministic it is returned unchanged (or
    copied under the new name, if one is given).

    The result has the single initial state 0. A state of the result is final
    if its set of original states contains a final state. When no state is
    reachable on a symbol, no transition is emitted, so the result may be
    partial. An automaton without initial states gives a single non-final
    state recognizing the empty language.

    Args:
        automaton (Automaton): The automaton to determinize.
        name (str, optional): Name of the result. Defaults to the name of the
            input automaton.

    Returns:
        Automaton: A deterministic automaton.

    Example:
        >>> nfa = Automaton("ab", initials=[0], finals=[2],
        ...                 transitions=[(0, "a", 1), (0, "a", 2),
        ...                              (1, "b", 2), (1, "b", 1)])
        >>> str(determinize(nfa))
        'ab = { initial 0; final 1; 0 |-a-> 1; 1 |-b-> 1; }'
    """
    if name is None:
        name = automaton.name

    if automaton.is_deterministic():
        logger.debug("Automaton {!r} is already deterministic", automaton.name)
        if name == automaton.name:
            return automaton
        return Automaton(
            name, automaton.initials, automaton.finals, automaton.transitions
        )

    table, finals, transitions = _explore(automaton)
    logger.debug(
        "Determinized {!r}: {} states, {} transitions",
        automaton.name,
        len(table),
        len(transitions),
    )
    return Automaton(name, [0], finals, transitions)
