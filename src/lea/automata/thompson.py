# Copyright 2014 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

from lea.automata.fsa import AutomatonBuilder, renumber


class ThompsonBuilder:
    """
    A class for building epsilon-NFAs from smaller ones, in the manner of
    Thompson's construction for regular expressions.

    Every automaton produced by the builder uses fresh integer states.
    Operands are copied under fresh states before being combined, so the
    same automaton can be used several times in one expression, and
    automata built elsewhere can be mixed in.

    Usage:
    tb = ThompsonBuilder()
    nfa = tb.char("a")  # Create an NFA for the character 'a'
    nfa2 = tb.concat(nfa, tb.star(tb.char("b")))  # Recognizes ab*
    """

    def __init__(self, start=0):
        """
        Initialize the ThompsonBuilder object.

        Args:
        start (int): The first state number handed out. Defaults to 0.
        """
        self.statenum = start

    def new_state(self):
        """
        Generate a new state number.

        Returns:
        int: The new state number.
        """
        state = self.statenum
        self.statenum += 1
        return state

    def _fresh(self, n):
        n = renumber(n, base=self.statenum)
        self.statenum += len(n)
        return n

    def _start(self):
        s = self.new_state()
        builder = AutomatonBuilder()
        builder.add_initial_state(s)
        return s, builder

    def epsilon(self):
        """
        Create an NFA recognizing only the empty word.

        Returns:
        Automaton: The NFA with a single epsilon transition.
        """
        s, builder = self._start()
        e = self.new_state()
        builder.add_epsilon(s, e)
        builder.add_final_state(e)
        return builder.build()

    def char(self, label):
        """
        Create an NFA for a single character.

        Args:
        label (str): The character label.

        Returns:
        Automaton: The NFA representing the character.
        """
        return self.charset(label)

    def charset(self, chars):
        """
        Create an NFA for a character set.

        Args:
        chars (str): The characters in the set.

        Returns:
        Automaton: The NFA representing the character set.
        """
        s, builder = self._start()
        e = self.new_state()
        for char in chars:
            builder.add_transition(s, char, e)
        builder.add_final_state(e)
        return builder.build()

    def string(self, string):
        """
        Create an NFA recognizing exactly the given string.

        Args:
        string (str): The characters to read, in order.

        Returns:
        Automaton: The NFA representing the string.
        """
        if not string:
            return self.epsilon()
        s, builder = self._start()
        for label in string:
            e = self.new_state()
            builder.add_transition(s, label, e)
            s = e
        builder.add_final_state(e)
        return builder.build()

    def choice(self, n1, n2):
        """
        Create an NFA for the choice (|) operator.

        Args:
        n1 (Automaton): The first NFA.
        n2 (Automaton): The second NFA.

        Returns:
        Automaton: The NFA representing the choice operator.
        """
        n1 = self._fresh(n1)
        n2 = self._fresh(n2)
        s, builder = self._start()
        e = self.new_state()
        builder.insert(s, n1, e)
        builder.insert(s, n2, e)
        builder.add_final_state(e)
        return builder.build()

    def concat(self, n1, n2):
        """
        Create an NFA for the concatenation operator.

        Args:
        n1 (Automaton): The first NFA.
        n2 (Automaton): The second NFA.

        Returns:
        Automaton: The NFA representing the concatenation operator.
        """
        n1 = self._fresh(n1)
        n2 = self._fresh(n2)
        s, builder = self._start()
        m = self.new_state()
        e = self.new_state()
        builder.insert(s, n1, m)
        builder.insert(m, n2, e)
        builder.add_final_state(e)
        return builder.build()

    def star(self, n):
        """
        Create an NFA for the Kleene star (*) operator.

        Args:
        n (Automaton): The NFA to apply the star operator to.

        Returns:
        Automaton: The NFA representing the star operator.
        """
        n = self._fresh(n)
        s, builder = self._start()
        m1 = self.new_state()
        m2 = self.new_state()
        e = self.new_state()
        builder.add_epsilon(s, m1)
        builder.add_epsilon(s, e)
        builder.insert(m1, n, m2)
        builder.add_epsilon(m2, m1)
        builder.add_epsilon(m2, e)
        builder.add_final_state(e)
        return builder.build()

    def plus(self, n):
        """
        Create an NFA for the plus (+) operator.

        Args:
        n (Automaton): The NFA to apply the plus operator to.

        Returns:
        Automaton: The NFA representing the plus operator.
        """
        return self.concat(n, self.star(n))

    def question(self, n):
        """
        Create an NFA for the question mark (?) operator.

        Args:
        n (Automaton): The NFA to apply the question mark operator to.

        Returns:
        Automaton: The NFA representing the question mark operator.
        """
        return self.choice(n, self.epsilon())
