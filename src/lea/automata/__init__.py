from loguru import logger

from lea.automata.determinize import determinize, subset_table
from lea.automata.fsa import (
    EPSILON,
    Automaton,
    AutomatonBuilder,
    MalformedAutomatonError,
    Transition,
    renumber,
)
from lea.automata.thompson import ThompsonBuilder

# Library code stays silent unless the application calls logger.enable("lea")
logger.disable("lea")
