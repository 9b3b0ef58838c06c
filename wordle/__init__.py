"""Simulate Wordle games between a scoring oracle and pluggable guessers."""

from .algorithms import LETTERS, WORD_LENGTH, Correctness, Guess, compute
from .game import MAX_TURNS, GameState, Wordle
from .guessers import GUESSERS, FunctionGuesser, Guesser, Unoptimized, load_guesser

__all__ = [
    "LETTERS",
    "WORD_LENGTH",
    "MAX_TURNS",
    "Correctness",
    "Guess",
    "compute",
    "GameState",
    "Wordle",
    "Guesser",
    "FunctionGuesser",
    "Unoptimized",
    "GUESSERS",
    "load_guesser",
]
