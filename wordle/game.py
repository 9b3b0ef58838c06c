import logging
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from .algorithms import Guess, compute, mask_string
from .guessers import FunctionGuesser, Guesser
from .wordlist import load_dictionary

log = logging.getLogger(__name__)

MAX_TURNS = 32


GameState = Enum('GameState', 'InProgress Won Exhausted')


class Wordle:
    """Plays games against a fixed dictionary of valid words.

    The dictionary is frozen at construction, so one engine can be shared by
    any number of games; each game needs its own guesser.
    """

    def __init__(self, dictionary: Iterable[str], max_turns: int = MAX_TURNS):
        if max_turns < 1:
            raise ValueError(f"max_turns must be at least 1, not {max_turns}")
        self.dictionary = frozenset(dictionary)
        self.max_turns = max_turns

    @classmethod
    def from_file(cls, df, max_turns: int = MAX_TURNS):
        """Build an engine from an open ``<word> <frequency>`` dictionary file."""
        return cls(load_dictionary(df), max_turns)

    def play(self, answer: str, guesser: Union[Guesser, Callable]) -> Optional[int]:
        """Play one game, returning the winning turn or None if out of turns.

        The winning guess ends the game before it is scored, so the history
        a guesser sees never contains the answer. A guess that is not in the
        dictionary is a broken guesser and fails with AssertionError.
        """
        if not isinstance(guesser, Guesser):
            guesser = FunctionGuesser(guesser)

        history = []
        for turn in range(1, self.max_turns + 1):
            log.debug(f"{answer}: {GameState.InProgress.name}({turn})")
            word = guesser.guess(tuple(history))
            if word == answer:
                log.info(f"{answer}: {GameState.Won.name}({turn})")
                return turn

            assert word in self.dictionary, f"guess {word!r} is not in the dictionary"
            guess = Guess(word, compute(answer, word))
            log.debug(f"{answer}: turn {turn} guessed {word} -> {mask_string(guess.mask)}")
            history.append(guess)

        log.info(f"{answer}: {GameState.Exhausted.name} after {self.max_turns} turns")
        return None
