"""Guessers: the strategies that propose the next word of a game.

A guesser is called once per turn with the history of the game so far, a
read-only sequence of :class:`~wordle.algorithms.Guess`, and returns the next
word to try. Each game gets its own guesser instance, so any state a guesser
keeps between calls belongs to that one game.
"""

import importlib
from abc import ABC, abstractmethod
from typing import Callable, Sequence

from .algorithms import Guess

History = Sequence[Guess]


class Guesser(ABC):
    """Interface that every guesser must implement."""

    @abstractmethod
    def guess(self, history: History) -> str:
        """Return the next guess given the (word, mask) history of this game."""
        ...


class FunctionGuesser(Guesser):
    """Adapts a plain ``func(history) -> word`` into a Guesser."""

    def __init__(self, func: Callable[[History], str]):
        self.func = func

    def guess(self, history: History) -> str:
        return self.func(history)

    def __repr__(self):
        return f'{type(self).__name__}({self.func!r})'


class Unoptimized(Guesser):
    def guess(self, history: History) -> str:
        raise NotImplementedError(f"{type(self).__name__} guesser is not implemented yet")


GUESSERS = {
    'unoptimized': Unoptimized,
}


def load_guesser(name: str) -> Callable[[], Guesser]:
    """Return a factory for the guesser called ``name``.

    ``name`` is either one of the built-in :data:`GUESSERS`, or an import path
    of the form ``package.module:attribute``. The attribute may be a Guesser
    subclass, which is instantiated once per game, or a plain function of the
    history, which is wrapped in a :class:`FunctionGuesser`.
    """
    if name in GUESSERS:
        return GUESSERS[name]

    modname, sep, attr = name.partition(':')
    if not sep or not modname or not attr:
        raise ValueError(f"Unknown guesser {name!r}; expected one of {', '.join(GUESSERS)} or module:attribute")

    obj = importlib.import_module(modname)
    for part in attr.split('.'):
        obj = getattr(obj, part)

    if isinstance(obj, type):
        if not issubclass(obj, Guesser):
            raise TypeError(f"{name!r} is not a Guesser subclass")
        return obj
    elif callable(obj):
        return lambda: FunctionGuesser(obj)
    raise TypeError(f"{name!r} is neither a Guesser subclass nor a function")
