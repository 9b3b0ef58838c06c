#!/usr/bin/python3

import argparse
import logging
from colorama import Fore, Style

from .algorithms import Correctness, Guess, colored_guess, compute
from .game import MAX_TURNS, Wordle
from .guessers import Guesser, load_guesser
from .wordlist import load_answers


EMPH = Fore.BLUE + Style.BRIGHT
RESET = Style.RESET_ALL


class TracingGuesser(Guesser):
    """Wraps a guesser and prints each scored guess as the game goes."""

    def __init__(self, inner):
        self.inner = inner
        self.last = None
        self.turn = 0

    def guess(self, history):
        if history:
            print(f"  Guess {len(history)}: {colored_guess(history[-1])}")
        self.last = self.inner.guess(history)
        self.turn = len(history) + 1
        return self.last

    def finish(self, answer):
        """Print the final guess of a game, which never reaches the history."""
        if self.last is None:
            return
        if self.last == answer:
            mask = (Correctness.Correct,) * len(answer)
        else:
            mask = compute(answer, self.last)
        print(f"  Guess {self.turn}: {colored_guess(Guess(self.last, mask))}")


def parse_args(args=None):
    p = argparse.ArgumentParser(prog='wordle-sim', description='Play a Wordle game for every answer in a list.')
    p.add_argument('-d', '--dict', required=True, type=argparse.FileType(),
                   help='Dictionary of valid guesses, one "<word> <frequency>" per line.')
    p.add_argument('-a', '--answers', required=True, type=argparse.FileType(),
                   help='Whitespace-separated list of answers to play.')
    p.add_argument('-g', '--guesser', default='unoptimized',
                   help='Guesser to play with: a built-in name or module:attribute. Default %(default)s.')
    p.add_argument('-t', '--turns', default=MAX_TURNS, type=int,
                   help='Maximum number of turns per game. Default %(default)s.')
    p.add_argument('-n', '--games', type=int,
                   help='Only play the first N answers.')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Show every guess, and debug logging.')
    args = p.parse_args(args)
    if args.turns < 1:
        p.error(f"Need at least 1 turn per game, not {args.turns}")
    if args.games is not None and args.games < 0:
        p.error(f"Need a non-negative number of games, not {args.games}")
    try:
        args.guesser_factory = load_guesser(args.guesser)
    except (ValueError, TypeError, ImportError, AttributeError) as e:
        p.error(str(e))
    return p, args


def main(args=None):
    p, args = parse_args(args)
    logging.basicConfig(format='%(levelname)s [%(asctime)s] %(message)s', datefmt='%Y-%m-%d %H:%M:%S',
                        level=logging.DEBUG if args.verbose else logging.INFO)

    with args.dict, args.answers:
        w = Wordle.from_file(args.dict, args.turns)
        answers = load_answers(args.answers)
    if args.games is not None:
        answers = answers[:args.games]

    results = []
    for answer in answers:
        guesser = args.guesser_factory()
        if args.verbose:
            guesser = TracingGuesser(guesser)
        turns = w.play(answer, guesser)
        if args.verbose:
            guesser.finish(answer)
        results.append(turns)
        if turns is None:
            print(f"{answer.upper()}: {Fore.RED}not solved{RESET} in {args.turns} turns")
        else:
            print(f"{answer.upper()}: solved in {EMPH}{turns}{RESET} turn{'s' if turns != 1 else ''}")

    solved = [t for t in results if t is not None]
    print()
    print(f"Played {EMPH}{len(results)}{RESET} games, solved {EMPH}{len(solved)}{RESET}.")
    if solved:
        print(f"Average {EMPH}{sum(solved) / len(solved):.2f}{RESET} turns per solved game.")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
