from enum import Enum
from typing import NamedTuple, Tuple
from colorama import Back, Style


LETTERS = 'abcdefghijklmnopqrstuvwxyz'
WORD_LENGTH = 5


Correctness = Enum('Correctness', {
    'Correct': Back.GREEN,
    'Misplaced': Back.YELLOW,
    'Wrong': Back.RED,
})

Mask = Tuple[Correctness, Correctness, Correctness, Correctness, Correctness]


class Guess(NamedTuple):
    word: str
    mask: Mask


def compute(answer, guess):
    """Score guess against answer, one Correctness per letter of the guess.

    Exact matches are marked first and use up their answer letter. Then each
    remaining guess letter, left to right, takes the first unused matching
    answer letter, so a repeated letter is only credited as often as the
    answer contains it.
    """
    assert len(answer) == WORD_LENGTH, f"answer {answer!r} is not {WORD_LENGTH} letters"
    assert len(guess) == WORD_LENGTH, f"guess {guess!r} is not {WORD_LENGTH} letters"

    mask = [Correctness.Wrong] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    for ii, (al, gl) in enumerate(zip(answer, guess)):
        if al == gl:
            mask[ii] = Correctness.Correct
            used[ii] = True

    for ii, gl in enumerate(guess):
        if mask[ii] is Correctness.Correct:
            continue
        for jj, al in enumerate(answer):
            if al == gl and not used[jj]:
                used[jj] = True
                mask[ii] = Correctness.Misplaced
                break

    return tuple(mask)


def mask_string(mask):
    return ''.join(c.name[0] for c in mask)


def colored_guess(guess):
    return ''.join(c.value + l for c, l in zip(guess.mask, guess.word.upper())) + Style.RESET_ALL
