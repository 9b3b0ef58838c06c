import logging

from .algorithms import LETTERS, WORD_LENGTH

log = logging.getLogger(__name__)


def parse_dictionary(lines):
    """Parse ``<word> <frequency>`` lines into a {word: frequency} dict.

    A line without the separator, a word that is not WORD_LENGTH lowercase
    letters, or a non-integer frequency is a broken dictionary and raises
    ValueError. Blank lines are only allowed at the end of the input.
    """
    words = {}
    blank = None
    for lineno, line in enumerate(lines, 1):
        line = line.rstrip('\r\n')
        if not line.strip():
            blank = blank or lineno
            continue
        if blank:
            raise ValueError(f"line {blank}: expected '<word> <frequency>', got a blank line")
        word, sep, freq = line.partition(' ')
        if not sep:
            raise ValueError(f"line {lineno}: expected '<word> <frequency>', got {line!r}")
        if len(word) != WORD_LENGTH or any(c not in LETTERS for c in word):
            raise ValueError(f"line {lineno}: {word!r} is not a {WORD_LENGTH}-letter lowercase word")
        try:
            words[word] = int(freq)
        except ValueError:
            raise ValueError(f"line {lineno}: frequency {freq!r} of {word!r} is not an integer") from None
    return words


def load_dictionary(df):
    words = parse_dictionary(df)
    log.info(f"Read {len(words)} words from {getattr(df, 'name', df)}")
    return words


def parse_answers(text):
    return text.split()


def load_answers(af):
    answers = parse_answers(af.read())
    log.info(f"Read {len(answers)} answers from {getattr(af, 'name', af)}")
    return answers
