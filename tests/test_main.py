import pytest

from wordle.__main__ import main

WORDS = ['crane', 'right', 'slate', 'wrong']


class InOrder:
    pass


def in_order(history):
    return WORDS[len(history)]


@pytest.fixture
def files(tmp_path):
    d = tmp_path / 'dictionary.txt'
    d.write_text(''.join(f'{w} {n}\n' for n, w in enumerate(WORDS, 1)))
    a = tmp_path / 'answers.txt'
    a.write_text('slate crane\nfjord\n')
    return ['-d', str(d), '-a', str(a)]


def test_plays_every_answer(files, capsys):
    assert main(files + ['-g', f'{__name__}:in_order', '-t', '4']) == 0
    out = capsys.readouterr().out
    assert 'SLATE: solved in' in out
    assert 'CRANE: solved in' in out
    assert 'FJORD:' in out and 'not solved' in out
    assert 'solved \x1b[34m\x1b[1m2\x1b[0m.' in out


def test_games_limit(files, capsys):
    main(files + ['-g', f'{__name__}:in_order', '-n', '1'])
    out = capsys.readouterr().out
    assert 'SLATE' in out
    assert 'CRANE' not in out


def test_verbose_shows_guesses(files, capsys):
    main(files + ['-g', f'{__name__}:in_order', '-n', '1', '-v'])
    out = capsys.readouterr().out
    assert 'Guess 1:' in out
    assert 'Guess 2:' in out
    assert 'Guess 3:' in out
    assert 'Guess 4:' not in out
    # The winning guess is shown all correct
    assert 'Guess 3: ' + '\x1b[42m' + '\x1b[42m'.join('SLATE') + '\x1b[0m' in out


def test_verbose_shows_last_guess_of_unsolved_game(files, capsys):
    main(files + ['-g', f'{__name__}:in_order', '-t', '2', '-v'])
    out = capsys.readouterr().out
    # slate runs out after right, fjord after right, crane wins on turn 1
    assert out.count('Guess 2:') == 2
    assert 'Guess 3:' not in out


def test_unoptimized_guesser_fails_hard(files):
    with pytest.raises(NotImplementedError):
        main(files)


def test_unknown_guesser(files):
    with pytest.raises(SystemExit):
        main(files + ['-g', 'psychic'])


def test_not_a_guesser(files):
    with pytest.raises(SystemExit):
        main(files + ['-g', f'{__name__}:InOrder'])


def test_bad_turns(files):
    with pytest.raises(SystemExit):
        main(files + ['-t', '0'])


def test_negative_games(files):
    with pytest.raises(SystemExit):
        main(files + ['-g', f'{__name__}:in_order', '-n', '-1'])


def test_zero_games(files, capsys):
    main(files + ['-g', f'{__name__}:in_order', '-n', '0'])
    out = capsys.readouterr().out
    assert 'SLATE' not in out
    assert 'Played \x1b[34m\x1b[1m0\x1b[0m games' in out
