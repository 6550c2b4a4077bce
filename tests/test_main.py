"""Tests for the interactive command-line session."""

from __future__ import annotations

import pytest

from passinator import main as cli
from passinator.charsets import LOWERCASE_CHARS


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to ``input`` and record the prompts."""
    prompts: list[str] = []

    def feed(*values: str) -> list[str]:
        queue = list(values)

        def fake_input(prompt: str = '') -> str:
            prompts.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr('builtins.input', fake_input)
        return prompts

    return feed


def extract_password(output: str) -> str:
    lines = output.splitlines()
    start = lines.index(cli.DELIMITER)
    assert lines[start + 2] == cli.DELIMITER
    return lines[start + 1]


@pytest.mark.parametrize('answer', ['y', 'Y', 'yes', ' YES ', 'Yes'])
def test_read_yes_no_accepts_yes(answers, answer):
    answers(answer)
    assert cli.read_yes_no('? ') is True


@pytest.mark.parametrize('answer', ['n', 'N', 'no', 'No ', 'NO'])
def test_read_yes_no_accepts_no(answers, answer):
    answers(answer)
    assert cli.read_yes_no('? ') is False


def test_read_yes_no_reprompts(answers, capsys):
    prompts = answers('maybe', '', 'yep', 'n')

    assert cli.read_yes_no('Include numbers? (y/n): ') is False
    assert len(prompts) == 4
    assert capsys.readouterr().out.count("[!] Please enter 'y' or 'n'") == 3


def test_read_length_parses_number(answers):
    answers(' 20 ')
    assert cli.read_length() == 20


def test_read_length_falls_back_to_minimum(answers, capsys):
    answers('twelve')

    assert cli.read_length() == 6
    assert 'Using minimum length of 6' in capsys.readouterr().out


def test_read_length_keeps_short_numbers(answers):
    answers('3')
    assert cli.read_length() == 3


@pytest.mark.parametrize('raw', ['+12', '-4', '007'])
def test_read_length_accepts_signed_decimal(answers, raw):
    answers(raw)
    assert cli.read_length() == int(raw)


@pytest.mark.parametrize('raw', ['1_0', '\u0661\u0662', '12.0', '1e2', '', '0x10'])
def test_read_length_rejects_non_decimal_forms(answers, capsys, raw):
    answers(raw)

    assert cli.read_length() == 6
    assert 'Using minimum length of 6' in capsys.readouterr().out


def test_main_prints_password(answers, capsys):
    prompts = answers('12', 'y', 'y', 'y', 'y')

    cli.main()

    out = capsys.readouterr().out
    assert out.startswith(cli.BANNER)
    assert 'Your generated password is:' in out
    assert len(extract_password(out)) == 12
    assert prompts == [
        'Enter password length (minimum 6): ',
        'Include lowercase letters? (y/n): ',
        'Include uppercase letters? (y/n): ',
        'Include numbers? (y/n): ',
        'Include special characters? (y/n): ',
    ]


def test_main_unparseable_length_uses_minimum(answers, capsys):
    answers('abc', 'yes', 'no', 'no', 'no')

    cli.main()

    password = extract_password(capsys.readouterr().out)
    assert len(password) == 6
    assert all(c in LOWERCASE_CHARS for c in password)


def test_main_exits_when_no_class_selected(answers, capsys):
    answers('10', 'n', 'n', 'n', 'n')

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert '[!] Error generating password: at least one character type must be selected' in out
    assert 'Your generated password is:' not in out


def test_main_exits_on_short_length(answers, capsys):
    answers('5', 'y', 'n', 'n', 'n')

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    assert 'at least 6 characters' in capsys.readouterr().out


def test_main_exits_on_end_of_input(answers, capsys):
    answers('12', 'y')

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    assert '[!] Aborted.' in capsys.readouterr().out
