"""Tests for the uuid-readable command line."""

import uuid

import pytest

from uuid_readable.cli import main

SAMPLE = "0ee001c7-12f3-4b29-a4cc-f48838b3587a"
SAMPLE_SENTENCE = (
    "Kona Bala Conan the flintcatcher of Elmglen overthought "
    "Wase Flarla Helde and 26 striped snakes"
)


def test_generate_from_uuid(capsys):
    assert main(["generate", SAMPLE]) == 0
    assert capsys.readouterr().out.strip() == SAMPLE_SENTENCE


def test_generate_random(capsys):
    assert main(["generate"]) == 0
    assert len(capsys.readouterr().out.split()) == 15


def test_generate_short_profile(capsys):
    assert main(["generate", SAMPLE, "--profile", "short"]) == 0
    assert capsys.readouterr().out.strip() == "Chala sighed by 0 round owls"


def test_short_command(capsys):
    assert main(["short", SAMPLE]) == 0
    assert capsys.readouterr().out.strip() == "Chala sighed by 0 round owls"


def test_inverse_quoted(capsys):
    assert main(["inverse", SAMPLE_SENTENCE]) == 0
    assert capsys.readouterr().out.strip() == SAMPLE


def test_inverse_separate_words(capsys):
    assert main(["inverse", *SAMPLE_SENTENCE.split()]) == 0
    assert uuid.UUID(capsys.readouterr().out.strip()) == uuid.UUID(SAMPLE)


def test_inverse_failure_exit_code(capsys):
    assert main(["inverse", "Kona Bala Conan"]) == 1
    assert "too short" in capsys.readouterr().err


def test_inverse_strict_flag(capsys):
    broken = SAMPLE_SENTENCE.replace(" the ", " a ")
    assert main(["inverse", broken]) == 0
    assert main(["--strict", "inverse", broken]) == 1
    assert "connective" in capsys.readouterr().err


def test_profiles_listing(capsys):
    assert main(["profiles"]) == 0
    out = capsys.readouterr().out
    assert "normal\t128 bits\treversible" in out
    assert "short\t32 bits\tlossy" in out


def test_invalid_uuid_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["generate", "not-a-uuid"])
    assert exc.value.code == 2


def test_inverse_long_numeral_exit_code(capsys):
    tokens = SAMPLE_SENTENCE.split()
    tokens[12] = "1" * 5000
    assert main(["inverse", *tokens]) == 1
    assert "out of range" in capsys.readouterr().err
