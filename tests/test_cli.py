"""Tests for the memopass command-line interface."""

from unittest.mock import Mock, patch

from memopass.cli import main

HIT = "1E4C9B93F3F0682250B6CF8331B7EE68FD8:3533661\r\n"

PROFILE_ARGS = [
    "generate",
    "--first-name", "Ann",
    "--last-name", "Lee",
    "--dob", "1990-05-01",
    "--answer", "What was the name of your first pet?=Rex",
    "--answer", "What city were you born in?=Blue92",
]


def _mock_response(text: str) -> Mock:
    resp = Mock()
    resp.text = text
    resp.raise_for_status = Mock()
    return resp


def test_generate(capsys):
    assert main(PROFILE_ARGS + ["-c", "3"]) == 0
    out = capsys.readouterr().out
    passwords = [line.strip() for line in out.splitlines() if "Strength" not in line]
    assert len(passwords) == 3
    for pwd in passwords:
        assert 15 <= len(pwd) <= 18
    assert "Strong (5/5)" in out


def test_generate_rejects_single_answer(capsys):
    assert main(["generate", "--answer", "Q1=Rex"]) == 1
    assert "at least two" in capsys.readouterr().err


def test_generate_rejects_malformed_answer(capsys):
    assert main(["generate", "--answer", "no separator"]) == 1
    assert "QUESTION=ANSWER" in capsys.readouterr().err


@patch("memopass.breach.requests.get")
def test_generate_with_check(mock_get, capsys):
    mock_get.return_value = _mock_response("")
    assert main(PROFILE_ARGS + ["--check"]) == 0
    assert "Not found in any known breaches" in capsys.readouterr().out


@patch("memopass.breach.requests.get")
def test_check_breached(mock_get, capsys):
    mock_get.return_value = _mock_response(HIT)
    assert main(["check", "password"]) == 1
    assert "BREACHED" in capsys.readouterr().out


@patch("memopass.breach.requests.get")
def test_check_from_file(mock_get, capsys, tmp_path):
    mock_get.return_value = _mock_response(HIT)
    path = tmp_path / "passwords.txt"
    path.write_text("correct horse\n\n")
    assert main(["check", "-f", str(path)]) == 0
    assert "Safe" in capsys.readouterr().out


def test_check_requires_input(capsys):
    assert main(["check"]) == 1
    assert "provide passwords" in capsys.readouterr().err


def test_questions(capsys):
    assert main(["questions"]) == 0
    assert "first pet" in capsys.readouterr().out
