"""Unit tests for the command-line entry point."""

from unittest.mock import patch

import pytest

from tdescrypt.core.exceptions import InvalidPaddingError, IOFailureError
from tdescrypt.frontend.cli import app


@pytest.fixture
def mock_runs():
    """Mock the file helpers so main() is tested on its own."""
    with patch("tdescrypt.frontend.cli.app.encrypt_file_stream") as enc, \
            patch("tdescrypt.frontend.cli.app.decrypt_file_stream") as dec, \
            patch("tdescrypt.frontend.cli.app.configure_logging") as log:
        yield {"encrypt": enc, "decrypt": dec, "logging": log}


def test_main_encrypt_dispatch(mock_runs):
    rc = app.main(["-e", "-i", "in.txt", "-o", "out.enc", "-p", "pw", "--chunk-size", "512"])

    assert rc == 0
    mock_runs["encrypt"].assert_called_once_with("in.txt", "out.enc", "pw", chunk_size=512)
    mock_runs["decrypt"].assert_not_called()
    mock_runs["logging"].assert_called_once()


def test_main_decrypt_dispatch(mock_runs):
    rc = app.main(["-d", "-i", "out.enc", "-o", "in.txt", "-p", "pw"])

    assert rc == 0
    mock_runs["decrypt"].assert_called_once()
    mock_runs["encrypt"].assert_not_called()


def test_main_missing_arguments_prints_usage(mock_runs, capsys):
    rc = app.main(["-e", "-p", "pw"])

    assert rc == 1
    err = capsys.readouterr().err
    assert "usage:" in err
    assert "both -i and -o are required" in err
    mock_runs["encrypt"].assert_not_called()


def test_main_padding_error_is_generic(mock_runs, capsys):
    mock_runs["decrypt"].side_effect = InvalidPaddingError()

    rc = app.main(["-d", "-i", "a", "-o", "b", "-p", "wrong"])

    assert rc == 1
    err = capsys.readouterr().err
    assert err.strip() == "Error occurred: decryption failed"


def test_main_io_error(mock_runs, capsys):
    mock_runs["encrypt"].side_effect = IOFailureError("unable to open input file a: missing")

    rc = app.main(["-e", "-i", "a", "-o", "b", "-p", "pw"])

    assert rc == 1
    assert "unable to open input file" in capsys.readouterr().err


def test_main_unexpected_errors_propagate(mock_runs):
    mock_runs["encrypt"].side_effect = RuntimeError("bug")
    with pytest.raises(RuntimeError):
        app.main(["-e", "-i", "a", "-o", "b", "-p", "pw"])


def test_main_prompts_when_password_missing(mock_runs):
    with patch("tdescrypt.frontend.cli.context.getpass.getpass", return_value="prompted"):
        rc = app.main(["-e", "-i", "a", "-o", "b"])

    assert rc == 0
    assert mock_runs["encrypt"].call_args.args[2] == "prompted"


@pytest.mark.parametrize(
    "argv",
    [
        ["-x", "-e", "-i", "a", "-o", "b", "-p", "pw"],
        ["-e", "-i", "a", "-o", "b", "-p", "pw", "--chunk-size", "abc"],
        ["-e", "-i", "a", "-o", "b", "-p", "pw", "stray"],
    ],
)
def test_main_bad_options_return_1(mock_runs, capsys, argv):
    rc = app.main(argv)

    assert rc == 1
    assert "usage:" in capsys.readouterr().err
    mock_runs["encrypt"].assert_not_called()


def test_main_both_directions_last_wins(mock_runs):
    rc = app.main(["-e", "-d", "-i", "a", "-o", "b", "-p", "pw"])

    assert rc == 0
    mock_runs["decrypt"].assert_called_once()
    mock_runs["encrypt"].assert_not_called()


def test_main_prompt_aborted_returns_1(mock_runs, capsys):
    with patch("tdescrypt.frontend.cli.context.getpass.getpass", side_effect=EOFError):
        rc = app.main(["-e", "-i", "a", "-o", "b"])

    assert rc == 1
    assert "no password given" in capsys.readouterr().err
    mock_runs["encrypt"].assert_not_called()
