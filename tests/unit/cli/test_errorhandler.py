import errno
from unittest.mock import patch

import pytest
import typer

from requirer.cli.errorhandler import handle_cli_errors
from requirer.config.exceptions import ConfigValidationError
from requirer.exceptions import (
    ArtifactIOError,
    CompileError,
    DisposedError,
    InvalidArgumentError,
    LoaderDisabledError,
    ParseError,
)


def _printed(mock_print) -> list[str]:
    return [str(arg) for call in mock_print.call_args_list for arg in call[0]]


@pytest.mark.parametrize(
    ("error", "label"),
    [
        (ArtifactIOError(errno.ENOENT, "No such file or directory", "/srv/a.json"), "File Error"),
        (ParseError("/srv/a.json", "Expecting value"), "Parse Error"),
        (CompileError("/srv/a.py", "invalid syntax"), "Compile Error"),
        (InvalidArgumentError("path must be a non-empty string"), "Invalid Argument"),
        (ConfigValidationError([{"loc": ("hot_reload",)}]), "Configuration Error"),
        (DisposedError("/srv/a.json"), "Error"),
    ],
)
def test_known_errors_exit_with_code_1(error, label):
    """Verify each known error prints its label and exits with code 1."""
    with patch("requirer.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                raise error

    assert excinfo.value.exit_code == 1
    assert any(label in arg for arg in _printed(mock_print))


def test_file_error_mentions_filename():
    with patch("requirer.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit):
            with handle_cli_errors():
                raise ArtifactIOError(errno.ENOENT, "No such file or directory", "/srv/a.json")

    assert any("/srv/a.json" in arg for arg in _printed(mock_print))


def test_compile_error_shows_cause():
    with patch("requirer.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit):
            with handle_cli_errors():
                try:
                    raise LoaderDisabledError("os")
                except LoaderDisabledError as e:
                    raise CompileError("/srv/a.py", str(e)) from e

    assert any("caused by LoaderDisabledError" in arg for arg in _printed(mock_print))


def test_debug_mode_re_raises_known_errors():
    with pytest.raises(ParseError):
        with handle_cli_errors(debug=True):
            raise ParseError("/srv/a.json", "Expecting value")


def test_unexpected_exception():
    with patch("requirer.cli.errorhandler.console.print") as mock_print:
        with pytest.raises(typer.Exit) as excinfo:
            with handle_cli_errors(debug=False):
                msg = "Oops"
                raise RuntimeError(msg)

    assert excinfo.value.exit_code == 1
    assert any("An unexpected error occurred" in arg for arg in _printed(mock_print))


def test_unexpected_exception_debug_prints_traceback():
    with patch("requirer.cli.errorhandler.console.print_exception") as mock_print_exc:
        with pytest.raises(typer.Exit):
            with handle_cli_errors(debug=True):
                msg = "Oops"
                raise RuntimeError(msg)

    mock_print_exc.assert_called_once()


def test_typer_exit_passes_through():
    with pytest.raises(typer.Exit) as excinfo:
        with handle_cli_errors():
            raise typer.Exit(3)

    assert excinfo.value.exit_code == 3
