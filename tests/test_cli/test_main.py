"""Tests for the param-decode command line entry point."""

from __future__ import annotations

import io
import json

import pytest

from param_decoder.cli.main import (
    main,
    EXIT_OK,
    EXIT_DECODE_FAILURE,
    EXIT_INVALID_ARGUMENT,
)
from param_decoder.version import __version__


class TestMain:
    """Tests for main()."""

    def test_text_output(self, capsys):
        """Test decoded text is printed in text mode."""
        assert main(["aGVsbG8gd29ybGQ="]) == EXIT_OK
        assert capsys.readouterr().out == "hello world\n"

    def test_json_output(self, capsys):
        """Test JSON mode reports the matched encoding and attempts."""
        assert main(["hello%20world", "--format", "json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["encoding"] == "url"
        assert data["text"] == "hello world"
        assert data["version"] == __version__
        assert [a["encoding"] for a in data["attempts"]] == ["base64", "url"]

    def test_reads_stdin(self, capsys, monkeypatch):
        """Test the value is read from stdin when omitted."""
        monkeypatch.setattr("sys.stdin", io.StringIO("%7B%5C%22key%5C%22%3A1%7D\n"))
        assert main([]) == EXIT_OK
        assert capsys.readouterr().out == '{"key":1}\n'

    def test_decode_failure(self, capsys):
        """Test undecodable input exits with 1 and reports on stderr."""
        assert main(["%%%not valid%%%"]) == EXIT_DECODE_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "neither base64 nor URL encoding format detected" in captured.err

    def test_decode_failure_json(self, capsys):
        """Test JSON mode breaks out each strategy's error."""
        assert main(["100%", "--format", "json"]) == EXIT_DECODE_FAILURE
        data = json.loads(capsys.readouterr().out)
        assert data["preview"] == "100%"
        assert data["base64_error"].startswith("Invalid base64 encoding")
        assert data["url_error"].startswith("Invalid URL encoding")

    def test_blank_input(self, capsys, monkeypatch):
        """Test blank stdin exits with 2."""
        monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))
        assert main(["-"]) == EXIT_INVALID_ARGUMENT
        assert "Encoded parameter cannot be null or empty" in capsys.readouterr().err

    def test_config_file(self, capsys, tmp_path):
        """Test --config is applied to the detector."""
        path = tmp_path / "decoder.yaml"
        path.write_text("unescape: false\n", encoding="utf-8")
        assert main(["%7B%5C%22key%5C%22%3A1%7D", "--config", str(path)]) == EXIT_OK
        assert capsys.readouterr().out == '{\\"key\\":1}\n'

    def test_undecodable_argument(self, capfd):
        """Test a non-UTF-8 argument byte (surrogate-escaped) exits with 1."""
        assert main(["\udcff"]) == EXIT_DECODE_FAILURE
        assert "neither base64 nor URL encoding format detected" in capfd.readouterr().err

    def test_undecodable_argument_json(self, capsys):
        """Test the JSON failure payload escapes input that is not valid text."""
        assert main(["\udcff", "--format", "json"]) == EXIT_DECODE_FAILURE
        data = json.loads(capsys.readouterr().out)
        assert data["preview"] == "\udcff"

    def test_invalid_config_value(self, capsys, tmp_path):
        """Test a bad value in the config file exits with 2 instead of a traceback."""
        path = tmp_path / "decoder.yaml"
        path.write_text("preview_length: 0\n", encoding="utf-8")
        assert main(["aGVsbG8gd29ybGQ=", "--config", str(path)]) == EXIT_INVALID_ARGUMENT
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: preview_length must be positive" in captured.err

    def test_version(self, capsys):
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
