"""Unit tests for CLI console helpers."""

import inspect

from icon_font_generator.cli.output import print_error


class TestPrintError:
    """Tests for print_error."""

    def test_message_only(self):
        """Test that errors are printed from the message alone."""
        assert list(inspect.signature(print_error).parameters) == ["message"]

    def test_markup_shown_literally(self, capsys):
        """Test that brackets in messages are not treated as markup."""
        print_error("Failed to load icon '[draft].svg'")

        out = capsys.readouterr().out
        assert "Error:" in out
        assert "[draft].svg" in out
