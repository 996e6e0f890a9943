"""Unit tests for logging setup."""

import logging

from phrasequiz.logging import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_records_go_to_stderr(self, capsys):
        """App log records are written to stderr, leaving stdout to the quiz."""
        setup_logging("INFO")
        get_logger("phrasequiz.quiz").warning("Input ended after %d of %d questions", 1, 3)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "WARNING phrasequiz.quiz - Input ended after 1 of 3 questions" in captured.err

    def test_third_party_info_filtered(self, capsys):
        """Other libraries only get through at WARNING and above."""
        setup_logging("DEBUG")
        get_logger("phrasequiz.phrase_table").debug("kept")
        logging.getLogger("pydantic").info("dropped")
        logging.getLogger("pydantic").warning("loud")

        err = capsys.readouterr().err
        assert "kept" in err
        assert "dropped" not in err
        assert "loud" in err

    def test_repeated_setup_does_not_duplicate(self, capsys):
        """Calling setup twice leaves a single handler."""
        setup_logging("INFO")
        handler = setup_logging("INFO")

        assert logging.getLogger().handlers == [handler]
        get_logger("phrasequiz").info("once")
        assert capsys.readouterr().err.count("once") == 1
