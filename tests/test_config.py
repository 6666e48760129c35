"""
Tests for the settings module and the timing helper.
"""

import logging

import pytest
from seqpipe import InvalidArgument, configure, settings
from seqpipe.utils.helpers import time_calls


class TestConfigure:
    def setup_method(self):
        self._saved = (settings.enable_logging, settings.materialize_warn_threshold)

    def teardown_method(self):
        settings.enable_logging, settings.materialize_warn_threshold = self._saved

    def test_defaults(self):
        assert settings.materialize_warn_threshold is None

    def test_update_threshold(self):
        result = configure(materialize_warn_threshold=5)
        assert result is settings
        assert settings.materialize_warn_threshold == 5

    def test_unknown_setting(self):
        with pytest.raises(InvalidArgument, match="no_such"):
            configure(no_such=True)

    def test_negative_threshold(self):
        with pytest.raises(InvalidArgument):
            configure(materialize_warn_threshold=-1)
        assert settings.materialize_warn_threshold is None

    def test_debug_message(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="seqpipe"):
            configure(materialize_warn_threshold=7)
        assert "Settings updated" in caplog.text


class TestTimeCalls:
    def test_summary(self):
        calls = []
        stats = time_calls(lambda: calls.append(1), iterations=3)
        assert calls == [1, 1, 1]
        assert stats['iterations'] == 3
        assert 0 <= stats['min_ns'] <= stats['median_ns']

    def test_rejects_zero(self):
        with pytest.raises(InvalidArgument):
            time_calls(lambda: None, iterations=0)
