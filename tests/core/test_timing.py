"""
Tests for Timer and timed().
"""

import pytest

from olsfit.core.compute.timing import Timer, timed


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('accumulate'):
            sum(range(100))
        with timer.section('accumulate'):
            sum(range(100))
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'accumulate'}
        assert result['total_seconds'] >= result['accumulate'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_section_recorded_on_error(self):
        timer = Timer()
        with pytest.raises(ValueError):
            with timer.section('solve'):
                raise ValueError("boom")
        timer.start()
        timer.stop()
        assert 'solve' in timer.result()


def test_timed_context_manager():
    with timed() as timer:
        pass
    assert timer.result()['total_seconds'] >= 0.0
