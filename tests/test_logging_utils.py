import logging

import numpy as np
import pytest

from proofsketch import ParallelLinesError, line, point
from proofsketch.logging_utils import _safe_repr, debug_log_call


def test_kernel_calls_are_traced_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="proofsketch.kernel")

    point(0, 0).move_towards(90, 5)

    assert "-> Point.move_towards(" in caplog.text
    assert "<- Point.move_towards = Point(x=5.0" in caplog.text


def test_failures_are_traced_and_reraised(caplog):
    caplog.set_level(logging.DEBUG, logger="proofsketch.kernel")
    first = line(point(0, 0), point(1, 0))
    second = line(point(0, 1), point(1, 1))

    with pytest.raises(ParallelLinesError):
        first.intersect(second)

    assert "!! Line.intersect raised ParallelLinesError" in caplog.text


def test_nothing_logged_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="proofsketch.kernel")

    point(0, 0).move_towards(0, 1)

    assert "move_towards" not in caplog.text


def test_decorator_is_idempotent():
    logger = logging.getLogger("test.idempotent")

    def func(x):
        return x + 1

    wrapped = debug_log_call(logger)(func)

    assert debug_log_call(logger)(wrapped) is wrapped
    assert wrapped(1) == 2


def test_safe_repr_summarizes_arrays_and_sequences():
    assert _safe_repr(np.zeros(10)).startswith("ndarray(shape=(10,), dtype=float64), min=0")
    assert _safe_repr(np.array([1.0, 2.0])).endswith("values=[1.0, 2.0]")
    assert _safe_repr([1, 2, 3, 4, 5, 6]) == "[1, 2, 3, 4, ... (6 items)]"
    assert _safe_repr(0.1234567891) == "0.123457"
