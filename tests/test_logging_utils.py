import logging

import numpy as np

from splinekit import solve_uniform
from splinekit.logging_utils import apply_debug_logging, debug_log_call, summarize
from splinekit.model import Segment1D


def test_summarize_small_and_large_arrays():
    assert "values=[1.0, 2.0]" in summarize(np.array([1.0, 2.0]))
    text = summarize(np.arange(100, dtype=float))
    assert "shape=(100,)" in text
    assert "min=0" in text and "max=99" in text


def test_summarize_truncates_long_sequences_and_renders_dataclasses():
    assert summarize(list(range(20)), max_items=3) == "[0, 1, 2, ... +17]"
    rendered = summarize(Segment1D(1.0, 2.0, 0.0, 0.0, 1.0))
    assert rendered.startswith("Segment1D(a0=1.0")


def test_debug_log_call_traces_entry_and_exit(caplog):
    logger = logging.getLogger("splinekit.tests.trace")

    @debug_log_call(logger)
    def double(x):
        return 2 * x

    with caplog.at_level(logging.DEBUG, logger="splinekit.tests.trace"):
        assert double(21) == 42
    assert "Entering" in caplog.text and "double" in caplog.text
    assert "-> 42" in caplog.text


def test_debug_log_call_is_silent_above_debug(caplog):
    logger = logging.getLogger("splinekit.tests.quiet")

    @debug_log_call(logger)
    def noop():
        return None

    with caplog.at_level(logging.INFO, logger="splinekit.tests.quiet"):
        noop()
    assert caplog.text == ""


def test_apply_debug_logging_wraps_public_module_functions():
    def public():
        return 1

    def _private():
        return 2

    public.__module__ = _private.__module__ = "fake_module"
    namespace = {"__name__": "fake_module", "public": public, "_private": _private}
    apply_debug_logging(namespace, logger=logging.getLogger("fake_module"))

    assert getattr(namespace["public"], "_debug_logging_wrapped", False)
    assert namespace["_private"] is _private
    assert namespace["public"]() == 1


def test_solver_modules_are_traced(caplog):
    with caplog.at_level(logging.DEBUG, logger="splinekit.tridiagonal"):
        solve_uniform([0.0, 1.0, 4.0])
    assert "Entering solve_uniform" in caplog.text
    assert "Exiting solve_uniform" in caplog.text
