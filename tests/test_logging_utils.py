import logging

import numpy as np
import pytest

from spiderfy import compute_layout
from spiderfy.logging_utils import debug_log_call, safe_repr


def test_compute_layout_traces_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="spiderfy.layout"):
        compute_layout(12)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Entering compute_layout (args=[12])") for m in messages)
    assert any("<12 record(s) spiral" in m for m in messages)


def test_safe_repr_summaries():
    assert safe_repr(np.zeros((3, 2))) == "ndarray(shape=(3, 2), dtype=float64, min=0, max=0)"
    assert safe_repr(compute_layout(2)).startswith("<2 record(s) circle")
    assert len(safe_repr("x" * 1000)) < 50


def test_exceptions_are_logged_and_reraised(caplog):
    logger = logging.getLogger("spiderfy.tests")

    @debug_log_call(logger)
    def boom():
        raise RuntimeError("nope")

    with caplog.at_level(logging.DEBUG, logger="spiderfy.tests"):
        with pytest.raises(RuntimeError):
            boom()

    assert any("Exception in" in record.getMessage() for record in caplog.records)
