from __future__ import annotations

import numpy as np
import pytest

from vtkwriter.formatting import NumberFormat

DEFAULT = NumberFormat()


def test_default_precision_is_ten_digits():
    assert DEFAULT.scalar(1.5) == "1.5000000000"
    assert DEFAULT.scalar(-0.25) == "-0.2500000000"


def test_no_digit_grouping():
    assert DEFAULT.scalar(1234567.0) == "1234567.0000000000"


def test_triple_is_space_separated():
    assert DEFAULT.triple((1, 2, 3)) == "1.0000000000 2.0000000000 3.0000000000"
    assert DEFAULT.triple(np.array([0.5, -1.0, 2.0])) == "0.5000000000 -1.0000000000 2.0000000000"


def test_custom_precision_rounds():
    fmt = NumberFormat(precision=3)
    assert fmt.scalar(np.float64(2.0 / 3.0)) == "0.667"
    assert NumberFormat(precision=0).scalar(2.4) == "2"


def test_negative_precision_rejected():
    with pytest.raises(ValueError):
        NumberFormat(precision=-1)
