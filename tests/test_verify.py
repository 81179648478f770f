import numpy as np
import pytest

from pyparscan.errors import LengthMismatchError
from pyparscan.verify import Mismatch, first_mismatch, verify_arrays, verify_scalars


def test_reports_first_mismatch():
    messages = []
    assert verify_arrays([1, 2, 3], [1, 2, 4], report=messages.append) is False
    assert messages == ["Mismatch at index 2: 3 != 4"]


def test_first_mismatch_values():
    assert first_mismatch([1, 2, 3], [1, 2, 4]) == Mismatch(2, 3, 4)
    assert first_mismatch([0, 5, 5], [0, 6, 7]) == Mismatch(1, 5, 6)
    assert first_mismatch([1, 2, 3], np.array([1, 2, 3], dtype=np.int32)) is None


def test_equal_arrays():
    messages = []
    assert verify_arrays([4, 5], [4, 5], report=messages.append) is True
    assert verify_arrays([], []) is True
    assert messages == []


def test_length_mismatch():
    messages = []
    assert verify_arrays([1, 2], [1, 2, 3], report=messages.append) is False
    # No index is reported for unequal lengths
    assert messages == []
    with pytest.raises(LengthMismatchError):
        first_mismatch([1, 2], [1, 2, 3])


def test_default_report_prints(capsys):
    verify_arrays([1, 2, 3], [1, 2, 4])
    assert "Mismatch at index 2: 3 != 4" in capsys.readouterr().out


def test_verify_scalars():
    assert verify_scalars({"tree": 9, "sections": 9, "atomic": 8}, 9) == ["atomic"]
    assert verify_scalars({}, 1) == []
