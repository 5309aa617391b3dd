import numpy as np
import pytest

from lehmer import npsci
from lehmer.core import IndexOutOfRangeError


def test_item():
    int_value = 1
    int_array = np.array(int_value)
    float_value = 1.0
    float_array = np.array(float_value)
    string_value = "z"
    string_array = np.array(string_value)
    assert npsci.item(int_value) == 1
    assert isinstance(npsci.item(int_array), int)
    assert npsci.item(int_array) == 1
    assert npsci.item(float_value) == 1.0
    assert isinstance(npsci.item(float_array), float)
    assert npsci.item(float_array) == 1.0
    assert npsci.item(string_value) == "z"
    assert isinstance(npsci.item(string_array), str)
    assert npsci.item(string_array) == "z"


def test_as_index():
    assert npsci.as_index(0) == 0
    assert npsci.as_index(119) == 119
    assert npsci.as_index(np.int64(7)) == 7
    assert isinstance(npsci.as_index(np.uint32(7)), int)
    assert npsci.as_index(np.array(3)) == 3
    assert npsci.as_index(2**64 - 1) == 2**64 - 1


@pytest.mark.parametrize("value", [1.0, np.float32(2.0), "3", True, np.bool_(False)])
def test_as_index_with_non_integers(value):
    with pytest.raises(TypeError):
        npsci.as_index(value)


@pytest.mark.parametrize("value", [-1, np.int64(-5)])
def test_as_index_with_negative_values(value):
    with pytest.raises(IndexOutOfRangeError):
        npsci.as_index(value)
