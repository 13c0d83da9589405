import os

import pytest

from beenode.cores import Cores


def test_max_uses_all_cpus():
    assert int(Cores.max()) == (os.cpu_count() or 1)


def test_large_value_is_capped():
    assert Cores(10**6) == Cores.max()


def test_small_value_is_kept():
    assert int(Cores(1)) == 1


def test_zero_is_allowed():
    assert int(Cores(0)) == 0


def test_usable_as_range_bound():
    assert len(range(Cores(1))) == 1


def test_negative_is_rejected():
    with pytest.raises(ValueError):
        Cores(-1)