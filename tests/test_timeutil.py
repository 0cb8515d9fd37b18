import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from vbanext.timeutil import localtime


def test_epoch_matches_platform():
    assert localtime(0) == time.localtime(0)


def test_now_is_close_to_current_time():
    before = time.time()
    result = localtime()
    after = time.time()
    assert before - 1 <= time.mktime(result) <= after + 1


def test_round_trip_through_mktime():
    stamp = 1_000_000_000
    assert time.mktime(localtime(stamp)) == stamp


def test_out_of_range_raises():
    with pytest.raises((OverflowError, OSError, ValueError)):
        localtime(10**30)


def test_concurrent_calls_agree():
    stamps = [i * 86_400 for i in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(localtime, stamps))
    expected = [time.localtime(stamp) for stamp in stamps]
    assert results == expected