import random

import pytest

from rosestore.ds.zset import SortedSet

KEY = "myzset"


@pytest.fixture
def zset():
    z = SortedSet()
    z.zadd(KEY, 19, "ced")
    z.zadd(KEY, 12, "acd")
    z.zadd(KEY, 17, "bcd")
    z.zadd(KEY, 32, "acc")
    z.zadd(KEY, 17, "mcd")
    z.zadd(KEY, 21, "ccd")
    z.zadd(KEY, 17, "ecd")
    return z


ORDERED = ["acd", "bcd", "ecd", "mcd", "ced", "ccd", "acc"]


def test_zadd(zset):
    zset.zadd(KEY, 39, "mmd")
    assert zset.zcard(KEY) == 8
    assert zset.zscore(KEY, "ced") == 19
    assert zset.zscore(KEY, "mmd") == 39


def test_zadd_updates_score(zset):
    zset.zadd(KEY, 1, "acc")
    assert zset.zscore(KEY, "acc") == 1
    assert zset.zrank(KEY, "acc") == 0
    assert zset.zcard(KEY) == 7


def test_zscore(zset):
    assert zset.zscore(KEY, "acd") == 12
    assert zset.zscore(KEY, "ccd") == 21
    assert zset.zscore(KEY, "accsssss") is None
    assert zset.zscore("missing", "acd") is None


def test_zrank(zset):
    assert zset.zrank(KEY, "acd") == 0
    assert zset.zrank(KEY, "acc") == 6
    assert zset.zrank(KEY, "mcd") == 3
    assert zset.zrank(KEY, "ecd") == 2
    assert zset.zrank(KEY, "bcd") == 1
    assert zset.zrank(KEY, "nope") is None


def test_zrevrank(zset):
    assert zset.zrevrank(KEY, "acc") == 0
    assert zset.zrevrank(KEY, "ccd") == 1
    assert zset.zrevrank(KEY, "acd") == 6
    assert zset.zrevrank(KEY, "bcd") == 5
    assert zset.zrevrank(KEY, "mcd") == 3
    assert zset.zrevrank(KEY, "ecd") == 4
    assert zset.zrevrank("missing", "ecd") is None


def test_zincrby(zset):
    assert zset.zincrby(KEY, 300, "acd") == 312
    assert zset.zincrby(KEY, 100, "acc") == 132
    assert zset.zrank(KEY, "acd") == 6
    assert zset.zrank(KEY, "acc") == 5


def test_zincrby_missing_member_adds_it():
    z = SortedSet()
    assert z.zincrby("k", 2.5, "m") == 2.5
    assert z.zscore("k", "m") == 2.5


def test_zrange(zset):
    assert zset.zrange(KEY, 0, -1) == ORDERED
    assert zset.zrange(KEY, 1, 2) == ["bcd", "ecd"]
    assert zset.zrange(KEY, -2, 100) == ["ccd", "acc"]
    assert zset.zrange(KEY, 5, 3) == []
    assert zset.zrange("missing", 0, -1) == []


def test_zrange_with_scores(zset):
    result = zset.zrange_with_scores(KEY, 0, -1)
    assert len(result) == 7
    assert result[0] == ("acd", 12)
    assert result[-1] == ("acc", 32)


def test_zrevrange(zset):
    assert zset.zrevrange(KEY, 0, -1) == ORDERED[::-1]
    assert zset.zrevrange(KEY, 1, 2) == ["ccd", "ced"]


def test_zrevrange_with_scores(zset):
    result = zset.zrevrange_with_scores(KEY, 0, 1)
    assert result == [("acc", 32), ("ccd", 21)]


def test_zrem(zset):
    assert zset.zrem(KEY, "acd") is True
    assert zset.zrem(KEY, "aaaaaaa") is False
    assert zset.zcard(KEY) == 6


def test_zrange_after_removing_all():
    z = SortedSet()
    z.zadd("k", 1, "a")
    z.zrem("k", "a")
    assert z.zrange("k", 0, -1) == []
    assert z.zscore_range("k", 0, 10) == []


def test_zget_by_rank(zset):
    assert zset.zget_by_rank(KEY, 2) == ("ecd", 17)
    assert zset.zget_by_rank(KEY, 7) is None
    assert zset.zget_by_rank(KEY, -1) is None
    assert zset.zget_by_rank("missing", 0) is None


def test_zrevget_by_rank(zset):
    assert zset.zrevget_by_rank(KEY, 0) == ("acc", 32)
    assert zset.zrevget_by_rank(KEY, 6) == ("acd", 12)
    assert zset.zrevget_by_rank(KEY, 7) is None


def test_zget_by_rank_random_members(zset):
    rng = random.Random(7)
    letters = "abcdefghijklmnopqrstuvwxyz"
    for _ in range(100):
        name = "".join(rng.choice(letters) for _ in range(12))
        zset.zadd(KEY, float(rng.randrange(100000)), name)
    ordered = zset.zrange_with_scores(KEY, 0, -1)
    assert ordered == sorted(ordered, key=lambda pair: (pair[1], pair[0]))
    assert zset.zget_by_rank(KEY, 0) == ordered[0]
    for rank, (member, _) in enumerate(ordered):
        assert zset.zrank(KEY, member) == rank


def test_zscore_range(zset):
    zset.zadd(KEY, 13, "aa")
    result = zset.zscore_range(KEY, -12, 500)
    assert [m for m, _ in result] == ["acd", "aa", "bcd", "ecd", "mcd", "ced", "ccd", "acc"]
    assert zset.zscore_range(KEY, 17, 19) == [
        ("bcd", 17),
        ("ecd", 17),
        ("mcd", 17),
        ("ced", 19),
    ]
    assert zset.zscore_range(KEY, 20, 10) == []


def test_zrevscore_range(zset):
    zset.zadd(KEY, 45, "aa")
    assert zset.zrevscore_range(KEY, 17, 17) == [("mcd", 17), ("ecd", 17), ("bcd", 17)]
    assert zset.zrevscore_range(KEY, 100, 21) == [("aa", 45), ("acc", 32), ("ccd", 21)]
    assert zset.zrevscore_range(KEY, 10, 20) == []
    assert zset.zrevscore_range(KEY, 5, 1) == []


def test_zcard(zset):
    assert zset.zcard(KEY) == 7
    assert zset.zcard("missing") == 0


def test_example():
    z = SortedSet()
    z.zadd("my_zset", 12.1, "PHP")
    z.zadd("my_zset", 34.23, "Java")
    z.zadd("my_zset", 23.5, "Python")
    assert z.zget_by_rank("my_zset", 2) == ("Java", 34.23)
    assert z.zrange("my_zset", 1, 10) == ["Python", "Java"]