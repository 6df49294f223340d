from datetime import timedelta

import pytest

from purger.selection import ExpirationPolicy, is_expired

from conftest import NOW, container


@pytest.mark.parametrize(
    "age, expected",
    [
        (timedelta(hours=12), False),
        (timedelta(days=1) - timedelta(seconds=1), False),
        (timedelta(days=1), False),
        (timedelta(days=1, seconds=1), True),
        (timedelta(days=2), True),
    ],
)
def test_is_expired_strictly_greater_than_threshold(age, expected):
    assert is_expired(NOW - age, timedelta(days=1), NOW) is expected


def test_is_expired_accepts_threshold_in_seconds():
    assert is_expired(NOW - timedelta(seconds=61), 60, NOW)
    assert not is_expired(NOW - timedelta(seconds=60), 60, NOW)


def test_is_expired_zero_threshold_expires_any_positive_age():
    assert is_expired(NOW - timedelta(microseconds=1), timedelta(0), NOW)
    assert not is_expired(NOW, timedelta(0), NOW)


def test_is_expired_future_creation_is_not_expired():
    assert not is_expired(NOW + timedelta(minutes=5), timedelta(0), NOW)


def test_expiration_policy_uses_descriptor_creation_time():
    policy = ExpirationPolicy(timedelta(days=1))

    assert policy.is_expired(container("a", "old", timedelta(days=2)), NOW)
    assert not policy.is_expired(container("b", "young", timedelta(hours=12)), NOW)


def test_expiration_policy_rejects_negative_threshold():
    with pytest.raises(ValueError, match="non-negative"):
        ExpirationPolicy(timedelta(seconds=-1))
