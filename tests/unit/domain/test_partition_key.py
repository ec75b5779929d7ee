"""Tests for PartitionKey and Counter."""

import pytest

from viewcounter.domain.entities.counter import Counter
from viewcounter.domain.value_objects.partition_key import PartitionKey


def test_key_is_host_plus_path():
    assert str(PartitionKey(host="a.com", path="/x")) == "a.com/x"


def test_same_host_and_path_are_equal():
    assert PartitionKey("a.com", "/x") == PartitionKey("a.com", "/x")
    assert hash(PartitionKey("a.com", "/x")) == hash(PartitionKey("a.com", "/x"))


def test_different_hosts_never_collide():
    assert str(PartitionKey("a.com", "/x")) != str(PartitionKey("b.com", "/x"))


def test_key_requires_host():
    with pytest.raises(ValueError):
        PartitionKey(host="", path="/x")


def test_key_requires_leading_slash():
    with pytest.raises(ValueError):
        PartitionKey(host="a.com", path="x")


def test_key_is_frozen():
    key = PartitionKey("a.com", "/x")
    with pytest.raises(AttributeError):
        key.path = "/y"


def test_counter_defaults_to_zero():
    assert Counter(key=PartitionKey("a.com", "/x")).views == 0


def test_counter_incremented_returns_new_counter():
    c = Counter(key=PartitionKey("a.com", "/x"), views=4)
    assert c.incremented().views == 5
    assert c.views == 4


def test_counter_rejects_negative_value():
    with pytest.raises(ValueError):
        Counter(key=PartitionKey("a.com", "/x"), views=-1)
