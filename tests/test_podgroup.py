from dataclasses import dataclass, field
from datetime import timedelta

import pytest

from pgsched.constants import POD_GROUP_LABEL
from pgsched.podgroup import (
    DEFAULT_WAIT_TIME,
    Pod,
    PodGroup,
    create_merge_patch,
    get_pod_group_full_name,
    get_pod_group_label,
    get_wait_time_duration,
)


@dataclass
class PodSpec:
    Hostname: str = ""


@dataclass
class PodStatus:
    Reason: str = ""


@dataclass
class CorePod:
    Spec: PodSpec = field(default_factory=PodSpec)
    Status: PodStatus = field(default_factory=PodStatus)


@pytest.mark.parametrize(
    "old, new, expected",
    [
        (
            CorePod(Spec=PodSpec(Hostname="test")),
            CorePod(Status=PodStatus(Reason="test")),
            b'{"Spec":{"Hostname":""},"Status":{"Reason":"test"}}',
        ),
        (
            CorePod(Spec=PodSpec(Hostname="test"), Status=PodStatus(Reason="test1")),
            CorePod(Status=PodStatus(Reason="test")),
            b'{"Spec":{"Hostname":""},"Status":{"Reason":"test"}}',
        ),
    ],
)
def test_create_merge_patch(old, new, expected):
    assert create_merge_patch(old, new) == expected


def test_merge_patch_identical_is_empty():
    assert create_merge_patch({"a": {"b": 1}}, {"a": {"b": 1}}) == b"{}"


def test_merge_patch_removed_key_is_null():
    assert create_merge_patch({"a": 1, "b": 2}, {"a": 1}) == b'{"b":null}'


def test_merge_patch_list_replaced_whole():
    assert create_merge_patch({"l": [1, 2]}, {"l": [1, 3]}) == b'{"l":[1,3]}'


def test_merge_patch_rejects_non_objects():
    with pytest.raises(ValueError):
        create_merge_patch([1], [2])


def test_merge_patch_rejects_unserialisable():
    with pytest.raises(TypeError):
        create_merge_patch({"a": object()}, {"a": 1})


def test_pod_group_label_present():
    pod = Pod(name="p", namespace="ns", labels={POD_GROUP_LABEL: "pg1"})
    assert get_pod_group_label(pod) == "pg1"
    assert get_pod_group_full_name(pod) == "ns/pg1"


def test_pod_group_label_absent():
    pod = Pod(name="p", namespace="ns")
    assert get_pod_group_label(pod) == ""
    assert get_pod_group_full_name(pod) == ""


def test_wait_time_from_pod_group():
    pg = PodGroup(name="pg", namespace="ns", schedule_timeout_seconds=10)
    assert get_wait_time_duration(pg, timedelta(seconds=30)) == timedelta(seconds=10)


def test_wait_time_from_argument():
    pg = PodGroup(name="pg", namespace="ns")
    assert get_wait_time_duration(pg, timedelta(seconds=30)) == timedelta(seconds=30)


def test_wait_time_default():
    assert get_wait_time_duration(None, None) == DEFAULT_WAIT_TIME
    assert get_wait_time_duration(None, timedelta(0)) == timedelta(seconds=60)


def test_wait_time_zero_group_timeout_is_kept():
    pg = PodGroup(schedule_timeout_seconds=0)
    assert get_wait_time_duration(pg, timedelta(seconds=30)) == timedelta(0)