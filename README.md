# pgsched

Small helpers for gang scheduling, where pods that belong together are
scheduled as a group.

## What is in it

`pgsched.podgroup`:

- `Pod` and `PodGroup` are dataclasses that hold the fields these helpers
  read: a pod's `name`, `namespace` and `labels`; a group's `name`,
  `namespace`, `min_member`, `schedule_timeout_seconds` and `min_resources`.
- `get_pod_group_label(pod)` returns the group name the pod carries under
  the `pod-group.scheduling.sigs.k8s.io` label, or an empty string when it
  has none.
- `get_pod_group_full_name(pod)` returns `"<namespace>/<group>"`, or an
  empty string when the pod belongs to no group.
- `get_wait_time_duration(pg, schedule_timeout)` returns a `timedelta`: the
  group's own `schedule_timeout_seconds` if set, otherwise the given
  timeout if it is not `None` and not zero, otherwise `DEFAULT_WAIT_TIME`
  (60 seconds). `pg` may be `None`.
- `create_merge_patch(original, new)` returns, as compact JSON `bytes` with
  sorted keys, the two-way merge patch that turns `original` into `new`.
  Dataclass instances are converted to dictionaries first. Changed values
  appear with their new value, nested objects are compared key by key, and
  keys missing from `new` appear as `null`. It raises `TypeError` for values
  JSON cannot represent and `ValueError` when either side is not a JSON
  object.

`pgsched.constants`:

- `POD_GROUP_LABEL`, the label name above.
- `CoschedulingError` and its subclasses `NotMatchedError`
  ("not match coscheduling"), `WaitingError` ("waiting") and
  `ResourceNotEnoughError` ("resource not enough"). Each takes an optional
  message and falls back to the one shown.

## What it does not do

This is a library of helpers only. It does not schedule pods, talk to a
cluster, or watch pod groups; it has no command-line tool.

## Installation

```
pip install .
```

## Example

```python
from datetime import timedelta

from pgsched.podgroup import (
    Pod,
    PodGroup,
    create_merge_patch,
    get_pod_group_full_name,
    get_wait_time_duration,
)

pod = Pod(
    name="worker-0",
    namespace="batch",
    labels={"pod-group.scheduling.sigs.k8s.io": "training"},
)
print(get_pod_group_full_name(pod))            # batch/training

group = PodGroup(name="training", namespace="batch", schedule_timeout_seconds=10)
print(get_wait_time_duration(group, None))     # 0:00:10
print(get_wait_time_duration(None, timedelta(seconds=30)))  # 0:00:30
print(get_wait_time_duration(None, None))      # 0:01:00

print(create_merge_patch({"a": 1, "b": {"c": 2}}, {"b": {"c": 3}}))
# b'{"a":null,"b":{"c":3}}'
```

## Running the tests

```
pip install .[test]
pytest
```