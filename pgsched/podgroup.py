"""Pod-group helpers: label lookup, wait timeouts and merge patches."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from pgsched.constants import POD_GROUP_LABEL

DEFAULT_WAIT_TIME = timedelta(seconds=60)
"""Wait time used when neither the group nor the caller gives one."""


@dataclass
class Pod:
    """The parts of a pod that pod-group handling looks at."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class PodGroup:
    """A group of pods that must be scheduled together."""

    name: str = ""
    namespace: str = ""
    min_member: int = 0
    schedule_timeout_seconds: int | None = None
    min_resources: dict[str, Any] | None = None


def _to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def _diff(original: dict[str, Any], modified: dict[str, Any]) -> dict[str, Any]:
    patch: dict[str, Any] = {}
    for key, new_value in modified.items():
        if key not in original:
            patch[key] = new_value
            continue
        old_value = original[key]
        if isinstance(old_value, dict) and isinstance(new_value, dict):
            nested = _diff(old_value, new_value)
            if nested:
                patch[key] = nested
        elif old_value != new_value:
            patch[key] = new_value
    for key in original:
        if key not in modified:
            patch[key] = None
    return patch


def _encode(document: Any) -> bytes:
    text = json.dumps(document, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in (
        ("&", "\\u0026"),
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def create_merge_patch(original: Any, new: Any) -> bytes:
    """Return the two-way merge patch that turns ``original`` into ``new``.

    Both objects are serialised to JSON first; dataclass instances are turned
    into dictionaries. Raises ``TypeError`` for values JSON cannot represent
    and ``ValueError`` when either side is not a JSON object.
    """
    original_doc = json.loads(json.dumps(_to_plain(original)))
    new_doc = json.loads(json.dumps(_to_plain(new)))
    if not isinstance(original_doc, dict) or not isinstance(new_doc, dict):
        raise ValueError("merge patches can only be built between JSON objects")
    return _encode(_diff(original_doc, new_doc))


def get_pod_group_label(pod: Pod) -> str:
    """Return the pod's pod-group label, or an empty string."""
    return pod.labels.get(POD_GROUP_LABEL, "")


def get_pod_group_full_name(pod: Pod) -> str:
    """Return ``namespace/group`` for the pod, or an empty string if it has no group."""
    group_name = get_pod_group_label(pod)
    if not group_name:
        return ""
    return f"{pod.namespace}/{group_name}"


def get_wait_time_duration(
    pg: PodGroup | None, schedule_timeout: timedelta | None
) -> timedelta:
    """Pick the wait timeout: the group's own, then the given one, then the default."""
    if pg is not None and pg.schedule_timeout_seconds is not None:
        return timedelta(seconds=pg.schedule_timeout_seconds)
    if schedule_timeout is not None and schedule_timeout != timedelta(0):
        return schedule_timeout
    return DEFAULT_WAIT_TIME