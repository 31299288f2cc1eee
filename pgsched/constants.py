"""Shared constants and errors for pod-group co-scheduling."""

from __future__ import annotations

POD_GROUP_LABEL = "pod-group.scheduling.sigs.k8s.io"
"""Default label that ties a pod to its pod group."""


class CoschedulingError(Exception):
    """Base class for co-scheduling errors."""

    default_message = "coscheduling error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NotMatchedError(CoschedulingError):
    """The pod does not take part in co-scheduling."""

    default_message = "not match coscheduling"


class WaitingError(CoschedulingError):
    """The number of pods does not yet reach the group's minimum."""

    default_message = "waiting"


class ResourceNotEnoughError(CoschedulingError):
    """The cluster does not have enough resources for the group."""

    default_message = "resource not enough"