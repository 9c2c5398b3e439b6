"""Hooks run around the creation, start, stop and termination of containers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from containerkit.logs import Logging

RequestHook = Callable[[Any], None]
ContainerHook = Callable[[Any], None]


class Stage(Enum):
    """The points of a container's life at which hooks run."""

    CREATING = "creating"
    CREATED = "created"
    STARTING = "starting"
    STARTED = "started"
    STOPPING = "stopping"
    STOPPED = "stopped"
    TERMINATING = "terminating"
    TERMINATED = "terminated"


_STAGE_FIELDS = {
    Stage.CREATING: "pre_creates",
    Stage.CREATED: "post_creates",
    Stage.STARTING: "pre_starts",
    Stage.STARTED: "post_starts",
    Stage.STOPPING: "pre_stops",
    Stage.STOPPED: "post_stops",
    Stage.TERMINATING: "pre_terminates",
    Stage.TERMINATED: "post_terminates",
}


def _call_all(hooks: Iterable[Callable[[Any], None]], target: Any) -> None:
    for hook in hooks:
        hook(target)


@dataclass
class ContainerLifecycleHooks:
    """Lists of hooks for each lifecycle stage.

    ``pre_creates`` hooks receive the container request; all others receive
    the container. A hook signals failure by raising, which stops the
    remaining hooks.
    """

    pre_creates: list[RequestHook] = field(default_factory=list)
    post_creates: list[ContainerHook] = field(default_factory=list)
    pre_starts: list[ContainerHook] = field(default_factory=list)
    post_starts: list[ContainerHook] = field(default_factory=list)
    pre_stops: list[ContainerHook] = field(default_factory=list)
    post_stops: list[ContainerHook] = field(default_factory=list)
    pre_terminates: list[ContainerHook] = field(default_factory=list)
    post_terminates: list[ContainerHook] = field(default_factory=list)

    def hooks_for(self, stage: Stage | str) -> list[Callable[[Any], None]]:
        """Return the hooks registered for ``stage``."""
        return getattr(self, _STAGE_FIELDS[Stage(stage)])

    def creating(self, request: Any) -> None:
        """Run the hooks before a container is created."""
        _call_all(self.pre_creates, request)

    def created(self, container: Any) -> None:
        """Run the hooks after a container is created."""
        _call_all(self.post_creates, container)

    def starting(self, container: Any) -> None:
        """Run the hooks before a container is started."""
        _call_all(self.pre_starts, container)

    def started(self, container: Any) -> None:
        """Run the hooks after a container is started."""
        _call_all(self.post_starts, container)

    def stopping(self, container: Any) -> None:
        """Run the hooks before a container is stopped."""
        _call_all(self.pre_stops, container)

    def stopped(self, container: Any) -> None:
        """Run the hooks after a container is stopped."""
        _call_all(self.post_stops, container)

    def terminating(self, container: Any) -> None:
        """Run the hooks before a container is terminated."""
        _call_all(self.pre_terminates, container)

    def terminated(self, container: Any) -> None:
        """Run the hooks after a container is terminated."""
        _call_all(self.post_terminates, container)


def run_hooks(
    hook_sets: Iterable[ContainerLifecycleHooks], stage: Stage | str, target: Any
) -> None:
    """Run the hooks of ``stage`` from every hook set in order.

    Raises ``ValueError`` for an unknown stage; an exception from a hook
    propagates and stops the hooks that follow it.
    """
    resolved = Stage(stage)
    for hooks in hook_sets:
        _call_all(hooks.hooks_for(resolved), target)


def _short_id(container: Any) -> str:
    return container.container_id[:12]


def default_logging_hook(logger: Logging) -> ContainerLifecycleHooks:
    """Return hooks that log every lifecycle stage through ``logger``.

    Requests are expected to carry ``image``; containers ``container_id``.
    """

    def container_hook(template: str) -> ContainerHook:
        return lambda container: logger.printf(template, _short_id(container))

    return ContainerLifecycleHooks(
        pre_creates=[
            lambda request: logger.printf("🐳 Creating container for image %s", request.image)
        ],
        post_creates=[container_hook("✅ Container created: %s")],
        pre_starts=[container_hook("🐳 Starting container: %s")],
        post_starts=[container_hook("✅ Container started: %s")],
        pre_stops=[container_hook("🐳 Stopping container: %s")],
        post_stops=[container_hook("✋ Container stopped: %s")],
        pre_terminates=[container_hook("🐳 Terminating container: %s")],
        post_terminates=[container_hook("🚫 Container terminated: %s")],
    )