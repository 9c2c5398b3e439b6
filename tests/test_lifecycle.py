from dataclasses import dataclass

import pytest

from containerkit.lifecycle import (
    ContainerLifecycleHooks,
    Stage,
    default_logging_hook,
    run_hooks,
)
from containerkit.logs import Logging

CONTAINER_ID = "0123456789abcdef" * 4


@dataclass
class FakeRequest:
    image: str


@dataclass
class FakeContainer:
    container_id: str


class InMemoryLogger(Logging):
    def __init__(self):
        self.data = []

    def printf(self, format, *args):
        self.data.append(format % args)


def full_lifecycle(hook_sets, request, container):
    """Create, start, stop, start again and terminate."""
    run_hooks(hook_sets, Stage.CREATING, request)
    for stage in (
        Stage.CREATED,
        Stage.STARTING,
        Stage.STARTED,
        Stage.STOPPING,
        Stage.STOPPED,
        Stage.STARTING,
        Stage.STARTED,
        Stage.TERMINATING,
        Stage.TERMINATED,
    ):
        run_hooks(hook_sets, stage, container)


def recording_hooks(prints):
    def make(label):
        return lambda target: prints.append(f"{label}: {target!r}")

    def pair(name):
        return [make(f"{name} hook 1"), make(f"{name} hook 2")]

    return ContainerLifecycleHooks(
        pre_creates=pair("pre-create"),
        post_creates=pair("post-create"),
        pre_starts=pair("pre-start"),
        post_starts=pair("post-start"),
        pre_stops=pair("pre-stop"),
        post_stops=pair("post-stop"),
        pre_terminates=pair("pre-terminate"),
        post_terminates=pair("post-terminate"),
    )


def test_lifecycle_hooks_are_honoured_in_order():
    prints = []
    full_lifecycle(
        [recording_hooks(prints)], FakeRequest("nginx:alpine"), FakeContainer(CONTAINER_ID)
    )
    assert len(prints) == 20
    expected_prefixes = [
        "pre-create hook 1: ",
        "pre-create hook 2: ",
        "post-create hook 1: ",
        "post-create hook 2: ",
        "pre-start hook 1: ",
        "pre-start hook 2: ",
        "post-start hook 1: ",
        "post-start hook 2: ",
        "pre-stop hook 1: ",
        "pre-stop hook 2: ",
        "post-stop hook 1: ",
        "post-stop hook 2: ",
        "pre-start hook 1: ",
        "pre-start hook 2: ",
        "post-start hook 1: ",
        "post-start hook 2: ",
        "pre-terminate hook 1: ",
        "pre-terminate hook 2: ",
        "post-terminate hook 1: ",
        "post-terminate hook 2: ",
    ]
    for line, prefix in zip(prints, expected_prefixes):
        assert line.startswith(prefix)


def test_pre_create_hooks_receive_the_request():
    prints = []
    request = FakeRequest("nginx:alpine")
    recording_hooks(prints).creating(request)
    assert prints == [f"pre-create hook 1: {request!r}", f"pre-create hook 2: {request!r}"]


def test_default_logger_logs_each_stage():
    logger = InMemoryLogger()
    full_lifecycle(
        [default_logging_hook(logger)], FakeRequest("nginx:alpine"), FakeContainer(CONTAINER_ID)
    )
    assert len(logger.data) == 10
    assert logger.data[0] == "🐳 Creating container for image nginx:alpine"
    assert logger.data[1] == "✅ Container created: " + CONTAINER_ID[:12]
    assert logger.data[-1] == "🚫 Container terminated: " + CONTAINER_ID[:12]


def test_multiple_default_loggers():
    logger = InMemoryLogger()
    hook_sets = [default_logging_hook(logger), default_logging_hook(logger)]
    full_lifecycle(hook_sets, FakeRequest("nginx:alpine"), FakeContainer(CONTAINER_ID))
    assert len(logger.data) == 20


def test_stage_methods_run_matching_hooks():
    seen = []
    hooks = ContainerLifecycleHooks(
        post_stops=[lambda c: seen.append(("stopped", c.container_id))],
        pre_terminates=[lambda c: seen.append(("terminating", c.container_id))],
    )
    container = FakeContainer("abc")
    hooks.starting(container)
    hooks.stopped(container)
    hooks.terminating(container)
    assert seen == [("stopped", "abc"), ("terminating", "abc")]


def test_failing_hook_stops_remaining_hooks():
    seen = []

    def failing(_):
        raise RuntimeError("hook failed")

    first = ContainerLifecycleHooks(post_starts=[failing, lambda c: seen.append("after")])
    second = ContainerLifecycleHooks(post_starts=[lambda c: seen.append("second set")])
    with pytest.raises(RuntimeError, match="hook failed"):
        run_hooks([first, second], "started", FakeContainer(CONTAINER_ID))
    assert seen == []


def test_unknown_stage_is_rejected():
    with pytest.raises(ValueError):
        run_hooks([ContainerLifecycleHooks()], "exploding", FakeContainer(CONTAINER_ID))


def test_hooks_for_returns_stage_list():
    hook = lambda c: None  # noqa: E731
    hooks = ContainerLifecycleHooks(pre_stops=[hook])
    assert hooks.hooks_for(Stage.STOPPING) == [hook]
    assert hooks.hooks_for("stopped") == []