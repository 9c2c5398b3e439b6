"""Locating the Docker daemon socket and the host's default gateway."""

from __future__ import annotations

import os
import subprocess
from urllib.parse import urlsplit

SOCKET_OVERRIDE_ENV = "TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE"
DEFAULT_DOCKER_SOCKET = "/var/run/docker.sock"
DOCKERENV_PATH = "/.dockerenv"


def default_gateway_ip() -> str:
    """Return the IP of the default gateway as reported by ``ip route``.

    Raises ``RuntimeError`` when the command fails or prints nothing.
    """
    try:
        result = subprocess.run(
            ["sh", "-c", "ip route|awk '/default/ { print $3 }'"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RuntimeError("failed to detect docker host") from exc

    ip = result.stdout.strip()
    if not ip:
        raise RuntimeError("failed to parse default gateway IP")
    return ip


def extract_docker_host(docker_host: str | None = None) -> str:
    """Return the path of the Docker socket to use.

    The socket override environment variable wins; otherwise a ``unix://``
    ``docker_host`` URL gives its path, and anything else falls back to the
    default socket path.
    """
    override = os.environ.get(SOCKET_OVERRIDE_ENV, "")
    if override:
        return override

    if not docker_host:
        return DEFAULT_DOCKER_SOCKET

    try:
        url = urlsplit(docker_host)
    except ValueError:
        return DEFAULT_DOCKER_SOCKET

    if url.scheme == "unix":
        return url.path
    return DEFAULT_DOCKER_SOCKET


def in_a_container(path: str | os.PathLike[str] = DOCKERENV_PATH) -> bool:
    """Return whether the process runs inside a container, judged by ``path``."""
    return os.path.exists(path)