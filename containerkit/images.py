"""Reading image names from Dockerfiles and registries from image names."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from urllib.parse import urlsplit

INDEX_DOCKER_IO = "https://index.docker.io/v1/"

_MAX_URL_RUNE_COUNT = 2083
_MIN_URL_RUNE_COUNT = 3

_URL_SCHEMA = r"((ftp|tcp|udp|wss?|https?):\/\/)"
_URL_USERNAME = r"(\S+(:\S*)?@)"
_URL_IP = (
    r"([1-9]\d?|1\d\d|2[01]\d|22[0-3]|24\d|25[0-5])"
    r"(\.(\d{1,2}|1\d\d|2[0-4]\d|25[0-5])){2}"
    r"(?:\.([0-9]\d?|1\d\d|2[0-4]\d|25[0-5]))"
)
_IP = (
    r"(([0-9a-fA-F]{1,4}:){7,7}[0-9a-fA-F]{1,4}|([0-9a-fA-F]{1,4}:){1,7}:|"
    r"([0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}|([0-9a-fA-F]{1,4}:){1,5}(:[0-9a-fA-F]{1,4}){1,2}|"
    r"([0-9a-fA-F]{1,4}:){1,4}(:[0-9a-fA-F]{1,4}){1,3}|([0-9a-fA-F]{1,4}:){1,3}(:[0-9a-fA-F]{1,4}){1,4}|"
    r"([0-9a-fA-F]{1,4}:){1,2}(:[0-9a-fA-F]{1,4}){1,5}|[0-9a-fA-F]{1,4}:((:[0-9a-fA-F]{1,4}){1,6})|"
    r":((:[0-9a-fA-F]{1,4}){1,7}|:)|fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}|"
    r"::(ffff(:0{1,4}){0,1}:){0,1}((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])|([0-9a-fA-F]{1,4}:){1,4}:"
    r"((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9]))"
)
_URL_SUBDOMAIN = r"((www\.)|([a-zA-Z0-9]+([-_\.]?[a-zA-Z0-9])*[a-zA-Z0-9]\.[a-zA-Z0-9]+))"
_URL_PATH = r"((\/|\?|#)[^\s]*)"
_URL_PORT = r"(:(\d{1,5}))"
_URL = (
    r"^" + _URL_SCHEMA + r"?" + _URL_USERNAME + r"?"
    + r"((" + _URL_IP + r"|(\[" + _IP + r"\])|"
    + r"(([a-zA-Z0-9]([a-zA-Z0-9-_]+)?[a-zA-Z0-9]([-\.][a-zA-Z0-9]+)*)|(" + _URL_SUBDOMAIN + r"?))?"
    + r"(([a-zA-Z\u00a1-\uffff0-9]+-?-?)*[a-zA-Z\u00a1-\uffff0-9]+)"
    + r"(?:\.([a-zA-Z\u00a1-\uffff]{1,}))?))\.?"
    + _URL_PORT + r"?" + _URL_PATH + r"?\Z"
)

_RX_URL = re.compile(_URL, re.ASCII)

_RX_IMAGE = re.compile(
    r"^(?:(?P<registry>(https?://)?[^/]+)(?::(?P<port>\d+))?/)?"
    r"(?:(?P<repository>[^/]+)/)?(?P<image>[^:]+)(?::(?P<tag>.+))?\Z"
)


def extract_images_from_dockerfile(
    dockerfile: str | os.PathLike[str],
    build_args: Mapping[str, str | None] | None = None,
) -> list[str]:
    """Return the images named by the ``FROM`` lines of a Dockerfile.

    ``${NAME}`` references in an image are replaced by the matching build
    argument when it has a value. Raises ``OSError`` if the file cannot be read.
    """
    args = build_args or {}
    images: list[str] = []

    with open(dockerfile, encoding="utf-8") as fh:
        for raw in fh:
            line = raw.strip()
            if not line.upper().startswith("FROM"):
                continue

            line = line.removeprefix("FROM")
            image = line.strip().split(" ")[0]
            for name, value in args.items():
                if value is not None:
                    image = image.replace("${" + name + "}", value)
            images.append(image)

    return images


def extract_registry(image: str, fallback: str) -> str:
    """Return the registry part of an image name, or ``fallback``.

    An empty string is returned when the name does not parse as an image at
    all; the fallback is used when the candidate registry is not a URL.
    """
    match = _RX_IMAGE.match(image)
    if match is None:
        return ""

    registry = match.group("registry") or ""
    if is_url(registry):
        return registry
    return fallback


def is_url(value: str) -> bool:
    """Return whether ``value`` looks like a URL, host name or IP address."""
    if (
        not value
        or len(value) >= _MAX_URL_RUNE_COUNT
        or len(value.encode("utf-8")) <= _MIN_URL_RUNE_COUNT
        or value.startswith(".")
    ):
        return False

    candidate = value
    if ":" in value and "://" not in value:
        # a bare host:port gets a scheme so that it parses as a network location
        candidate = "http://" + value

    try:
        parts = urlsplit(candidate)
        parts.port  # validates the port
    except ValueError:
        return False

    host = parts.netloc.rpartition("@")[2]
    if host.startswith("."):
        return False
    if not host and parts.path and "." not in parts.path:
        return False

    return _RX_URL.match(value) is not None