import subprocess
from unittest import mock

import pytest

from containerkit.dockerhost import (
    default_gateway_ip,
    extract_docker_host,
    in_a_container,
)

ENV = "TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE"


@pytest.fixture
def no_override(monkeypatch):
    monkeypatch.delenv(ENV, raising=False)


def test_docker_host_from_environment(monkeypatch):
    monkeypatch.setenv(ENV, "/path/to/docker.sock")
    assert extract_docker_host() == "/path/to/docker.sock"


def test_environment_wins_over_argument(monkeypatch):
    monkeypatch.setenv(ENV, "/path/to/docker.sock")
    assert extract_docker_host("unix:///this/is/a/sample.sock") == "/path/to/docker.sock"


def test_default_docker_host(no_override):
    assert extract_docker_host() == "/var/run/docker.sock"


def test_malformed_docker_host(no_override):
    assert extract_docker_host("path-to-docker-sock") == "/var/run/docker.sock"


def test_malformed_schema_docker_host(no_override):
    assert extract_docker_host("http://path to docker sock") == "/var/run/docker.sock"


def test_unix_docker_host(no_override):
    assert extract_docker_host("unix:///this/is/a/sample.sock") == "/this/is/a/sample.sock"


def test_in_a_container_file_missing(tmp_path):
    assert in_a_container(tmp_path / ".dockerenv") is False


def test_in_a_container_file_exists(tmp_path):
    marker = tmp_path / ".dockerenv"
    marker.touch()
    assert in_a_container(marker) is True


def test_default_gateway_ip_parsed():
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="172.17.0.1\n")
    with mock.patch("subprocess.run", return_value=completed):
        assert default_gateway_ip() == "172.17.0.1"


def test_default_gateway_ip_empty_output():
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="  \n")
    with mock.patch("subprocess.run", return_value=completed):
        with pytest.raises(RuntimeError, match="failed to parse default gateway IP"):
            default_gateway_ip()


def test_default_gateway_ip_command_fails():
    error = subprocess.CalledProcessError(returncode=1, cmd="sh")
    with mock.patch("subprocess.run", side_effect=error):
        with pytest.raises(RuntimeError, match="failed to detect docker host"):
            default_gateway_ip()