# containerkit

A small set of building blocks for writing container-backed test helpers.
It uses only the standard library. None of its functions talk to a Docker daemon.
`default_gateway_ip` is the only one that starts another program, a shell.

## Modules

### `containerkit.files`: build-context archives

- `tar_dir(src, file_mode)` packs a directory into gzip-compressed tar bytes.
  Entry names are relative to the parent of `src`, so the directory itself is
  the top-level entry. Symbolic links are skipped, and every entry gets
  `file_mode` as its permission bits. It prints a progress line to standard
  output for the directory and for each skipped link.
- `tar_file(file_content, base_path, file_mode)` packs a single file's bytes
  into gzip-compressed tar bytes. The entry is named after the last element of
  `base_path`.
- `is_dir(path)` returns whether a path is a directory. It raises `OSError`, for
  example `FileNotFoundError`, when the path cannot be examined.

### `containerkit.images`: image and registry names

- `extract_images_from_dockerfile(dockerfile, build_args=None)` returns the
  image named by each `FROM` line. Any `${NAME}` that has a build-argument value
  is replaced with that value.
- `extract_registry(image, fallback)` returns the registry part of an image
  reference, such as `localhost:5000` or `docker.elastic.co`. It returns
  `fallback` when there is no such part, and an empty string when the reference
  does not parse at all.
- `is_url(value)` is the URL, host name and IP check used by `extract_registry`.
- `INDEX_DOCKER_IO` is the default Docker Hub index address.

### `containerkit.dockerhost`: locating the Docker socket

- `extract_docker_host(docker_host=None)` returns the socket path to use:
  1. the `TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE` environment variable, if it is set;
  2. otherwise the path of a `unix://` `docker_host` URL;
  3. otherwise `/var/run/docker.sock`.
- `in_a_container(path="/.dockerenv")` returns whether the marker file exists.
- `default_gateway_ip()` runs `ip route` through `sh` and returns the default
  gateway. It raises `RuntimeError` when the command fails or prints nothing.

### `containerkit.metadata`: version, session and labels

- `VERSION` and the label names: `LABEL_BASE`, `LABEL_LANG`, `LABEL_REAPER`,
  `LABEL_SESSION_ID` and `LABEL_VERSION`.
- `session_id()` returns a random UUID that is created once per process.
  `session_id_string()` returns the same UUID as text.
- `default_labels()` returns a new dict that marks a resource as belonging to
  this package, language, version and session.

### `containerkit.logs`: log records and loggers

- `Log(log_type, content)` is a frozen record. `STDOUT_LOG` and `STDERR_LOG` are
  the two log types.
- `LogConsumer` is an abstract class with `accept(log)`.
- `Logging` is an abstract class with `printf(format, *args)`.
- `StandardLogger(stream=None)` writes each message as a timestamped line, to
  standard error by default. `LOGGER` is a module-level instance.
- `with_logger(logger)` returns a `LoggerOption`. Its `apply_generic_to(opts)`
  and `apply_docker_to(opts)` methods set `opts.logger`.
- `log_docker_server_info(client, logger)` logs the server version, API version,
  operating system and total memory. It reads them from any object that has
  `info()` and `client_version()`. If `info()` fails, the error is logged
  instead of raised.

### `containerkit.execproc`: exec output

- `demultiplex(stream)` splits a Docker multiplexed stream, given as bytes or a
  binary reader, into `(stdout, stderr)` bytes. It raises `DemultiplexError` for
  a daemon error frame or an unknown stream type.
- `multiplexed()` returns a process option that replaces the reader with its
  demultiplexed standard output.
- `apply_options(reader, *options)` applies options to a reader in turn and
  returns the resulting reader. Options work on `ProcessOptions`.

### `containerkit.lifecycle`: lifecycle hooks

- `ContainerLifecycleHooks` holds one list of hooks for each stage:
  `pre_creates`, `post_creates`, `pre_starts`, `post_starts`, `pre_stops`,
  `post_stops`, `pre_terminates` and `post_terminates`.
  - The methods `creating`, `created`, `starting`, `started`, `stopping`,
    `stopped`, `terminating` and `terminated` run the hooks for their stage.
  - `hooks_for(stage)` returns the list for a stage.
  - A hook signals failure by raising, and the hooks after it do not run.
- `Stage` names the eight stages. Stages may also be given as strings such as
  `"starting"`.
- `run_hooks(hook_sets, stage, target)` runs one stage across several hook sets
  in order. It raises `ValueError` for an unknown stage.
- `default_logging_hook(logger)` returns hooks that log every stage. They
  expect a request to have an `image` attribute and a container to have a
  `container_id` attribute.

## Examples

```python
from containerkit.images import INDEX_DOCKER_IO, extract_registry

extract_registry("localhost:5000/testcontainers/ryuk:latest", INDEX_DOCKER_IO)
# 'localhost:5000'
extract_registry("nginx:latest", INDEX_DOCKER_IO)
# 'https://index.docker.io/v1/'
```

```python
from containerkit.files import tar_file

archive = tar_file(b"FROM nginx\n", "Dockerfile", 0o755)  # gzip-compressed tar bytes
```

```python
from types import SimpleNamespace

from containerkit.lifecycle import default_logging_hook, run_hooks
from containerkit.logs import StandardLogger

container = SimpleNamespace(container_id="0123456789abcdef")
run_hooks([default_logging_hook(StandardLogger())], "starting", container)
# logs: 🐳 Starting container: 0123456789ab
```

## What it does not do

This package contains no Docker client. It does not create, start, stop or
remove containers or networks, and it does not build or pull images. It has no
wait strategies and no command-line tool. The hooks, options and log types
defined here are meant to be used by code that manages containers itself.

## Running the tests

```
pip install ".[test]"
pytest
```