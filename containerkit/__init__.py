"""Building blocks for container-based test helpers: archives, image names, socket discovery, logs and lifecycle hooks."""

__version__ = "0.20.0"

__all__ = ["dockerhost", "execproc", "files", "images", "lifecycle", "logs", "metadata"]