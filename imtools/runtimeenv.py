"""Detection of the environment the process runs in."""

from __future__ import annotations

from pathlib import Path

__all__ = ["print_runtime_environment"]

_CGROUP_FILE = "/proc/1/cgroup"
_SERVICE_ACCOUNT_DIR = "/var/run/secrets/kubernetes.io/serviceaccount"


def _is_docker(cgroup_file: str = _CGROUP_FILE) -> bool:
    try:
        content = Path(cgroup_file).read_text(errors="replace")
    except OSError:
        return False
    return "docker" in content


def _is_kubernetes(service_account_dir: str = _SERVICE_ACCOUNT_DIR) -> bool:
    try:
        Path(service_account_dir).stat()
    except OSError:
        return False
    return True


def print_runtime_environment() -> str:
    """Return "kubernetes", "docker" or "source"."""
    if _is_kubernetes():
        return "kubernetes"
    if _is_docker():
        return "docker"
    return "source"