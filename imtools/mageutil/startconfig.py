"""The start-config.yml file that lists services and tools."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

__all__ = ["DEFAULT_CONFIG_FILE", "StartConfig"]

DEFAULT_CONFIG_FILE = "start-config.yml"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _scalar_name(value: Any, what: str) -> str:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{what} must be a string, got {value!r}")


@dataclass
class StartConfig:
    """Service binaries with their instance counts, tool binaries and the fd limit."""

    service_binaries: dict[str, int] = field(default_factory=dict)
    tool_binaries: list[str] = field(default_factory=list)
    max_file_descriptors: int = 0

    @classmethod
    def load(cls, path: str | Path = DEFAULT_CONFIG_FILE) -> StartConfig:
        """Read the YAML file; on Windows service names get an .exe suffix."""
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"error unmarshalling YAML: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("error unmarshalling YAML: top level must be a mapping")

        raw_services = data.get("serviceBinaries") or {}
        if not isinstance(raw_services, dict):
            raise ValueError("serviceBinaries must be a mapping")
        services: dict[str, int] = {}
        for name, count in raw_services.items():
            if not _is_int(count):
                raise ValueError(f"count of service {name!r} must be an integer")
            binary = _scalar_name(name, "service name")
            if sys.platform.startswith("win"):
                binary += ".exe"
            services[binary] = count

        raw_tools = data.get("toolBinaries") or []
        if not isinstance(raw_tools, list):
            raise ValueError("toolBinaries must be a list")
        tools = [_scalar_name(tool, "tool name") for tool in raw_tools]

        max_fds = data.get("maxFileDescriptors") or 0
        if not _is_int(max_fds):
            raise ValueError("maxFileDescriptors must be an integer")

        return cls(service_binaries=services, tool_binaries=tools, max_file_descriptors=max_fds)