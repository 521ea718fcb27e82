"""Build and version information."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from typing import Any

__all__ = [
    "GIT_MAJOR",
    "GIT_MINOR",
    "GIT_VERSION",
    "GIT_COMMIT",
    "GIT_TREE_STATE",
    "BUILD_DATE",
    "Info",
    "ClientVersion",
    "Output",
    "get",
    "get_single_version",
]

# Fallback values used when a build does not stamp its own.
GIT_MAJOR = ""
GIT_MINOR = ""
GIT_VERSION = "latest"
GIT_COMMIT = ""
GIT_TREE_STATE = ""
BUILD_DATE = "1970-01-01T00:00:00Z"


@dataclass
class Info:
    """Version details of a build."""

    git_version: str
    build_date: str
    python_version: str
    compiler: str
    platform: str
    major: str = ""
    minor: str = ""
    git_tree_state: str = ""
    git_commit: str = ""

    def __str__(self) -> str:
        return self.git_version

    def to_dict(self) -> dict[str, Any]:
        """Serialisable form; empty optional fields are left out."""
        result: dict[str, Any] = {}
        if self.major:
            result["major"] = self.major
        if self.minor:
            result["minor"] = self.minor
        result["gitVersion"] = self.git_version
        if self.git_tree_state:
            result["gitTreeState"] = self.git_tree_state
        if self.git_commit:
            result["gitCommit"] = self.git_commit
        result["buildDate"] = self.build_date
        result["pythonVersion"] = self.python_version
        result["compiler"] = self.compiler
        result["platform"] = self.platform
        return result


@dataclass
class ClientVersion:
    """Version of the client core library."""

    client_version: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"clientVersion": self.client_version} if self.client_version else {}


@dataclass
class Output:
    """Server version, with the client version when it is known."""

    server_version: Info
    client_version: ClientVersion | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"OpenIMServerVersion": self.server_version.to_dict()}
        if self.client_version is not None:
            result["OpenIMClientVersion"] = self.client_version.to_dict()
        return result


def get() -> Info:
    """Version information of the running code."""
    return Info(
        major=GIT_MAJOR,
        minor=GIT_MINOR,
        git_version=GIT_VERSION,
        git_tree_state=GIT_TREE_STATE,
        git_commit=GIT_COMMIT,
        build_date=BUILD_DATE,
        python_version=sys.version.split()[0],
        compiler=platform.python_implementation(),
        platform=f"{platform.system().lower()}/{platform.machine().lower()}",
    )


def get_single_version() -> str:
    """The version string alone."""
    return GIT_VERSION