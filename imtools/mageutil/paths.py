"""Directory layout of the build output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from imtools.mageutil.system import os_arch

__all__ = ["Paths"]


@dataclass(frozen=True)
class Paths:
    """Locations of configuration, build output, logs and binaries under a root."""

    root: Path
    output_config: Path
    output: Path
    output_tools: Path
    output_tmp: Path
    output_logs: Path
    output_bin: Path
    output_bin_path: Path
    output_bin_tool_path: Path
    init_err_log_file: Path
    init_log_file: Path
    output_host_bin: Path
    output_host_bin_tools: Path

    @classmethod
    def from_root(cls, root: str | Path | None = None) -> Paths:
        """Layout under root, or under the current directory when root is None."""
        base = Path(root) if root is not None else Path.cwd()
        output = base / "_output"
        logs = output / "logs"
        bin_dir = output / "bin"
        bin_path = bin_dir / "platforms"
        bin_tool_path = bin_dir / "tools"
        arch = os_arch()
        return cls(
            root=base,
            output_config=base / "config",
            output=output,
            output_tools=output / "tools",
            output_tmp=output / "tmp",
            output_logs=logs,
            output_bin=bin_dir,
            output_bin_path=bin_path,
            output_bin_tool_path=bin_tool_path,
            init_err_log_file=logs / "openim-init-err.log",
            init_log_file=logs / "openim-init.log",
            output_host_bin=bin_path / arch,
            output_host_bin_tools=bin_tool_path / arch,
        )

    def _directories(self) -> tuple[Path, ...]:
        return (
            self.output_config,
            self.output,
            self.output_tools,
            self.output_tmp,
            self.output_logs,
            self.output_bin,
            self.output_bin_path,
            self.output_bin_tool_path,
            self.output_host_bin,
            self.output_host_bin_tools,
        )

    def create_dirs(self) -> None:
        """Create every directory of the layout that does not exist yet."""
        for directory in self._directories():
            directory.mkdir(mode=0o755, parents=True, exist_ok=True)

    def bin_full_path(self, bin_name: str) -> Path:
        """Path of a service binary for the host platform."""
        return self.output_host_bin / bin_name

    def tool_full_path(self, tool_name: str) -> Path:
        """Path of a tool binary for the host platform."""
        return self.output_host_bin_tools / tool_name