"""Starting, stopping and checking the configured service and tool binaries."""

from __future__ import annotations

import os
import subprocess
import sys

from imtools.mageutil.paths import Paths
from imtools.mageutil.startconfig import StartConfig
from imtools.mageutil.system import (
    ProcessCheckError,
    check_process_names,
    check_process_names_exist,
    kill_exist_binary,
    print_binary_ports,
)

__all__ = [
    "stop_binaries",
    "start_binaries",
    "start_tools",
    "kill_exist_binaries",
    "check_binaries_stop",
    "check_binaries_running",
    "print_listened_ports_by_binaries",
]


def _config_arg(paths: Paths) -> str:
    return f"{paths.output_config}{os.sep}"


def stop_binaries(config: StartConfig, paths: Paths) -> None:
    """Stop the processes of every service binary."""
    for binary in config.service_binaries:
        kill_exist_binary(str(paths.bin_full_path(binary)))


def start_binaries(config: StartConfig, paths: Paths) -> list[subprocess.Popen]:
    """Start each service binary as many times as configured; return the processes."""
    started: list[subprocess.Popen] = []
    config_arg = _config_arg(paths)
    for binary, count in config.service_binaries.items():
        full_path = str(paths.output_host_bin / binary)
        for index in range(count):
            args = [full_path, "-i", str(index), "-c", config_arg]
            print(f"Starting {' '.join(args)}", flush=True)
            try:
                started.append(subprocess.Popen(args, cwd=paths.output_host_bin))
            except OSError as exc:
                print(
                    f"Failed to start {full_path} with args {args[1:]}: {exc}",
                    file=sys.stderr,
                    flush=True,
                )
                raise
    return started


def start_tools(config: StartConfig, paths: Paths) -> None:
    """Run each tool binary to completion, raising if one fails."""
    config_arg = _config_arg(paths)
    for tool in config.tool_binaries:
        full_path = str(paths.tool_full_path(tool))
        args = [full_path, "-c", config_arg]
        command = " ".join(args)
        print(f"Starting {command}", flush=True)
        try:
            result = subprocess.run(args, cwd=paths.output_host_bin_tools, check=False)
        except OSError as exc:
            print(f"Failed to start {full_path} with error: {exc}", flush=True)
            raise
        if result.returncode != 0:
            print(f"Failed to execute {full_path} with exit code: {result.returncode}", flush=True)
            raise subprocess.CalledProcessError(result.returncode, args)
        print(f"Starting {command} successfully ", flush=True)


def kill_exist_binaries(config: StartConfig, paths: Paths) -> None:
    """Kill the processes of every service binary."""
    for binary in config.service_binaries:
        kill_exist_binary(str(paths.bin_full_path(binary)))


def check_binaries_stop(config: StartConfig, paths: Paths) -> None:
    """Raise if any service binary still has a running process."""
    running = [
        binary
        for binary in config.service_binaries
        if check_process_names_exist(str(paths.bin_full_path(binary)))
    ]
    if running:
        raise ProcessCheckError(
            f"the following binaries are still running: {', '.join(running)}"
        )


def check_binaries_running(config: StartConfig, paths: Paths) -> None:
    """Raise unless every service binary runs exactly its configured count."""
    messages = []
    for binary, expected in config.service_binaries.items():
        try:
            check_process_names(str(paths.bin_full_path(binary)), expected)
        except ProcessCheckError as exc:
            messages.append(f"binary {binary} is not running as expected: {exc}")
    if messages:
        raise ProcessCheckError("\n".join(messages))


def print_listened_ports_by_binaries(config: StartConfig, paths: Paths) -> None:
    """Print the listening ports of every service binary's processes."""
    for binary in config.service_binaries:
        print_binary_ports(str(paths.bin_full_path(binary)))