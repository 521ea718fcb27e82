"""Platform detection and inspection of running service processes."""

from __future__ import annotations

import platform
import sys

import psutil

from imtools.mageutil.console import print_green

__all__ = [
    "ProcessCheckError",
    "os_arch",
    "check_process_names",
    "check_process_names_exist",
    "print_binary_ports",
    "find_pids_by_binary_path",
    "kill_exist_binary",
    "detect_platform",
]

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
}

_SUPPORTED_ARCHES = ("amd64", "arm64")


class ProcessCheckError(RuntimeError):
    """Raised when running processes do not match what is expected."""


def _goos() -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform.startswith("linux"):
        return "linux"
    return sys.platform


def _goarch() -> str:
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def os_arch() -> str:
    """Operating system and architecture, joined by the platform's path separator."""
    system, arch = _goos(), _goarch()
    if system == "windows":
        return f"{system}\\{arch}"
    return f"{system}/{arch}"


def _exe(proc: psutil.Process) -> str:
    try:
        return proc.exe() or ""
    except (psutil.Error, OSError):
        return ""


def _processes() -> list[psutil.Process]:
    return list(psutil.process_iter())


def check_process_names(process_path: str, expected_count: int) -> None:
    """Raise unless exactly expected_count processes run the given executable."""
    try:
        processes = _processes()
    except psutil.Error as exc:
        raise ProcessCheckError(f"failed to get processes: {exc}") from exc
    wanted = process_path.casefold()
    running = sum(1 for proc in processes if _exe(proc).casefold() == wanted)
    if running != expected_count:
        raise ProcessCheckError(
            f"{process_path} Expected {expected_count} processes, but {running} running"
        )


def check_process_names_exist(process_path: str) -> bool:
    """Whether any process runs exactly the given executable."""
    try:
        processes = _processes()
    except psutil.Error as exc:
        print(f"Failed to get processes: {exc}")
        return False
    return any(_exe(proc) == process_path for proc in processes)


def find_pids_by_binary_path(binary_path: str) -> list[int]:
    """PIDs of the processes running the given executable, compared case-insensitively."""
    wanted = binary_path.casefold()
    return [proc.pid for proc in _processes() if _exe(proc).casefold() == wanted]


def _connections(proc: psutil.Process) -> list:
    method = getattr(proc, "net_connections", None) or proc.connections
    return method(kind="all")


def print_binary_ports(binary_path: str) -> None:
    """Print the command line and listening ports of each process of a binary."""
    try:
        pids = find_pids_by_binary_path(binary_path)
    except psutil.Error as exc:
        print("Error finding PIDs:", exc)
        return
    if not pids:
        print(f"No running processes found for binary: {binary_path}")
        return
    for pid in pids:
        try:
            proc = psutil.Process(pid)
        except psutil.Error as exc:
            print(f"Failed to create process object for PID {pid}: {exc}")
            continue
        try:
            cmdline = " ".join(proc.cmdline())
        except psutil.Error as exc:
            print(f"Failed to get command line for PID {pid}: {exc}")
            continue
        try:
            connections = _connections(proc)
        except psutil.Error as exc:
            print(f"Error getting connections for PID {pid}: {exc}")
            continue
        ports = sorted(
            {conn.laddr.port for conn in connections if conn.status == psutil.CONN_LISTEN and conn.laddr}
        )
        if not ports:
            print_green(f"Cmdline: {cmdline}, PID: {pid} is not listening on any ports.")
        else:
            listed = ", ".join(str(port) for port in ports)
            print_green(f"Cmdline: {cmdline}, PID: {pid} is listening on ports: {listed}")


def kill_exist_binary(binary_path: str) -> list[int]:
    """Stop every process whose executable path contains binary_path.

    Processes are asked to terminate and killed if that fails. Returns the PIDs stopped.
    """
    try:
        processes = _processes()
    except psutil.Error as exc:
        print(f"Failed to get processes: {exc}")
        return []
    wanted = binary_path.lower()
    stopped: list[int] = []
    for proc in processes:
        exe = _exe(proc)
        if not exe or wanted not in exe.lower():
            continue
        try:
            cmdline = " ".join(proc.cmdline())
        except psutil.Error as exc:
            print(f"Failed to get command line for process {proc.pid}: {exc}")
            continue
        try:
            proc.terminate()
        except psutil.Error:
            try:
                proc.kill()
            except psutil.Error as exc:
                print(f"Failed to kill process cmdline: {cmdline}, pid: {proc.pid}, err: {exc}")
                continue
            print(f"Killed process cmdline: {cmdline}, pid: {proc.pid}")
        else:
            print(f"Terminated process cmdline: {cmdline}, pid: {proc.pid}")
        stopped.append(proc.pid)
    return stopped


def detect_platform() -> str:
    """The platform as "os_arch"; only amd64 and arm64 are supported."""
    arch = _goarch()
    if arch not in _SUPPORTED_ARCHES:
        raise RuntimeError(f"Unsupported architecture: {arch}")
    return f"{_goos()}_{arch}"