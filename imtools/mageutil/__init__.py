"""Helpers to start, stop and check service and tool binaries listed in a start configuration."""