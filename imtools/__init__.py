"""Utility helpers for service backends: collections, strings, time, crypto, HTTP and networking."""

__version__ = "0.1.0"