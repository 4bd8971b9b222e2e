"""Run logging for CLI-observable activity."""

from .logger import RunLogger

__all__ = ["RunLogger"]
