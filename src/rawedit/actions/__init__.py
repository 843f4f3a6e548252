"""Editing verbs bound to decoded input events."""

from .editing import ACTIONS, apply_event

__all__ = ["ACTIONS", "apply_event"]
