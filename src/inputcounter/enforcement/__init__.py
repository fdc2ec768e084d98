"""Limit enforcement engine — live counters and keystroke gating.

Sessions attach to editing surfaces through the adapter protocols in
:mod:`inputcounter.enforcement.adapter`; the concrete editor is supplied
by the host.
"""

from inputcounter.enforcement.adapter import CounterDisplay, EditorSurface
from inputcounter.enforcement.config import ClientConfig, ClientConfigBuilder
from inputcounter.enforcement.session import (
    EnforcementSession,
    MultilineSession,
    PlainTextSession,
    RichTextSession,
    open_session,
)

__all__ = [
    "ClientConfig",
    "ClientConfigBuilder",
    "CounterDisplay",
    "EditorSurface",
    "EnforcementSession",
    "MultilineSession",
    "PlainTextSession",
    "RichTextSession",
    "open_session",
]
