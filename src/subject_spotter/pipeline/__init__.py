"""Subject spotting pipeline components.

This package ties content loading, prompt rendering, the LLM query and
annotation extraction into a single engine.
"""

from .engine import Engine
from .exceptions import ApplicationError

__all__ = [
    "Engine",
    "ApplicationError",
]
