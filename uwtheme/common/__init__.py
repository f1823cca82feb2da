# Common utilities and shared modules
"""
Shared components used by the decision engine, hooks and templates:
- Render context models (Pydantic schemas)
- Logging configuration
- Theme configuration
"""

from .config import settings, PROJECT_ROOT, TEMPLATES_DIR
from .logging import setup_logging

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "TEMPLATES_DIR",
    "setup_logging",
]
