# Hooks Module
# Named filter/action pipelines the host runs during a render

from .models import DEFAULT_PRIORITY, HookHandler
from .registry import HookRegistry

__all__ = [
    "DEFAULT_PRIORITY",
    "HookHandler",
    "HookRegistry",
]
