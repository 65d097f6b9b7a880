# govlens/server/__init__.py
"""Server components"""

from .lifecycle import ServerLifecycle, lifecycle

__all__ = ['ServerLifecycle', 'lifecycle']
