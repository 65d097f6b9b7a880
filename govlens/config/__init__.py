# govlens/config/__init__.py
"""Configuration management"""

from .settings import Config

__all__ = ['Config']
