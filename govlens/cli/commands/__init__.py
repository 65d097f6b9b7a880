# govlens/cli/commands/__init__.py
"""CLI command modules"""

from . import analysis, corpus, documents, info, search, server

__all__ = ['analysis', 'corpus', 'documents', 'info', 'search', 'server']
