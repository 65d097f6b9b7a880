# govlens/server/routes/__init__.py
"""API route modules"""

from . import admin, analysis, documents, search

__all__ = ['admin', 'analysis', 'documents', 'search']
