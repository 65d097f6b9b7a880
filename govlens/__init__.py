# govlens/__init__.py
"""Pattern-based analysis and search over extracted government document texts"""

__version__ = "0.1.0"
