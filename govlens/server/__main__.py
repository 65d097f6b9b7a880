"""
Module entry point for running the GovLens server.

This allows the server to be started with:
    python -m govlens.server --corpus extracted_data.json
"""

from .app import main

if __name__ == "__main__":
    main()
