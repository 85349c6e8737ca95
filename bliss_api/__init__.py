"""
Top‑level package for the Bliss dating API.

This file makes ``bliss_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``bliss_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
