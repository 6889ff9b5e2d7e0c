"""
Top‑level package for the Contacts API.

This file makes ``contacts_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``contacts_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
