"""
Top‑level package for the Creature Registry API.

Marks ``creature_registry_api`` as a regular package so that modules
under ``app`` can be imported with fully qualified names such as
``creature_registry_api.app.main``, both when serving the API and when
running the test suite from the repository root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
