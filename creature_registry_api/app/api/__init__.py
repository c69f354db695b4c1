"""
API package containing versioned routes.

Each version lives in its own subpackage (currently only ``v1``) and
exposes a top‑level ``router`` that aggregates its endpoints.
"""
