"""
Version 1 of the Creature Registry API.

Breaking changes to request or response shapes should be introduced in
a new version subpackage (e.g. ``v2``) rather than here.
"""
