"""
Core infrastructure: settings, logging, the database handle and the
domain error hierarchy.
"""
