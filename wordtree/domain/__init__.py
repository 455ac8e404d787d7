"""
Domain layer.

Pure business entities, value objects and exceptions. Nothing in here
performs I/O.
"""
