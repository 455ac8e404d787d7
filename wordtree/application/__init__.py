"""
Application layer.

Use cases orchestrate domain entities through repository protocols and
decide transaction boundaries via the Unit of Work.
"""
