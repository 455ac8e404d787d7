"""
Content bounded context - Domain layer.

This context owns the hierarchical content tree:
- Groups: folder-like nodes, one root per user
- Cards: word/translation leaves inside a group
- Tree read models: flat group listings and materialized trees

Ownership is never stored on nodes. It is resolved by walking a group's
parent chain to its root and consulting the root ownership mapping.
"""
