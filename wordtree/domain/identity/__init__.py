"""
Identity bounded context - Domain layer.

Users authenticate with email and password. Every user owns exactly one
root group in the content tree, provisioned at registration.
"""
