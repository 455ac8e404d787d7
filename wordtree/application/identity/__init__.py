"""Identity application layer: registration and authentication."""
