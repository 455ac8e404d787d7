"""Content tree application services and use cases."""
