"""Infrastructure layer: persistence adapters, HTTP routers and schemas."""
