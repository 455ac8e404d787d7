"""Identity infrastructure: users, passwords and tokens."""
