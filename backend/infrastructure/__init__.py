"""Infrastructure adapters: configuration, persistence, security, clock."""
