"""HTTP layer: versioned REST routes and the legacy client routes."""
