"""Application layer: request-scoped orchestration services."""
