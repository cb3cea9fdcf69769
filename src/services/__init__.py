"""Registry, reconciliation, reporting and orchestration services."""
