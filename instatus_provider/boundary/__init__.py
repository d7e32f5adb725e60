"""External system boundaries (Instatus REST API)."""
