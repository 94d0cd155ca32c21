"""CareerValid API: session-scoped career analysis service."""
