"""
Boundary layer for external system integrations.

Handles all interactions with state and external systems (session store,
GitHub REST API, portfolio websites).
"""
