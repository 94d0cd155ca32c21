"""Pydantic schemas for session records and API contracts."""
