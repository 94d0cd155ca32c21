"""Generative-AI agents."""
