"""
Career agent module.

Dependencies: langchain_google_genai, langchain_core
System role: Agent module exports
"""

from careervalid.core.agentic_system.career_agent.career_agent import CareerAgent

__all__ = ["CareerAgent"]
