"""
Career agent.

Wraps the Gemini chat model behind one coroutine per analysis type.
Every method returns narrative text, except score_resume which requests a
structured score.

Dependencies: langchain_google_genai, langchain_core, careervalid.configs
System role: Generative-AI text completion boundary
"""

import json
import logging
from typing import Any

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from careervalid.configs.gemini import GeminiSettings
from careervalid.core.agentic_system.career_agent.career_agent_prompt import (
    CHAT_PROMPT,
    GITHUB_ANALYSIS_PROMPT,
    PORTFOLIO_ANALYSIS_PROMPT,
    RESUME_ANALYSIS_PROMPT,
    RESUME_BUILDER_PROMPT,
    RESUME_SCORE_PROMPT,
    SKILLS_ANALYSIS_PROMPT,
)
from careervalid.core.exceptions import UpstreamError
from careervalid.models.resume import ResumeScoreAssessment

logger = logging.getLogger(__name__)

# Repositories included verbatim in the GitHub prompt
PROMPT_REPOSITORY_LIMIT = 20


def to_prompt_json(value: Any) -> str:
    """Serialize session facts for embedding in a prompt."""
    return json.dumps(value, indent=2, default=str, ensure_ascii=False)


def message_text(message: BaseMessage) -> str:
    """Flatten a chat model reply into plain text."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class CareerAgent:
    """
    Gemini-backed career analysis agent.

    Usage:
        agent = CareerAgent(settings.gemini)
        insights = await agent.analyze_resume("cv.pdf", text)
    """

    def __init__(self, settings: GeminiSettings, model: Any | None = None) -> None:
        """
        Initialize career agent.

        Args:
            settings: Gemini settings (model id, temperature, timeout)
            model: Optional pre-built chat model, used by tests
        """
        self._settings = settings
        self._model = model or ChatGoogleGenerativeAI(
            model=settings.model,
            temperature=settings.temperature,
            google_api_key=settings.api_key or None,
            timeout=settings.timeout_seconds,
            max_retries=settings.max_retries,
        )
        logger.info(f"Initialized CareerAgent with {settings.model}")

    async def _complete(self, prompt: ChatPromptTemplate, operation: str, **variables) -> str:
        """Render a prompt, call the model and return its text."""
        messages = prompt.invoke(variables).to_messages()
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            logger.error(
                f"{__name__}:{operation} - Gemini call failed: {type(e).__name__}: {e}"
            )
            raise UpstreamError(
                f"AI service request failed during {operation}",
                service="gemini",
                details={"error_type": type(e).__name__},
            ) from e
        return message_text(response)

    async def analyze_github(
        self,
        profile: dict[str, Any],
        repositories: list[dict[str, Any]],
    ) -> str:
        return await self._complete(
            GITHUB_ANALYSIS_PROMPT,
            "analyze_github",
            profile=to_prompt_json(profile),
            repositories=to_prompt_json(repositories[:PROMPT_REPOSITORY_LIMIT]),
        )

    async def analyze_resume(self, file_name: str, content: str) -> str:
        return await self._complete(
            RESUME_ANALYSIS_PROMPT,
            "analyze_resume",
            file_name=file_name,
            content=content,
        )

    async def score_resume(self, file_name: str, content: str) -> int | None:
        """
        Request the resume score as structured output.

        Args:
            file_name: Uploaded file name
            content: Extracted resume text

        Returns:
            int | None: Score in [0, 100], or None when the model gave none
        """
        messages = RESUME_SCORE_PROMPT.invoke(
            {"file_name": file_name, "content": content}
        ).to_messages()
        try:
            structured_model = self._model.with_structured_output(ResumeScoreAssessment)
            result = await structured_model.ainvoke(messages)
        except Exception as e:
            logger.warning(
                f"{__name__}:score_resume - Structured score request failed: "
                f"{type(e).__name__}: {e}"
            )
            return None

        if isinstance(result, ResumeScoreAssessment):
            return result.score
        if isinstance(result, dict):
            try:
                return ResumeScoreAssessment.model_validate(result).score
            except ValueError:
                logger.warning(f"{__name__}:score_resume - Malformed structured score: {result}")
        return None

    async def analyze_portfolio(
        self,
        url: str,
        title: str,
        description: str,
        content_preview: str,
    ) -> str:
        return await self._complete(
            PORTFOLIO_ANALYSIS_PROMPT,
            "analyze_portfolio",
            url=url,
            title=title,
            description=description,
            content_preview=content_preview,
        )

    async def analyze_skills(self, skills: list[dict[str, Any]]) -> str:
        return await self._complete(
            SKILLS_ANALYSIS_PROMPT,
            "analyze_skills",
            skills=to_prompt_json(skills),
        )

    async def chat(self, message: str, context: dict[str, Any]) -> str:
        return await self._complete(
            CHAT_PROMPT,
            "chat",
            message=message,
            context=to_prompt_json(context),
        )

    async def build_resume(self, **sections: str) -> str:
        """
        Generate resume HTML.

        Args:
            **sections: Pre-rendered prompt sections (target_role, contact_info,
                professional_links, analyzed_data, education, certifications,
                awards, languages, additional_info)

        Returns:
            str: Resume HTML produced by the model
        """
        return await self._complete(RESUME_BUILDER_PROMPT, "build_resume", **sections)
