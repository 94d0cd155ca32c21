"""
Test suite for AggregationService.

Tests cover:
- GitHub data composition
- Resume score resolution order
- Skill duplicate detection and insights merging
- Field isolation between analyses
"""

from datetime import datetime, timezone

import pytest

from careervalid.application.services.aggregation_service import (
    AggregationService,
    build_github_data,
    resolve_resume_score,
)
from careervalid.core.exceptions import DuplicateSkillError, SessionNotFoundError
from careervalid.core.narrative import DEFAULT_RESUME_SCORE
from careervalid.models.resume import ResumeFileType
from careervalid.models.skill import UsageType, YearsExperience


@pytest.fixture
def aggregation(session_store) -> AggregationService:
    return AggregationService(store=session_store)


class TestBuildGitHubData:
    def test_composes_stats_and_languages(self, github_profile, github_repositories) -> None:
        data = build_github_data(github_profile, github_repositories, "insights")

        assert data.stats.total_repos == 8
        assert data.stats.total_stars == 16
        assert data.stats.total_forks == 3
        assert [(s.language, s.percentage) for s in data.language_stats] == [
            ("Go", 75),
            ("Rust", 25),
        ]
        assert data.insights == "insights"

    def test_total_repos_falls_back_to_repository_count(self, github_repositories) -> None:
        data = build_github_data({"login": "octocat"}, github_repositories, "")

        assert data.stats.total_repos == 3

    def test_serializes_derived_fields_in_camel_case(
        self, github_profile, github_repositories
    ) -> None:
        dumped = build_github_data(github_profile, github_repositories, "").model_dump(
            by_alias=True
        )

        assert "languageStats" in dumped
        assert "totalStars" in dumped["stats"]
        assert dumped["profile"]["public_repos"] == 8


class TestResolveResumeScore:
    def test_structured_score_wins(self) -> None:
        assert resolve_resume_score("Score: 60/100", 91) == 91

    def test_falls_back_to_narrative(self) -> None:
        assert resolve_resume_score("Overall 64 out of 100", None) == 64

    def test_falls_back_to_default(self) -> None:
        assert resolve_resume_score("No number here", None) == DEFAULT_RESUME_SCORE == 75


class TestRecordAnalyses:
    @pytest.mark.asyncio
    async def test_analyses_do_not_erase_each_other(
        self, aggregation, session_store, github_profile, github_repositories
    ) -> None:
        # Arrange
        await session_store.create("s1")
        github_data = build_github_data(github_profile, github_repositories, "g")

        # Act
        await aggregation.record_github("s1", github_data)
        await aggregation.record_resume("s1", "cv.pdf", ResumeFileType.PDF, "Score 70/100")
        await aggregation.record_portfolio("s1", "https://jane.dev/", "Jane", "Dev", "p")

        # Assert
        session = await session_store.get("s1")
        assert session.github_data == github_data
        assert session.resume_data.score == 70
        assert session.portfolio_data.title == "Jane"

    @pytest.mark.asyncio
    async def test_record_on_unknown_session_raises(self, aggregation) -> None:
        with pytest.raises(SessionNotFoundError):
            await aggregation.record_resume("missing", "cv.pdf", ResumeFileType.PDF, "text")


class TestSkills:
    async def _add(self, aggregation, session_id, name, insight="narrative"):
        _, skill = await aggregation.prepare_skill(
            session_id,
            skill_name=name,
            years_experience=YearsExperience.ONE_TO_TWO,
            usage_type=UsageType.PERSONAL_PROJECT,
            confidence_level=7,
        )
        return await aggregation.record_skill(session_id, skill, insight)

    @pytest.mark.asyncio
    async def test_prepare_skill_scores_without_storing(self, aggregation, session_store) -> None:
        await session_store.create("s1")

        _, skill = await aggregation.prepare_skill(
            "s1",
            skill_name="React",
            years_experience=YearsExperience.ONE_TO_TWO,
            usage_type=UsageType.PERSONAL_PROJECT,
            confidence_level=7,
        )

        assert skill.proficiency_score == 65
        assert (await session_store.get("s1")).manual_skills is None

    @pytest.mark.asyncio
    async def test_duplicate_name_is_rejected_case_insensitively(
        self, aggregation, session_store
    ) -> None:
        await session_store.create("s1")
        await self._add(aggregation, "s1", "React")

        with pytest.raises(DuplicateSkillError):
            await self._add(aggregation, "s1", "react")

        session = await session_store.get("s1")
        assert [s.skill_name for s in session.manual_skills] == ["React"]

    @pytest.mark.asyncio
    async def test_record_skill_rechecks_for_concurrent_duplicate(
        self, aggregation, session_store
    ) -> None:
        await session_store.create("s1")
        _, first = await aggregation.prepare_skill(
            "s1", "Go", YearsExperience.THREE_PLUS, UsageType.WORK_EXPERIENCE, 9
        )
        _, second = await aggregation.prepare_skill(
            "s1", "GO", YearsExperience.ZERO_TO_ONE, UsageType.LEARNING, 2
        )

        await aggregation.record_skill("s1", first, "n1")
        with pytest.raises(DuplicateSkillError):
            await aggregation.record_skill("s1", second, "n2")

        assert len((await session_store.get("s1")).manual_skills) == 1

    @pytest.mark.asyncio
    async def test_skills_insight_merges_with_other_keys(
        self, aggregation, session_store
    ) -> None:
        await session_store.create("s1")
        await session_store.update("s1", {"insights": {"career": "keep"}})

        updated = await self._add(aggregation, "s1", "Python", insight="new skills narrative")

        assert updated.insights == {"career": "keep", "skills": "new skills narrative"}

    @pytest.mark.asyncio
    async def test_skills_are_appended_in_order(self, aggregation, session_store) -> None:
        await session_store.create("s1")

        await self._add(aggregation, "s1", "Python")
        updated = await self._add(aggregation, "s1", "SQL", insight="latest")

        assert [s.skill_name for s in updated.manual_skills] == ["Python", "SQL"]
        assert updated.insights["skills"] == "latest"

    @pytest.mark.asyncio
    async def test_unknown_session_raises(self, aggregation) -> None:
        with pytest.raises(SessionNotFoundError):
            await self._add(aggregation, "missing", "Python")
