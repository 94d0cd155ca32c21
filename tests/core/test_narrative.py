"""
Test suite for narrative extraction helpers.

System role: Verification of resume score extraction
"""

from careervalid.core.narrative import extract_resume_score


class TestExtractResumeScore:
    def test_slash_format(self) -> None:
        assert extract_resume_score("Resume score: 85/100. Strong profile.") == 85

    def test_out_of_format_is_case_insensitive(self) -> None:
        assert extract_resume_score("I would rate this 72 Out Of 100") == 72

    def test_first_match_wins(self) -> None:
        assert extract_resume_score("Formatting 60/100, overall 80/100") == 60

    def test_no_match_returns_none(self) -> None:
        assert extract_resume_score("A solid resume with room to grow.") is None

    def test_empty_text_returns_none(self) -> None:
        assert extract_resume_score("") is None
