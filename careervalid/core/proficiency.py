"""
Proficiency scoring for manually declared skills.

Maps (experience bracket, usage context, confidence) to a 0-100 score.

Dependencies: careervalid.models.skill
System role: Skill proficiency business logic
"""

from careervalid.core.exceptions import ValidationError
from careervalid.models.skill import UsageType, YearsExperience

MAX_PROFICIENCY_SCORE = 100
CONFIDENCE_WEIGHT = 5
MIN_CONFIDENCE = 1
MAX_CONFIDENCE = 10

YEARS_WEIGHTS: dict[YearsExperience, int] = {
    YearsExperience.ZERO_TO_ONE: 10,
    YearsExperience.ONE_TO_TWO: 20,
    YearsExperience.TWO_TO_THREE: 30,
    YearsExperience.THREE_PLUS: 40,
}

USAGE_WEIGHTS: dict[UsageType, int] = {
    UsageType.PERSONAL_PROJECT: 10,
    UsageType.WORK_EXPERIENCE: 20,
    UsageType.OPEN_SOURCE: 15,
    UsageType.LEARNING: 5,
}


def calculate_proficiency_score(
    years_experience: YearsExperience | str,
    usage_type: UsageType | str,
    confidence_level: int,
) -> int:
    """
    Compute the proficiency score of a skill submission.

    score = min(100, years weight + usage weight + confidence * 5)

    Args:
        years_experience: Experience bracket ("0-1", "1-2", "2-3", "3+")
        usage_type: Usage context ("Personal Project", "Work Experience",
            "Open Source", "Learning")
        confidence_level: Self-reported confidence, integer in [1, 10]

    Returns:
        int: Score in [0, 100]

    Raises:
        ValidationError: If an input is outside its enumeration or range
    """
    try:
        years = YearsExperience(years_experience)
    except ValueError:
        raise ValidationError(
            f"Unknown experience bracket: {years_experience!r}",
            field="yearsExperience",
        ) from None

    try:
        usage = UsageType(usage_type)
    except ValueError:
        raise ValidationError(
            f"Unknown usage type: {usage_type!r}",
            field="usageType",
        ) from None

    # bool is an int subclass; reject it along with floats and strings
    if isinstance(confidence_level, bool) or not isinstance(confidence_level, int):
        raise ValidationError("Confidence level must be an integer", field="confidenceLevel")
    if not MIN_CONFIDENCE <= confidence_level <= MAX_CONFIDENCE:
        raise ValidationError(
            f"Confidence level must be between {MIN_CONFIDENCE} and {MAX_CONFIDENCE}",
            field="confidenceLevel",
        )

    raw_score = YEARS_WEIGHTS[years] + USAGE_WEIGHTS[usage] + confidence_level * CONFIDENCE_WEIGHT
    return min(MAX_PROFICIENCY_SCORE, raw_score)
