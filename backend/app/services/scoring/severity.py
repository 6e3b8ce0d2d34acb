"""
Severity classification - maps a percentage score to a risk bucket.

Levels:
- Critical: below 60
- Major: 60 up to 75
- Minor: 75 up to 90
- None: 90 and above

Boundary values belong to the safer bucket (exactly 60 is Major).
"""

from enum import Enum
from typing import Optional

from app.config import settings
from app.services.scoring.weights import SEVERITY_THRESHOLDS, STATUS_BANDS


class SeverityLevel(str, Enum):
    """Compliance risk bucket, most severe first."""
    CRITICAL = "Critical"
    MAJOR = "Major"
    MINOR = "Minor"
    NONE = "None"


def severity_from_score(percentage: float) -> SeverityLevel:
    """Classify a percentage score.

    Args:
        percentage: Score in percent (0-100)

    Returns:
        SeverityLevel for the score
    """
    t = SEVERITY_THRESHOLDS
    if percentage < t.major:
        return SeverityLevel.CRITICAL
    if percentage < t.minor:
        return SeverityLevel.MAJOR
    if percentage < t.none:
        return SeverityLevel.MINOR
    return SeverityLevel.NONE


def performance_status(percentage: Optional[float], passing_grade: Optional[float] = None) -> str:
    """PASS/FAIL against the passing grade, N/A when there is no score."""
    if percentage is None:
        return "N/A"
    grade = settings.PASSING_GRADE if passing_grade is None else passing_grade
    return "PASS" if percentage >= grade else "FAIL"


def score_band(percentage: Optional[float], passing_grade: Optional[float] = None) -> str:
    """Colour band used by notification emails: pass, acceptable or fail."""
    if percentage is None:
        return "na"
    grade = settings.PASSING_GRADE if passing_grade is None else passing_grade
    if percentage >= grade:
        return "pass"
    if percentage >= STATUS_BANDS.acceptable:
        return "acceptable"
    return "fail"
