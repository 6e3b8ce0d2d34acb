"""
Scoring Weights Configuration

Answer multipliers and severity thresholds used by the scoring engine.
Thresholds are fixed so reports are reproducible across deployments.
"""

from dataclasses import dataclass

from app.services.scoring.models import AnswerValue


# Fraction of an item's full points earned per answer.
# NA and Numeric are handled separately by the engine.
ANSWER_MULTIPLIERS: dict[AnswerValue, float] = {
    AnswerValue.YES: 1.0,
    AnswerValue.PARTIALLY: 0.5,
    AnswerValue.NO: 0.0,
}


@dataclass(frozen=True)
class SeverityThresholds:
    """Lower bound (inclusive) of each severity bucket, in percent."""
    major: float = 60.0   # below this is Critical
    minor: float = 75.0
    none: float = 90.0


@dataclass(frozen=True)
class StatusBands:
    """Score bands for notification colouring."""
    acceptable: float = 70.0


SEVERITY_THRESHOLDS = SeverityThresholds()
STATUS_BANDS = StatusBands()

# Scoring version
SCORING_VERSION = "1.0"


# --- Validation (Prevent Drift) ---
def _validate_weights():
    """Ensure multipliers and thresholds stay within sane bounds."""
    for answer, multiplier in ANSWER_MULTIPLIERS.items():
        if not 0.0 <= multiplier <= 1.0:
            raise ValueError(f"CRITICAL: Multiplier for {answer.value} is {multiplier}, expected 0..1")

    t = SEVERITY_THRESHOLDS
    if not (0 < t.major < t.minor < t.none <= 100):
        raise ValueError(
            f"CRITICAL: Severity thresholds must ascend, got {t.major}/{t.minor}/{t.none}"
        )

_validate_weights()
