"""
Dhikr verification engine.

Scores one transcript against one requirement and returns a verdict.
The engine holds configuration only, so the same instance can verify any
number of attempts without side effects.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from wiqayah.config import WiqayahSettings, get_settings
from wiqayah.core.arabic import normalize_arabic
from wiqayah.core.matcher import similarity
from wiqayah.core.repetition import count_repetitions
from wiqayah.models import (
    DhikrRequirement,
    Failure,
    FailureReason,
    Partial,
    Success,
    VerificationVerdict,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationReport:
    """Verdict of one attempt plus the scores that produced it."""

    verdict: VerificationVerdict
    similarity: float
    detected_repetitions: int
    normalized_transcript: str

    def __str__(self) -> str:
        return (
            f"VerificationReport({self.verdict.kind}, similarity={self.similarity:.2f}, "
            f"detected={self.detected_repetitions})"
        )


class VerificationEngine:
    """
    Verifies a spoken dhikr transcript against a requirement.

    Multi-repetition requirements are first judged by repetition count.
    When no repetition is found at all, or the requirement is a single
    recitation, the whole transcript is scored against the reference text.

    Example:
        engine = VerificationEngine()
        verdict = engine.verify("سبحان الله سبحان الله سبحان الله", SUBHANALLAH)
        verdict.is_success  # True
    """

    def __init__(
        self,
        partial_band: Optional[float] = None,
        repetition_match_threshold: Optional[float] = None,
        settings: Optional[WiqayahSettings] = None,
    ):
        """
        Args:
            partial_band: Width below the acceptance threshold reported as Partial(0, 1)
            repetition_match_threshold: Minimum similarity for a fuzzy repetition window
            settings: Settings to read defaults from
        """
        settings = settings or get_settings()
        self.partial_band = (
            partial_band if partial_band is not None else settings.partial_band
        )
        self.repetition_match_threshold = (
            repetition_match_threshold
            if repetition_match_threshold is not None
            else settings.repetition_match_threshold
        )

    def evaluate(self, transcript: str, requirement: DhikrRequirement) -> VerificationReport:
        """
        Score a transcript and build the full report.

        Args:
            transcript: Best-effort speech-to-text output ("" for no speech)
            requirement: Requirement to verify against (debt already applied)

        Returns:
            VerificationReport with the verdict and its scores
        """
        spoken = normalize_arabic(transcript)
        expected = normalize_arabic(requirement.script_text)

        score = similarity(spoken, expected)
        detected = 0
        verdict: Optional[VerificationVerdict] = None

        if requirement.repetitions > 1:
            detected = count_repetitions(
                spoken, expected, window_threshold=self.repetition_match_threshold
            )
            if detected >= requirement.repetitions:
                verdict = Success()
            elif detected > 0:
                verdict = Partial(detected=detected, required=requirement.repetitions)
            # No repetition found: fall back to scoring the transcript as a whole

        if verdict is None:
            verdict = self._score_single(spoken, score, requirement)

        logger.debug(
            "Verified %s: %s (similarity=%.3f, detected=%d/%d)",
            requirement.id,
            verdict.kind,
            score,
            detected,
            requirement.repetitions,
        )

        return VerificationReport(
            verdict=verdict,
            similarity=score,
            detected_repetitions=detected,
            normalized_transcript=spoken,
        )

    def _score_single(
        self,
        spoken: str,
        score: float,
        requirement: DhikrRequirement,
    ) -> VerificationVerdict:
        if score >= requirement.acceptance_threshold:
            return Success()
        if score >= requirement.acceptance_threshold - self.partial_band:
            # Close but not accepted
            return Partial(detected=0, required=1)
        if not spoken:
            return Failure(reason=FailureReason.NO_SPEECH)
        return Failure(reason=FailureReason.LOW_CONFIDENCE)

    def verify(self, transcript: str, requirement: DhikrRequirement) -> VerificationVerdict:
        """
        Verify a transcript against a requirement.

        Args:
            transcript: Best-effort speech-to-text output ("" for no speech)
            requirement: Requirement to verify against (debt already applied)

        Returns:
            Success, Partial or Failure
        """
        return self.evaluate(transcript, requirement).verdict


def verify(
    transcript: str,
    requirement: DhikrRequirement,
    settings: Optional[WiqayahSettings] = None,
) -> VerificationVerdict:
    """
    Convenience function to verify one transcript with default settings.

    Args:
        transcript: Speech-to-text output
        requirement: Requirement to verify against
        settings: Optional settings override

    Returns:
        Success, Partial or Failure
    """
    return VerificationEngine(settings=settings).verify(transcript, requirement)
