"""
Verification verdict data model.

A verdict is the closed outcome of one verification attempt. It is a
discriminated union on ``kind`` so that logged verdicts round-trip through
JSON with ``VERDICT_ADAPTER``.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

SUCCESS_MESSAGE = "بَارَكَ ٱللَّٰهُ فِيكَ\nBarakallahu feek"


class FailureReason(str, Enum):
    """Why a verification attempt failed."""

    NO_SPEECH = "no_speech"
    LOW_CONFIDENCE = "low_confidence"
    # Reserved: the engine does not yet tell unrelated speech from low confidence
    WRONG_PHRASE = "wrong_phrase"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES: dict[FailureReason, str] = {
    FailureReason.NO_SPEECH: "No speech detected",
    FailureReason.LOW_CONFIDENCE: "Could not understand clearly",
    FailureReason.WRONG_PHRASE: "Incorrect phrase detected",
}


class _Verdict(BaseModel):
    """Shared behaviour of all verdict variants."""

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_partial(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def should_retry(self) -> bool:
        """Whether the user should be prompted to recite again."""
        return not self.is_success

    @property
    def remaining_count(self) -> Optional[int]:
        """Repetitions still missing, for partial verdicts only."""
        return None


class Success(_Verdict):
    """The recitation was accepted."""

    kind: Literal["success"] = "success"

    @property
    def is_success(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return SUCCESS_MESSAGE


class Partial(_Verdict):
    """
    Some but not all of the recitation was detected.

    ``Partial(detected=0, required=1)`` is the "close but not accepted"
    signal from single-shot scoring.
    """

    kind: Literal["partial"] = "partial"
    detected: int = Field(..., ge=0)
    required: int = Field(..., ge=1)

    @property
    def is_partial(self) -> bool:
        return True

    @property
    def remaining_count(self) -> int:
        return self.required - self.detected

    @property
    def message(self) -> str:
        return (
            f"{self.detected}/{self.required} detected. "
            f"Please repeat {self.remaining_count} more time(s)."
        )


class Failure(_Verdict):
    """The recitation was not recognised."""

    kind: Literal["failure"] = "failure"
    reason: FailureReason

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return self.reason.message


VerificationVerdict = Annotated[
    Union[Success, Partial, Failure],
    Field(discriminator="kind"),
]

VERDICT_ADAPTER: TypeAdapter = TypeAdapter(VerificationVerdict)
