"""
Dhikr requirement data model.
"""

from enum import Enum

from pydantic import BaseModel, Field


class DhikrCategory(str, Enum):
    """Kind of recitation a requirement asks for."""

    SIMPLE = "simple"
    VERSE = "ayat"
    CHAPTER = "surah"
    SET = "adhkar_set"


class DhikrRequirement(BaseModel):
    """
    A recitation that must be spoken to unlock an app.

    Requirements are defined once in the catalog and never mutated. When
    dhikr debt applies, a copy with multiplied repetitions is derived.

    Attributes:
        id: Stable identifier (e.g. "subhanallah")
        display_name: Human-readable name
        script_text: Reference recitation in Arabic script
        transliteration: Latin transliteration shown to the user
        repetitions: How many times the phrase must be recited (>= 1)
        acceptance_threshold: Minimum similarity for a single-shot match (0, 1]
        category: Kind of recitation
    """

    id: str = Field(
        ...,
        description="Stable identifier of the dhikr",
        min_length=1,
    )
    display_name: str = Field(
        ...,
        description="Human-readable name",
    )
    script_text: str = Field(
        ...,
        description="Reference recitation in its native script",
        min_length=1,
    )
    transliteration: str = Field(
        default="",
        description="Latin transliteration",
    )
    repetitions: int = Field(
        default=1,
        description="Required number of repetitions",
        ge=1,
    )
    acceptance_threshold: float = Field(
        default=0.7,
        description="Minimum similarity score to accept a recitation",
        gt=0.0,
        le=1.0,
    )
    category: DhikrCategory = Field(
        default=DhikrCategory.SIMPLE,
        description="Kind of recitation",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "subhanallah",
                    "display_name": "Subhanallah",
                    "script_text": "سُبْحَانَ ٱللَّٰهِ",
                    "transliteration": "Subhanallah",
                    "repetitions": 3,
                    "acceptance_threshold": 0.7,
                    "category": "simple",
                }
            ]
        },
    }

    @property
    def display_text(self) -> str:
        """Name with the repetition count, e.g. "Subhanallah (3×)"."""
        if self.repetitions > 1:
            return f"{self.display_name} ({self.repetitions}×)"
        return self.display_name

    @property
    def normalized_text(self) -> str:
        """Script text after Arabic normalization."""
        from wiqayah.core.arabic import normalize_arabic

        return normalize_arabic(self.script_text)

    def with_multiplier(self, multiplier: int) -> "DhikrRequirement":
        """
        Return a copy with repetitions multiplied (used by the debt system).

        Threshold, text and category are unchanged.

        Args:
            multiplier: Factor to apply (>= 1)

        Returns:
            A new DhikrRequirement
        """
        if multiplier < 1:
            raise ValueError(f"multiplier must be >= 1, got {multiplier}")
        return self.model_copy(update={"repetitions": self.repetitions * multiplier})

    def __str__(self) -> str:
        return f"Dhikr({self.id}, {self.repetitions}×)"
