from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Emotion(str, Enum):
    """Closed set of emotion labels attached to a chat message."""

    SAD = "sad"
    ANXIOUS = "anxious"
    ANGRY = "angry"
    HAPPY = "happy"
    TIRED = "tired"
    CONFUSED = "confused"
    GRATEFUL = "grateful"
    CALM = "calm"
    NEUTRAL = "neutral"

    @classmethod
    def parse(cls, value: str | None) -> Emotion | None:
        """Return the emotion for a label, or None if the label is unknown."""
        if not value:
            return None
        normalized = value.lower().strip()
        for emotion in cls:
            if emotion.value == normalized:
                return emotion
        return None


# First match wins when a text carries keywords for several emotions.
EMOTION_PRIORITY: tuple[Emotion, ...] = (
    Emotion.SAD,
    Emotion.ANXIOUS,
    Emotion.ANGRY,
    Emotion.HAPPY,
    Emotion.TIRED,
    Emotion.CONFUSED,
    Emotion.GRATEFUL,
    Emotion.CALM,
)


class LanguageCode(str, Enum):
    EN = "en"
    ES = "es"
    HI = "hi"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_string(cls, value: str | None) -> LanguageCode:
        """Resolve a code, locale tag or English language name.

        Args:
            value: e.g. "es", "es-ES", "hi_IN" or "Spanish" (case-insensitive).

        Returns:
            The matching LanguageCode, or EN when nothing matches.
        """
        if not value:
            return cls.EN
        normalized = value.lower().strip().replace("_", "-")
        primary = normalized.split("-", 1)[0]
        for language in cls:
            if language.value == primary or language.display_name.lower() == normalized:
                return language
        return cls.EN


_DISPLAY_NAMES: dict[LanguageCode, str] = {
    LanguageCode.EN: "English",
    LanguageCode.ES: "Spanish",
    LanguageCode.HI: "Hindi",
}


@dataclass(frozen=True)
class MoodDisplay:
    icon: str
    text: str


MOOD_DISPLAYS: dict[Emotion, MoodDisplay] = {
    Emotion.SAD: MoodDisplay(icon="😢", text="Feeling sad"),
    Emotion.ANXIOUS: MoodDisplay(icon="😰", text="Feeling anxious"),
    Emotion.ANGRY: MoodDisplay(icon="😠", text="Feeling angry"),
    Emotion.HAPPY: MoodDisplay(icon="😊", text="Feeling happy"),
    Emotion.TIRED: MoodDisplay(icon="😴", text="Feeling tired"),
    Emotion.CONFUSED: MoodDisplay(icon="😕", text="Feeling confused"),
    Emotion.GRATEFUL: MoodDisplay(icon="🙏", text="Feeling grateful"),
    Emotion.CALM: MoodDisplay(icon="😌", text="Feeling calm"),
    Emotion.NEUTRAL: MoodDisplay(icon="😐", text="Feeling neutral"),
}


def mood_display_for(emotion: Emotion) -> MoodDisplay:
    return MOOD_DISPLAYS.get(emotion, MOOD_DISPLAYS[Emotion.NEUTRAL])
