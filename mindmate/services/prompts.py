from __future__ import annotations

import random
from enum import Enum

from mindmate.models.emotion import Emotion, LanguageCode

AFFIRMATION_THEMES: tuple[str, ...] = (
    "self-love",
    "inner strength",
    "gratitude",
    "forgiveness",
    "courage",
    "peace",
    "resilience",
    "abundance",
)

WELCOME_MESSAGES: tuple[str, ...] = (
    "Welcome! I'm so glad you're here. How are you feeling today?",
    "Hello friend! I'm here to listen and support you. What's on your mind?",
    "Hi there! It's wonderful to connect with you. How can I help you today?",
    "Welcome back! I'm here whenever you need someone to talk to. How are things?",
)


class QuickAction(str, Enum):
    BREATHING = "breathing"
    MEDITATION = "meditation"
    AFFIRMATION = "affirmation"

    @classmethod
    def parse(cls, value: str | None) -> QuickAction | None:
        if not value:
            return None
        normalized = value.lower().strip()
        for action in cls:
            if action.value == normalized:
                return action
        return None


_QUICK_ACTION_PROMPTS: dict[QuickAction, str] = {
    QuickAction.BREATHING: (
        "Generate a simple, guided breathing exercise for stress relief. "
        "Keep it 4 steps, easy to follow."
    ),
    QuickAction.MEDITATION: (
        "Create a short, 1-minute mindfulness meditation script. "
        "Focus on present moment awareness."
    ),
    QuickAction.AFFIRMATION: (
        "Provide one empowering positive affirmation focused on {theme}. "
        "Make it unique and uplifting, varying from common phrases."
    ),
}


def build_chat_system_prompt(emotion: Emotion, language: LanguageCode) -> str:
    return (
        "You are MindMate, a compassionate and empathetic mental health support companion. "
        "Your role is to:\n\n"
        "1. Listen actively and validate feelings\n"
        "2. Provide emotional support and encouragement\n"
        "3. Be warm, non-judgmental, and caring\n"
        "4. Keep responses concise (2-4 sentences) but meaningful\n"
        "5. Never diagnose or provide medical advice\n"
        "6. Encourage professional help when needed for serious issues\n"
        "7. Only offer coping strategies or mindfulness techniques when the user "
        "explicitly asks for them or they are highly relevant\n\n"
        f"Current detected emotion: {emotion.value}\n"
        f"User's preferred language: {language.display_name}\n\n"
        f"Respond in {language.display_name} with empathy and support. "
        "If the emotion is concerning (very sad, anxious, or mentions self-harm), "
        "gently suggest professional resources while still being supportive."
    )


def build_chat_user_content(context_prefix: str | None, message: str) -> str:
    """Prefix the user message with caller-supplied context, verbatim."""
    if not context_prefix:
        return message
    return f"{context_prefix}{message}"


def build_quick_action_system_prompt(language: LanguageCode) -> str:
    return (
        "You are MindMate, a compassionate mental health companion. "
        "Generate helpful, concise content based on the user's request. "
        "Keep it supportive and positive. "
        f"User's language: {language.display_name}."
    )


def build_quick_action_prompt(action: QuickAction, rng: random.Random | None = None) -> str:
    template = _QUICK_ACTION_PROMPTS[action]
    if action is QuickAction.AFFIRMATION:
        theme = (rng or random).choice(AFFIRMATION_THEMES)
        return template.format(theme=theme)
    return template


def pick_welcome_message(rng: random.Random | None = None) -> str:
    return (rng or random).choice(WELCOME_MESSAGES)
