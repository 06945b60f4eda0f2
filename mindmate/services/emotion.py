"""Keyword-based emotion classification for en, es and hi."""

from __future__ import annotations

from mindmate.models.emotion import EMOTION_PRIORITY, Emotion, LanguageCode

EMOTION_KEYWORDS: dict[LanguageCode, dict[Emotion, tuple[str, ...]]] = {
    LanguageCode.EN: {
        Emotion.SAD: (
            "sad", "depressed", "down", "unhappy", "crying", "tears", "miserable",
            "lonely", "hopeless", "hurt", "pain", "heartbroken",
        ),
        Emotion.ANXIOUS: (
            "anxious", "worried", "stress", "nervous", "panic", "fear", "scared",
            "overwhelmed", "terrified", "afraid",
        ),
        Emotion.ANGRY: (
            "angry", "mad", "furious", "frustrated", "annoyed", "irritated", "rage",
            "hate", "upset",
        ),
        Emotion.HAPPY: (
            "happy", "joy", "excited", "great", "wonderful", "amazing", "good",
            "awesome", "fantastic", "love", "brilliant",
        ),
        Emotion.TIRED: (
            "tired", "exhausted", "drained", "weary", "fatigued", "sleepy", "burned out",
        ),
        Emotion.CONFUSED: (
            "confused", "lost", "unsure", "don't know", "uncertain", "puzzled",
        ),
        Emotion.GRATEFUL: (
            "grateful", "thankful", "blessed", "appreciate", "lucky", "fortunate",
        ),
        Emotion.CALM: ("calm", "peaceful", "relaxed", "serene", "content", "tranquil"),
    },
    LanguageCode.ES: {
        Emotion.SAD: (
            "triste", "tristeza", "llorar", "deprimido", "desdichado", "solo",
            "desesperado", "herido", "dolor", "corazón roto",
        ),
        Emotion.ANXIOUS: (
            "ansioso", "preocupado", "estrés", "nervioso", "pánico", "miedo",
            "asustado", "abrumado", "aterrorizado", "temor",
        ),
        Emotion.ANGRY: (
            "enojado", "enfadado", "furioso", "frustrado", "molesto", "irritado",
            "rabia", "odio", "alterado",
        ),
        Emotion.HAPPY: (
            "feliz", "alegría", "emocionado", "genial", "maravilloso", "asombroso",
            "bueno", "fantástico", "amor", "brillante",
        ),
        Emotion.TIRED: (
            "cansado", "exhausto", "agotado", "cansino", "fatigado", "somnoliento",
            "quemado",
        ),
        Emotion.CONFUSED: (
            "confundido", "perdido", "inseguro", "no sé", "incierto", "desconcertado",
        ),
        Emotion.GRATEFUL: (
            "agradecido", "agradecimiento", "bendecido", "aprecio", "afortunado",
        ),
        Emotion.CALM: ("calmado", "tranquilo", "relajado", "sereno", "contento", "plácido"),
    },
    LanguageCode.HI: {
        Emotion.SAD: (
            "दुख", "उदास", "दुखी", "रोना", "आंसू", "निराश", "अकेला", "निराशावादी",
            "चोट", "दर्द", "दिल टूटा",
        ),
        Emotion.ANXIOUS: (
            "चिंतित", "चिंता", "तनाव", "नर्वस", "पैनिक", "डर", "भयभीत", "अधिक भार",
            "भयानक", "भय",
        ),
        Emotion.ANGRY: (
            "गुस्सा", "गुस्से", "क्रोध", "नाराज", "चिढ़", "क्रोधित", "घृणा", "उत्तेजित",
        ),
        Emotion.HAPPY: (
            "खुश", "खुशी", "उत्साहित", "अद्भुत", "शानदार", "असाधारण", "अच्छा",
            "फैंटास्टिक", "प्यार", "उज्ज्वल",
        ),
        Emotion.TIRED: ("थका", "थकान", "निकास", "थकित", "नींद", "जला हुआ"),
        Emotion.CONFUSED: ("भ्रमित", "खोया", "अनिश्चित", "नहीं जानता", "हैरान"),
        Emotion.GRATEFUL: (
            "आभारी", "कृतज्ञ", "आशीर्वादित", "सराहना", "भाग्यशाली", "सौभाग्यशाली",
        ),
        Emotion.CALM: ("शांत", "शांतिपूर्ण", "आरामदायक", "निश्चल", "संतुष्ट"),
    },
}


def classify(text: str, language: LanguageCode | str | None = LanguageCode.EN) -> Emotion:
    """Return the first emotion, in priority order, with a keyword inside ``text``.

    Matching is plain substring search on the lower-cased text, so a keyword
    embedded in a longer word still counts. Returns ``Emotion.NEUTRAL`` when
    nothing matches.
    """
    if not isinstance(language, LanguageCode):
        language = LanguageCode.from_string(language)
    lowered = text.lower()
    table = EMOTION_KEYWORDS.get(language, EMOTION_KEYWORDS[LanguageCode.EN])
    for emotion in EMOTION_PRIORITY:
        keywords = table.get(emotion) or EMOTION_KEYWORDS[LanguageCode.EN][emotion]
        for keyword in keywords:
            if keyword.lower() in lowered:
                return emotion
    return Emotion.NEUTRAL
