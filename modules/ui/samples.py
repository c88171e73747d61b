"""Sample sentences in Indian languages for exercising UTF-8 encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True, slots=True)
class LanguageSample:
    key: str
    name: str
    sample: str


LANGUAGE_SAMPLES: List[LanguageSample] = [
    LanguageSample("hindi", "Hindi", "नमस्ते, आप कैसे हैं? यह एक नमूना वाक्य है।"),
    LanguageSample("tamil", "Tamil", "வணக்கம், நீங்கள் எப்படி இருக்கிறீர்கள்? இது ஒரு மாதிரி வாக்கியம்."),
    LanguageSample("bengali", "Bengali", "নমস্কার, আপনি কেমন আছেন? এটি একটি নমুনা বাক্য।"),
    LanguageSample("telugu", "Telugu", "నమస్కారం, మీరు ఎలా ఉన్నారు? ఇది ఒక నమూనా వాక్యం."),
    LanguageSample("marathi", "Marathi", "नमस्कार, तुम्ही कसे आहात? हे एक नमुना वाक्य आहे."),
    LanguageSample("gujarati", "Gujarati", "નમસ્તે, તમે કેમ છો? આ એક નમૂના વાક્ય છે."),
    LanguageSample("kannada", "Kannada", "ನಮಸ್ಕಾರ, ನೀವು ಹೇಗಿದ್ದೀರಿ? ಇದು ಒಂದು ಮಾದರಿ ವಾಕ್ಯ."),
    LanguageSample("malayalam", "Malayalam", "നമസ്കാരം, സുഖമാണോ? ഇതൊരു മാതൃകാ വാക്യമാണ്."),
    LanguageSample("punjabi", "Punjabi", "ਸਤ ਸ੍ਰੀ ਅਕਾਲ, ਤੁਸੀਂ ਕਿਵੇਂ ਹੋ? ਇਹ ਇੱਕ ਨਮੂਨਾ ਵਾਕ ਹੈ।"),
    LanguageSample("urdu", "Urdu", "السلام علیکم، آپ کیسے ہیں؟ یہ ایک نمونہ جملہ ہے۔"),
]


def sample_choices() -> List[str]:
    return [sample.name for sample in LANGUAGE_SAMPLES]


def get_sample(name: str) -> str:
    """Return the sample text for a display name, or an empty string."""
    for sample in LANGUAGE_SAMPLES:
        if sample.name == name or sample.key == name:
            return sample.sample
    return ""
