"""Prompt selection stage for the cry analysis pipeline (Stage 03).

Each locale maps to one instruction template. The template names the exact
JSON contract the model has to return and the language its strings must use.
Adding a locale means adding a `Locale` member and a `PROMPT_TEMPLATES` entry.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class Locale(str, Enum):
    US = "US"
    ID = "ID"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Locale":
        """Map a free-form region hint to a supported locale, defaulting to US."""

        if not isinstance(value, str):
            return DEFAULT_LOCALE
        try:
            return cls(value.strip().upper())
        except ValueError:
            return DEFAULT_LOCALE


DEFAULT_LOCALE = Locale.US

_RESPONSE_SCHEMA = (
    "{\n"
    '  "is_baby_cry": boolean,\n'
    '  "cause": string,\n'
    '  "confidence": number (0-100),\n'
    '  "actions": string[],\n'
    '  "message": string\n'
    "}"
)

PROMPT_TEMPLATES: dict[Locale, str] = {
    Locale.US: (
        "Analyze this audio and determine if it contains a baby crying.\n\n"
        "If it does, infer the most likely cause. Prefer one of: hunger, tiredness, "
        "discomfort (wet diaper, temperature), pain or colic, needs burping, "
        "wants attention. Use another short label only when none of these fit. "
        'If no crying is heard, set "is_baby_cry" to false and "cause" to "none".\n\n'
        "Rate your confidence from 0 to 100 and list practical actions the parent "
        "can take, most useful first.\n\n"
        f"Return JSON:\n{_RESPONSE_SCHEMA}\n\n"
        "Use English for all string values. Return only the JSON object, with no "
        "text before or after it."
    ),
    Locale.ID: (
        "Analisis audio ini dan tentukan apakah berisi suara bayi menangis.\n\n"
        "Jika ya, simpulkan penyebab yang paling mungkin. Utamakan salah satu dari: "
        "lapar, lelah atau mengantuk, tidak nyaman (popok basah, suhu), sakit atau "
        "kolik, perlu bersendawa, ingin diperhatikan. Gunakan label singkat lain hanya "
        "jika tidak ada yang cocok. "
        'Jika tidak terdengar tangisan, isi "is_baby_cry" dengan false dan "cause" '
        'dengan "tidak ada".\n\n'
        "Beri tingkat keyakinan dari 0 sampai 100 dan daftar tindakan praktis yang "
        "dapat dilakukan orang tua, mulai dari yang paling berguna.\n\n"
        f"Kembalikan objek JSON dengan struktur:\n{_RESPONSE_SCHEMA}\n\n"
        "Gunakan Bahasa Indonesia untuk semua nilai string. Kembalikan hanya objek "
        "JSON tersebut, tanpa teks sebelum atau sesudahnya."
    ),
}


def select_prompt(region: Union[Locale, str, None]) -> str:
    """Return the instruction template for a locale or a raw region hint."""

    locale = region if isinstance(region, Locale) else Locale.parse(region)
    return PROMPT_TEMPLATES.get(locale, PROMPT_TEMPLATES[DEFAULT_LOCALE])


__all__ = ["DEFAULT_LOCALE", "Locale", "PROMPT_TEMPLATES", "select_prompt"]
