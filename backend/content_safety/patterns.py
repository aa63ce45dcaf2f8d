from __future__ import annotations

import re
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DetectionRule:
    """A single sensitive-data rule: what it matches and what it costs."""

    name: str
    category: str
    pattern: re.Pattern[str]
    message: str
    weight: int  # points per occurrence


# ---------------------------------------------------------------------------
# Category families, in the order suggestions are reported
# ---------------------------------------------------------------------------

NATIONAL_ID = "national-id"  # CPF
GOVERNMENT_ID = "government-id"  # RG
PHONE = "phone"
EMAIL = "email"
DATE_OF_BIRTH = "date-of-birth"
NAMED_PERSON = "named-person"

CATEGORY_ORDER: tuple[str, ...] = (
    NATIONAL_ID,
    GOVERNMENT_ID,
    PHONE,
    EMAIL,
    DATE_OF_BIRTH,
    NAMED_PERSON,
)

CATEGORY_SUGGESTIONS: dict[str, str] = {
    NATIONAL_ID: "❌ Não compartilhe números de CPF",
    GOVERNMENT_ID: "❌ Não compartilhe números de RG",
    PHONE: "❌ Não compartilhe números de telefone",
    EMAIL: "❌ Não compartilhe endereços de email pessoais",
    DATE_OF_BIRTH: "❌ Não compartilhe datas de nascimento",
    NAMED_PERSON: "⚠️ Possível informação pessoal identificável detectada",
}

SAFE_SUGGESTION = "✅ Seu conteúdo parece seguro em relação a dados pessoais"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_NAME_WORD = r"[A-ZÁÀÂÃÉÊÍÓÔÕÚÜÇ][a-záàâãéêíóôõúüç]+"


def _rule(name: str, category: str, regex: str, message: str, weight: int) -> DetectionRule:
    return DetectionRule(
        name=name,
        category=category,
        pattern=re.compile(regex, re.IGNORECASE),
        message=message,
        weight=weight,
    )


# Order matters for flag ordering only; the score is a plain sum.
# National ids are deliberately counted by two rules of different
# confidence, and a formatted CPF also satisfies the RG shape.
PATTERN_REGISTRY: tuple[DetectionRule, ...] = (
    _rule(
        "national_id_formatted",
        NATIONAL_ID,
        r"\d{3}\.\d{3}\.\d{3}-\d{2}",
        "Número de CPF detectado",
        30,
    ),
    _rule(
        "national_id_digits",
        NATIONAL_ID,
        r"\b\d{11}\b",
        "Possível CPF detectado",
        20,
    ),
    _rule(
        "government_id_formatted",
        GOVERNMENT_ID,
        r"\d{2}\.\d{3}\.\d{3}-\d",
        "Número de RG detectado",
        25,
    ),
    _rule(
        "phone_area_code",
        PHONE,
        r"\(?\d{2}\)?\s?\d{4,5}-\d{4}",
        "Número de telefone detectado",
        20,
    ),
    _rule(
        "phone_bare",
        PHONE,
        r"\d{2}\s\d{4,5}-\d{4}",
        "Possível número de telefone",
        15,
    ),
    _rule(
        "email",
        EMAIL,
        # Bounded local part and domain keep the scan linear on long
        # runs like "a.a.a." that have a word boundary at every position.
        r"\b[a-z0-9._%+-]{1,64}@[a-z0-9.-]{1,255}\.[a-z]{2,}\b",
        "Endereço de email detectado",
        15,
    ),
    _rule(
        "date_of_birth",
        DATE_OF_BIRTH,
        r"\b(?:0[1-9]|[12]\d|3[01])/(?:0[1-9]|1[012])/(?:19|20)\d{2}\b",
        "Possível data de nascimento detectada",
        20,
    ),
    _rule(
        "named_person",
        NAMED_PERSON,
        rf"\bdra?\.?\s+{_NAME_WORD}\s+{_NAME_WORD}",
        "Informação pessoal identificável detectada",
        10,
    ),
)
