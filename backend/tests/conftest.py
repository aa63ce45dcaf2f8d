from __future__ import annotations

import os
import pytest

# Keep the test run independent of any local .env policy
os.environ.setdefault("CONTENT_SAFETY_ENABLED", "false")
os.environ.setdefault("CONTENT_SAFETY_BLOCK_HIGH_RISK", "false")


@pytest.fixture
def high_risk_text():
    """A case note leaking a CPF, a phone number and a birth date."""
    return (
        "Paciente João Silva, CPF 123.456.789-10, telefone (11) 98765-4321, "
        "nascido em 15/03/1990"
    )


@pytest.fixture
def clinical_text():
    """A realistic clinical discussion without personal data."""
    return (
        "Estou tendo dificuldades em tratar um paciente com transtorno de "
        "ansiedade generalizada. Ele apresenta sintomas de preocupação "
        "excessiva e insônia. Qual seria a melhor abordagem?"
    )


@pytest.fixture
def scanner():
    from content_safety.scanner import ContentSafetyScanner
    return ContentSafetyScanner()


@pytest.fixture
def blocking_config():
    """Policy with scanning and blocking both switched on."""
    from content_safety.policy import ContentSafetyConfig
    return ContentSafetyConfig(enabled=True, block_high_risk=True)
