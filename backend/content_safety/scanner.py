from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from content_safety.patterns import (
    CATEGORY_ORDER,
    CATEGORY_SUGGESTIONS,
    PATTERN_REGISTRY,
    SAFE_SUGGESTION,
    DetectionRule,
)

logger = logging.getLogger(__name__)

DEFAULT_MEDIUM_THRESHOLD = 50
DEFAULT_HIGH_THRESHOLD = 80


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InvalidThresholdsError(ValueError):
    """Raised when risk thresholds are negative or out of order."""


@dataclass(frozen=True)
class RiskThresholds:
    """Score cut-offs for MEDIUM and HIGH risk."""

    medium: int = DEFAULT_MEDIUM_THRESHOLD
    high: int = DEFAULT_HIGH_THRESHOLD

    def validate(self) -> RiskThresholds:
        if self.medium < 0 or self.high < 0:
            raise InvalidThresholdsError(
                f"Risk thresholds must be non-negative (medium={self.medium}, high={self.high})"
            )
        if self.medium > self.high:
            raise InvalidThresholdsError(
                f"Medium threshold {self.medium} is above high threshold {self.high}"
            )
        return self

    def classify(self, score: int) -> RiskLevel:
        if score >= self.high:
            return RiskLevel.HIGH
        if score >= self.medium:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW


@dataclass(frozen=True)
class DetectionFlag:
    """A rule that matched at least once in the scanned text."""

    category: str
    rule: str
    pattern: str  # regex source of the rule
    message: str
    weight: int
    count: int

    @property
    def points(self) -> int:
        return self.weight * self.count


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one piece of text (or several, once merged)."""

    risk_level: RiskLevel
    score: int
    flags: tuple[DetectionFlag, ...] = ()
    suggestions: tuple[str, ...] = ()

    @property
    def categories(self) -> set[str]:
        return {f.category for f in self.flags}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def build_suggestions(flags: Iterable[DetectionFlag]) -> tuple[str, ...]:
    """One advisory per flagged category, in declared category order."""
    flagged = {f.category for f in flags}
    suggestions = tuple(
        CATEGORY_SUGGESTIONS[category]
        for category in CATEGORY_ORDER
        if category in flagged
    )
    return suggestions or (SAFE_SUGGESTION,)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


class ContentSafetyScanner:
    """Rule-based PII scanner producing a score, risk level and advice.

    The scanner holds only immutable configuration, so a single instance
    can serve any number of concurrent requests.
    """

    def __init__(
        self,
        thresholds: RiskThresholds | None = None,
        rules: tuple[DetectionRule, ...] = PATTERN_REGISTRY,
    ) -> None:
        self.thresholds = thresholds or RiskThresholds()
        self.rules = rules

    def scan(self, text: str) -> ScanResult:
        """Apply every rule to *text* and aggregate the matches.

        Matching runs on the case-folded text with case-insensitive
        patterns, so changing the case of the input never changes the
        score.
        """
        normalized = text.casefold()

        flags: list[DetectionFlag] = []
        score = 0
        for rule in self.rules:
            count = sum(1 for _ in rule.pattern.finditer(normalized))
            if count == 0:
                continue
            flag = DetectionFlag(
                category=rule.category,
                rule=rule.name,
                pattern=rule.pattern.pattern,
                message=rule.message,
                weight=rule.weight,
                count=count,
            )
            flags.append(flag)
            score += flag.points

        risk_level = self.thresholds.classify(score)
        logger.info(
            "Content safety scan: score=%d, level=%s", score, risk_level.value
        )
        return ScanResult(
            risk_level=risk_level,
            score=score,
            flags=tuple(flags),
            suggestions=build_suggestions(flags),
        )
