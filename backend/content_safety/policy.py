from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Mapping

from content_safety.scanner import (
    ContentSafetyScanner,
    RiskLevel,
    RiskThresholds,
    ScanResult,
)

logger = logging.getLogger(__name__)

_EMPTY_RESULT = ScanResult(risk_level=RiskLevel.LOW, score=0)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContentSafetyConfig:
    """Process-wide content safety policy, built once from settings."""

    enabled: bool = False
    block_high_risk: bool = False
    medium_threshold: int = 50
    high_threshold: int = 80

    @property
    def thresholds(self) -> RiskThresholds:
        return RiskThresholds(medium=self.medium_threshold, high=self.high_threshold)


@dataclass(frozen=True)
class SafetyVerdict:
    """Decision for one submission.

    ``result`` is ``None`` when nothing was scanned (no text fields, or the
    scan failed and the gate failed open).
    """

    result: ScanResult | None
    blocked: bool = False

    @property
    def warning(self) -> ScanResult | None:
        """The scan result to surface to the author when not blocked."""
        return None if self.blocked else self.result


class ContentSafetyBlockedError(Exception):
    """Raised by the HTTP layer when a submission must not be persisted."""

    def __init__(self, result: ScanResult) -> None:
        self.result = result
        super().__init__(
            f"Content blocked: risk={result.risk_level.value}, score={result.score}"
        )


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def merge_results(
    first: ScanResult,
    second: ScanResult,
    thresholds: RiskThresholds,
) -> ScanResult:
    """Combine two scan results into a new one.

    Flags are concatenated without folding counts across fields, and the
    risk level is re-derived from the summed score.
    """
    score = first.score + second.score
    suggestions = tuple(dict.fromkeys(first.suggestions + second.suggestions))
    return ScanResult(
        risk_level=thresholds.classify(score),
        score=score,
        flags=first.flags + second.flags,
        suggestions=suggestions,
    )


# ---------------------------------------------------------------------------
# Gate
# ---------------------------------------------------------------------------


class SafetyPolicyGate:
    """Scans the text fields of a submission and decides block vs. allow.

    Content safety is advisory: any failure while scanning lets the
    submission through without a result.
    """

    def __init__(
        self,
        config: ContentSafetyConfig,
        scanner: ContentSafetyScanner | None = None,
    ) -> None:
        self.config = config
        self._scanner = scanner

    def scan(self, text: str) -> ScanResult | None:
        """Scan a single text without applying the blocking policy.

        Returns ``None`` if the scan could not be performed.
        """
        try:
            thresholds = self.config.thresholds.validate()
            return (self._scanner or ContentSafetyScanner(thresholds)).scan(text)
        except Exception:
            logger.exception("Content safety preview scan failed")
            return None

    def evaluate(self, fields: Mapping[str, str | None]) -> SafetyVerdict:
        """Evaluate *fields* (label -> text) in the caller's order."""
        texts = [(label, text) for label, text in fields.items() if text]
        if not texts:
            return SafetyVerdict(result=None, blocked=False)

        try:
            thresholds = self.config.thresholds.validate()
            scanner = self._scanner or ContentSafetyScanner(thresholds)
            results = [scanner.scan(text) for _label, text in texts]
            result = reduce(
                lambda acc, nxt: merge_results(acc, nxt, thresholds),
                results,
                _EMPTY_RESULT,
            )
        except Exception:
            logger.exception(
                "Content safety check failed for fields %s; allowing submission",
                [label for label, _text in texts],
            )
            return SafetyVerdict(result=None, blocked=False)

        blocked = (
            self.config.enabled
            and self.config.block_high_risk
            and result.risk_level is RiskLevel.HIGH
        )
        if blocked:
            logger.warning(
                "Content blocked due to high risk level: score=%d, categories=%s",
                result.score,
                sorted(result.categories),
            )
        elif result.flags:
            logger.info(
                "Content allowed with warnings: score=%d, level=%s",
                result.score,
                result.risk_level.value,
            )
        return SafetyVerdict(result=result, blocked=blocked)
