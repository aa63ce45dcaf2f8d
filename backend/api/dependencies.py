import json
import logging
from functools import lru_cache

from fastapi import Depends, Request

from config import get_settings
from content_safety.policy import (
    ContentSafetyBlockedError,
    ContentSafetyConfig,
    SafetyPolicyGate,
    SafetyVerdict,
)

logger = logging.getLogger(__name__)

# Only writes are scanned; reads never reach the gate.
SCANNED_METHODS = {"POST", "PATCH"}

# Submission fields checked, in merge order.
SCANNED_FIELDS = ("title", "content")


def get_content_safety_config() -> ContentSafetyConfig:
    settings = get_settings()
    return ContentSafetyConfig(
        enabled=settings.content_safety_enabled,
        block_high_risk=settings.content_safety_block_high_risk,
        medium_threshold=settings.content_safety_risk_threshold_medium,
        high_threshold=settings.content_safety_risk_threshold_high,
    )


@lru_cache
def get_policy_gate() -> SafetyPolicyGate:
    return SafetyPolicyGate(get_content_safety_config())


async def _submission_fields(request: Request) -> dict[str, str | None]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    if not isinstance(body, dict):
        return {}
    return {
        name: body[name]
        for name in SCANNED_FIELDS
        if isinstance(body.get(name), str)
    }


async def enforce_content_safety(
    request: Request,
    gate: SafetyPolicyGate = Depends(get_policy_gate),
) -> SafetyVerdict | None:
    """Scan the title/content of a write request before it is persisted.

    The scan result is left on ``request.state.content_safety_result`` so
    handlers can return it as a warning.  Raises
    ``ContentSafetyBlockedError`` when the policy blocks the submission.
    """
    request.state.content_safety_result = None
    if request.method not in SCANNED_METHODS:
        return None

    fields = await _submission_fields(request)
    verdict = gate.evaluate(fields)
    request.state.content_safety_result = verdict.result

    if verdict.blocked:
        raise ContentSafetyBlockedError(verdict.result)
    return verdict
