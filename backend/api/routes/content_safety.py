from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import enforce_content_safety, get_policy_gate
from content_safety.policy import SafetyPolicyGate, SafetyVerdict
from schemas.api import (
    ErrorResponse,
    ScanRequest,
    ScanResultResponse,
    SubmissionCheckResponse,
    SubmissionRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/scan", response_model=ScanResultResponse)
async def scan_text(
    body: ScanRequest,
    gate: SafetyPolicyGate = Depends(get_policy_gate),
):
    """Preview scan of a single text while the author is still typing.

    Never blocks; the caller decides what to show.
    """
    result = gate.scan(body.text)
    if result is None:
        raise HTTPException(status_code=503, detail="Content safety scan unavailable")
    return ScanResultResponse.model_validate(result)


@router.post(
    "/check",
    response_model=SubmissionCheckResponse,
    responses={400: {"model": ErrorResponse}},
)
async def check_submission(
    body: SubmissionRequest,
    verdict: SafetyVerdict | None = Depends(enforce_content_safety),
):
    """Run a title/content submission through the content safety policy.

    Blocked submissions never reach this handler; they are answered with
    a 400 ``CONTENT_SAFETY_BLOCK`` error by the exception handler.
    """
    warning = verdict.warning if verdict is not None else None
    return SubmissionCheckResponse(
        allowed=True,
        content_safety_warning=(
            ScanResultResponse.model_validate(warning) if warning is not None else None
        ),
    )
