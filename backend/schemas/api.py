from __future__ import annotations

from pydantic import BaseModel, Field

from content_safety.scanner import RiskLevel


# --- Content Safety Schemas ---

class ScanRequest(BaseModel):
    text: str = Field(..., max_length=100_000)


class SubmissionRequest(BaseModel):
    title: str | None = Field(None, max_length=255)
    content: str | None = Field(None, max_length=100_000)


class DetectionFlagResponse(BaseModel):
    category: str
    rule: str
    pattern: str
    message: str
    weight: int
    count: int

    model_config = {"from_attributes": True}


class ScanResultResponse(BaseModel):
    risk_level: RiskLevel
    score: int
    flags: list[DetectionFlagResponse] = []
    suggestions: list[str] = []

    model_config = {"from_attributes": True}


class SubmissionCheckResponse(BaseModel):
    allowed: bool = True
    content_safety_warning: ScanResultResponse | None = None


# --- Error Schemas ---

class BlockedDetails(BaseModel):
    risk_level: RiskLevel
    score: int
    suggestions: list[str] = []


class ErrorResponse(BaseModel):
    error: str
    code: str
    status_code: int
    details: BlockedDetails | None = None
