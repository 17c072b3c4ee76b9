from __future__ import annotations

import os
from datetime import date
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel, Field

from finnish_pic import (
    FinnishPicError,
    Sex,
    generate_with_age,
    parse,
    validate,
)
from finnish_pic.detectors import FinnishPicDetector
from finnish_pic.utils.logger import prepare_logger

logger = prepare_logger("finnish_pic.api", os.getenv("LOG_LEVEL", "INFO"))

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # auth disabled, API_KEY not set
    if key == _API_KEY:
        return
    logger.warning("Rejected request with invalid or missing API key")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


def _unprocessable(exc: FinnishPicError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=str(exc),
    )


# ── Pydantic models (JSON API) ───────────────────────────────────────────────


class PicRequest(BaseModel):
    pic: str


class ParseResponse(BaseModel):
    valid: bool
    sex: Sex
    date_of_birth: date
    age_in_years: int


class ValidateResponse(BaseModel):
    pic: str
    valid: bool


class GenerateRequest(BaseModel):
    age: int = Field(description="Age in completed years, 1–200")


class GenerateResponse(BaseModel):
    pic: str


class ScanRequest(BaseModel):
    text: str


class FindingOut(BaseModel):
    start: int
    end: int
    text: str
    pii_type: str
    confidence: float
    sex: Sex
    date_of_birth: date


class ScanResponse(BaseModel):
    findings: list[FindingOut]


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="finnish-pic")

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

_detector = FinnishPicDetector()


def _today() -> date:
    return date.today()


# ── JSON API routes ──────────────────────────────────────────────────────────


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.post("/parse", response_model=ParseResponse, dependencies=[Depends(verify_api_key)])
async def parse_pic(request: PicRequest) -> ParseResponse:
    try:
        parsed = parse(request.pic, today=_today())
    except FinnishPicError as exc:
        raise _unprocessable(exc) from exc
    return ParseResponse(
        valid=parsed.valid,
        sex=parsed.sex,
        date_of_birth=parsed.date_of_birth,
        age_in_years=parsed.age_in_years,
    )


@app.post(
    "/validate",
    response_model=ValidateResponse,
    dependencies=[Depends(verify_api_key)],
)
async def validate_pic(request: PicRequest) -> ValidateResponse:
    return ValidateResponse(pic=request.pic, valid=validate(request.pic))


@app.post(
    "/generate",
    response_model=GenerateResponse,
    dependencies=[Depends(verify_api_key)],
)
async def generate(request: GenerateRequest) -> GenerateResponse:
    try:
        pic = generate_with_age(request.age, today=_today())
    except FinnishPicError as exc:
        raise _unprocessable(exc) from exc
    logger.info("Generated PIC for age %d", request.age)
    return GenerateResponse(pic=pic)


@app.post("/scan", response_model=ScanResponse, dependencies=[Depends(verify_api_key)])
async def scan(request: ScanRequest) -> ScanResponse:
    findings = [
        FindingOut(
            start=f.start,
            end=f.end,
            text=f.text,
            pii_type=f.pii_type.value,
            confidence=f.confidence,
            sex=f.sex,
            date_of_birth=f.date_of_birth,
        )
        for f in _detector.detect(request.text)
    ]
    return ScanResponse(findings=findings)
