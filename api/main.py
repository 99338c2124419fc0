from __future__ import annotations

import logging
import os
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from iban_check import COUNTRY_LENGTHS, Err, parse, validate

logger = logging.getLogger("uvicorn.error")

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled — no env var configured
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


def _mask(raw: str) -> str:
    """Keep country code and last 4 characters for log output."""
    s = raw.strip().replace(" ", "")
    if len(s) <= 6:
        return "*" * len(s)
    return s[:2] + "*" * (len(s) - 6) + s[-4:]


# ── Pydantic models ──────────────────────────────────────────────────────────


class IbanRequest(BaseModel):
    iban: str


class ParseResponse(BaseModel):
    country_code: str
    check_digits: int
    account_identifier: str
    machine_form: str
    human_readable: str


class ValidateResponse(BaseModel):
    iban: str
    well_formed: bool
    valid: bool
    error: str | None = None
    machine_form: str | None = None


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="iban-check")

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.get("/countries")
async def countries() -> dict[str, int]:
    return dict(COUNTRY_LENGTHS)


@app.post("/parse", response_model=ParseResponse, dependencies=[Depends(verify_api_key)])
async def parse_endpoint(request: IbanRequest) -> ParseResponse:
    result = parse(request.iban)
    if isinstance(result, Err):
        logger.info("parse %s -> %s", _mask(request.iban), result.error.kind.value)
        raise HTTPException(
            status_code=422,
            detail={
                "kind": result.error.kind.value,
                "raw": result.error.raw,
                "message": result.error.message,
            },
        )
    value = result.value
    logger.info("parse %s -> ok", _mask(request.iban))
    return ParseResponse(
        country_code=value.country_code,
        check_digits=value.check_digits,
        account_identifier=value.account_identifier,
        machine_form=value.machine_form(),
        human_readable=value.human_readable(),
    )


@app.post(
    "/validate",
    response_model=ValidateResponse,
    dependencies=[Depends(verify_api_key)],
)
async def validate_endpoint(request: IbanRequest) -> ValidateResponse:
    result = parse(request.iban)
    if isinstance(result, Err):
        logger.info("validate %s -> %s", _mask(request.iban), result.error.kind.value)
        return ValidateResponse(
            iban=request.iban,
            well_formed=False,
            valid=False,
            error=result.error.kind.value,
        )
    valid = validate(result.value)
    logger.info("validate %s -> %s", _mask(request.iban), "valid" if valid else "invalid")
    return ValidateResponse(
        iban=request.iban,
        well_formed=True,
        valid=valid,
        machine_form=result.value.machine_form(),
    )
