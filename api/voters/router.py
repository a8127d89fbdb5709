"""
Voter endpoints: public sign-in, admin listing.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from . import schemas, service

public_router = APIRouter()
admin_router = APIRouter()


@public_router.post("/signin")
async def signin(payload: schemas.SigninRequest, request: Request) -> schemas.SigninResponse:
    """
    Register a voter on first sign-in; later sign-ins with the same email
    return the same voter id.
    """
    ip_address = request.client.host if request.client else None
    return await service.sign_in(payload, ip_address=ip_address)


@admin_router.get("/voters")
async def list_voters() -> list[dict]:
    return await service.list_voters()
