"""API v1 router."""

from fastapi import APIRouter

from . import certificates

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(certificates.router)
