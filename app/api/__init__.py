"""API router for v1 endpoints."""

from fastapi import APIRouter

from app.api import assessments

router = APIRouter()

# Meeting assessment routes
router.include_router(assessments.router, tags=["assessments"])
