"""Versioned API router: every v1 endpoint group lives under ``/api/v1``."""

from fastapi import APIRouter

from event_platform.presentation.api.v1.endpoints.health import router as health_router
from event_platform.presentation.api.v1.endpoints.auth import router as auth_router
from event_platform.presentation.api.v1.endpoints.persons import router as persons_router
from event_platform.presentation.api.v1.endpoints.companies import router as companies_router
from event_platform.presentation.api.v1.endpoints.users import router as users_router
from event_platform.presentation.api.v1.endpoints.speakers import router as speakers_router
from event_platform.presentation.api.v1.endpoints.payment_methods import (
    router as payment_methods_router,
)

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(persons_router)
router.include_router(companies_router)
router.include_router(users_router)
router.include_router(speakers_router)
router.include_router(payment_methods_router)
