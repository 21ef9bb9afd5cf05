from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import property_engine, Base
from shared.core.logging_config import configure_logging
from shared.exception_handler import setup_exception_handlers
from shared.wrappers.request_logging import RequestLoggingMiddleware

from . import models  # noqa: F401  registers every table on Base.metadata
from .router.properties import properties_router, units_router
from .router.leasing_tenants import (
    leases_router, lease_payments_router, residents_router)
from .router.financials import (
    expenses_router, expense_types_router, fines_router, fine_types_router,
    payment_categories_router, payment_types_router, utilities_router, utility_types_router)
from .router.maintenance import inspections_router, inspection_types_router

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)

# Create all tables
Base.metadata.create_all(bind=property_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)

# Include routers
app.include_router(properties_router.router)
app.include_router(units_router.router)
app.include_router(residents_router.router)
app.include_router(leases_router.router)
app.include_router(lease_payments_router.router)
app.include_router(payment_types_router.router)
app.include_router(payment_categories_router.router)
app.include_router(expenses_router.router)
app.include_router(expense_types_router.router)
app.include_router(fine_types_router.router)
app.include_router(fines_router.router)
app.include_router(utility_types_router.router)
app.include_router(utilities_router.router)
app.include_router(inspection_types_router.router)
app.include_router(inspections_router.router)
