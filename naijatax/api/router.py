from fastapi import APIRouter

from naijatax.api.routes import analysis, audit, compliance, savings, tax

api_router = APIRouter()

api_router.include_router(tax.router)
api_router.include_router(audit.router)
api_router.include_router(compliance.router)
api_router.include_router(savings.router)
api_router.include_router(analysis.router)
