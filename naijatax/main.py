from __future__ import annotations

import sys
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from naijatax.api.router import api_router
from naijatax.config import settings


logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)

app = FastAPI(
    title="NaijaTax Backend",
    version="1.0.0",
    description="Nigerian tax calculators, expense audit and compliance engine",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.on_event("startup")
async def _startup() -> None:
    logger.info("NaijaTax backend starting (env={}, tax year {})", settings.APP_ENV, settings.TAX_YEAR)


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {"ok": True, "service": "naijatax"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("naijatax.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
