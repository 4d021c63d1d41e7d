#!/usr/bin/env python3

"""
TradeBuddy Web Service
Parses pasted broker confirmations and assesses trade risk over a JSON API.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from tradebuddy import __version__
from tradebuddy.config import get_settings
from tradebuddy.routers import analysis, health

settings = get_settings()

# Configure logging
logger.add(
    f"{settings.log_dir}/tradebuddy_{{time}}.log",
    rotation="1 day",
    retention="7 days",
    level=settings.log_level,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting TradeBuddy {__version__}")
    yield
    logger.info("TradeBuddy stopped")


app = FastAPI(
    title="TradeBuddy",
    description="Broker confirmation parsing and trade risk assessment",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(health.router)
app.include_router(analysis.router)


if __name__ == "__main__":
    logger.info(f"Starting TradeBuddy on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
