import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from property_income.api import fiscal


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    yield


app = FastAPI(
    title="Revenu foncier imposable API",
    description="Calcul du revenu foncier net imposable (location nue et LMNP, forfait ou réel)",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(fiscal.router, prefix="/api/fiscal", tags=["fiscal"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": "0.1.0"}
