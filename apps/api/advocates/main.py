import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from advocates.core import get_settings, limiter
from advocates.routers import ROUTERS
from advocates.services.search import AdvocateSearchError


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    yield


app = FastAPI(
    title="Advocates API",
    description="Search and filter the advocate directory.",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(AdvocateSearchError)
async def advocate_search_error_handler(_request: Request, exc: AdvocateSearchError):
    # Cause is already logged where it was caught; callers only get the safe message
    return JSONResponse(status_code=500, content={"error": str(exc)})


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in ROUTERS:
    app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
