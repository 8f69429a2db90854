from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from peer_review.api.health import router as health_router
from peer_review.api.root import router as root_router
from peer_review.api.periods import router as periods_router
from peer_review.api.admin import router as admin_router
from peer_review.api.auth import router as auth_router
from peer_review.api.reviews import router as reviews_router
from peer_review.api.results import router as results_router
from peer_review.api.directory import router as directory_router
from peer_review.core.config import settings
from peer_review.core.errors import PeerReviewError
from peer_review.core.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

app = FastAPI(title="Peer Review Portal")

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PeerReviewError)
async def peer_review_error_handler(request: Request, exc: PeerReviewError):
    if exc.status_code < 500:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Missing or mistyped fields are plain 400s, same as core validation failures
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid request",
            "code": "validation_error",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


app.include_router(root_router)
app.include_router(health_router)
app.include_router(periods_router)
app.include_router(admin_router)
app.include_router(auth_router)
app.include_router(reviews_router)
app.include_router(results_router)
app.include_router(directory_router)
