"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the student records backend.
Controllers are intentionally thin: they accept requests, delegate to
`StudentService`, and map its error taxonomy onto status codes.

Endpoints implemented:
- GET /
- GET /health
- GET /api/v1/students/
- POST /api/v1/students/
- GET /api/v1/students/{student_id}
"""

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, List

import uvicorn
from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from sqlmodel import Session

from . import services
from .config import settings
from .database import get_session, init_store
from .exceptions import InvalidIdentityError, StoreUnavailableError, ValidationError
from .schemas import StudentOut

logger = logging.getLogger("student_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A store that cannot be opened aborts startup; no partial availability.
    try:
        init_store()
    except StoreUnavailableError:
        logger.error("startup_failed store unavailable, not accepting requests")
        raise
    logger.info("startup_complete env=%s", settings.ENV)
    yield
    logger.info("shutdown")


app = FastAPI(title="Student Records API", lifespan=lifespan)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    if request.url.path.startswith("/api"):
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
    return response


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    logger.error("store_unavailable path=%s error=%s", request.url.path, exc.__cause__ or exc.message)
    return JSONResponse(status_code=503, content={"detail": "store unavailable"})


@app.get("/", response_class=PlainTextResponse)
def home():
    """Liveness text response."""
    return "Hello World!"


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}


@app.get("/api/v1/students/", response_model=List[StudentOut], response_model_exclude_none=True)
def list_students(db: Session = Depends(get_session)):
    """List every stored student. The order is whatever the store returns."""
    return services.StudentService(db).list_all()


@app.post("/api/v1/students/", status_code=201, response_model=StudentOut, response_model_exclude_none=True)
def create_student(payload: Any = Body(...), db: Session = Depends(get_session)):
    """Create a student from a camelCase JSON document.

    Returns the stored document including its newly assigned `id`.
    Validation failures produce a 422 with one entry per offending field.
    """
    try:
        return services.StudentService(db).create(payload)
    except ValidationError as e:
        return JSONResponse(status_code=422, content={"detail": e.message, "errors": e.details})


@app.get("/api/v1/students/{student_id}", response_model=StudentOut, response_model_exclude_none=True)
def get_student(student_id: str, db: Session = Depends(get_session)):
    """Fetch one student by identity; 404 when no such student exists."""
    try:
        student = services.StudentService(db).get_by_id(student_id)
    except InvalidIdentityError as e:
        raise HTTPException(status_code=400, detail=e.message)
    if student is None:
        raise HTTPException(status_code=404, detail="student not found")
    return student


def serve():
    """Run the API with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    serve()
