"""
FastAPI layer exposing the background fill pipeline.

Endpoints:
 - GET /
 - GET /health
 - GET /api/project-types
 - GET /api/background-count
 - POST /api/background
 - POST /api/tint
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .assets import list_backgrounds
from .imaging import to_data_url
from .pipeline import tint_image_bytes, update_background_bytes

settings = config.get_settings()
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title="Background Fill Service", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


def _missing_upload(upload: Optional[UploadFile]) -> bool:
    return upload is None or not upload.filename


def _error(message: str, status_code: int, details: Optional[str] = None) -> JSONResponse:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
    if any(tuple(err["loc"])[-1:] == ("image",) for err in exc.errors()):
        return _error("No file uploaded", 400, details=details)
    return _error("Invalid request", 400, details=details)


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return _error("Request failed", exc.status_code, details=str(exc.detail))


@app.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/project-types")
def project_types():
    return {"projectTypes": config.get_settings().project_types}


@app.get("/api/background-count")
def background_count(projectType: Optional[str] = None):
    project_type = projectType or config.get_settings().default_project_type
    backgrounds = list_backgrounds(project_type)
    return {"projectType": project_type, "backgrounds": backgrounds, "count": len(backgrounds)}


@app.post("/api/background")
def update_background(
    image: Optional[UploadFile] = File(None),
    projectType: Optional[str] = Form(None),
    backgroundChoice: Optional[str] = Form(None),
):
    if _missing_upload(image):
        return _error("No file uploaded", 400)

    try:
        png_bytes = update_background_bytes(
            image.file.read(),
            filename=image.filename,
            project_type=projectType,
            background_choice=backgroundChoice,
        )
    except Exception as exc:  # noqa: BLE001
        logger.exception("Image processing failed: %s", exc)
        return _error("Image processing failed", 500, details=str(exc))

    return {"processedImageUrl": to_data_url(png_bytes)}


@app.post("/api/tint")
def tint(image: Optional[UploadFile] = File(None)):
    if _missing_upload(image):
        return _error("No file uploaded", 400)

    try:
        png_bytes = tint_image_bytes(image.file.read())
    except Exception as exc:  # noqa: BLE001
        logger.exception("Tinting failed: %s", exc)
        return _error("Tinting failed", 500, details=str(exc))

    return {"processedImageUrl": to_data_url(png_bytes)}


def run() -> None:
    import uvicorn

    current = config.get_settings()
    uvicorn.run(app, host=current.host, port=current.port)
