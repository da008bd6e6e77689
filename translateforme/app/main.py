import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .errors import TranslationError
from .routers import translate

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(
    title="TranslateForMe API",
    version="0.1.0",
    description="Translate text between a fixed set of languages through a chat-completion model",
)


@app.exception_handler(TranslationError)
async def translation_error_handler(_: Request, exc: TranslationError) -> JSONResponse:
    """Every translation failure is shown to the user as ``detail``; none is fatal."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/health", include_in_schema=False)
@app.get("/api/v1/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
def translate_form() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html")


app.include_router(translate.router, prefix="/api/v1")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
