# main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routers import analyze
from services.errors import TextRequiredError
from services.settings import CORS_ORIGINS, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Journal Insight API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze.router)


@app.exception_handler(TextRequiredError)
async def text_required_handler(request: Request, exc: TextRequiredError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.get("/health")
def health():
    return {"ok": True}
