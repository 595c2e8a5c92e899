# routers/analyze.py
from fastapi import APIRouter, Depends, Request

from dependencies import get_inference_client, get_usage_tracker
from models.analyze_model import AnalysisResult, StatusResponse
from services.analyze_service import analyze_entry, usage_status
from services.errors import TextRequiredError
from services.inference_client import HuggingFaceClient
from services.usage_tracker import UsageTracker

router = APIRouter(prefix="", tags=["analyze"])


async def _read_text(request: Request) -> str:
    # Body is parsed by hand: a missing/odd `text` must give our 400, not a 422.
    try:
        body = await request.json()
    except ValueError:
        raise TextRequiredError()
    text = body.get("text") if isinstance(body, dict) else None
    if not isinstance(text, str) or not text:
        raise TextRequiredError()
    return text


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(
    request: Request,
    tracker: UsageTracker = Depends(get_usage_tracker),
    client: HuggingFaceClient = Depends(get_inference_client),
):
    text = await _read_text(request)
    return await analyze_entry(text, tracker, client)


@router.get("/status", response_model=StatusResponse)
def status(tracker: UsageTracker = Depends(get_usage_tracker)):
    return usage_status(tracker)
