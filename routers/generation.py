"""
Router for video generation endpoints.
Handles the progress stream, example prompts and the demo page.
"""

import logging
import os
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, StreamingResponse

from config import EXAMPLE_PROMPTS, INDEX_PAGE
from schemas import ExamplesResponse, GenerateRequest
from services import ProgressStreamer

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


# Create the router
router = APIRouter(tags=["generation"])


def get_streamer() -> ProgressStreamer:
    """Dependency that picks the video generator behind the stream."""
    return ProgressStreamer()


@router.post("/api/generate")
async def generate(request: GenerateRequest, streamer: ProgressStreamer = Depends(get_streamer)):
    """
    Streams scripted progress events for the prompt,
    ending with the video URL or a failure event.
    """
    logging.info(f"✨ Generation started for prompt: '{request.prompt}'")
    return StreamingResponse(
        streamer.stream(request.prompt),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.get("/api/examples", response_model=ExamplesResponse)
async def get_examples():
    """Example prompts offered as shortcuts on the page."""
    return {"examples": EXAMPLE_PROMPTS}


@router.get("/")
async def index():
    if not os.path.exists(INDEX_PAGE):
        raise HTTPException(status_code=404, detail="Page not found.")
    return FileResponse(INDEX_PAGE, media_type="text/html")
