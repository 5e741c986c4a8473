"""
Service classes for the Sora video generation demo.
Contains the pluggable video generators and the ProgressStreamer.
"""

import asyncio
import inspect
import logging
import random
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Tuple, Union

from config import (
    GENERATION_FAILED_MESSAGE,
    STAGE_DELAY_MAX,
    STAGE_DELAY_MIN,
    STAGES,
    VIDEO_PLACEHOLDER_URL,
)
from schemas import SSE_DATA_PREFIX, ProgressEvent


class VideoGenerationError(Exception):
    """Raised by a generator when it cannot produce a video for a prompt."""


class VideoGenerator:
    """Produces a video reference for a prompt. Subclasses may be sync or async."""

    def generate(self, prompt: str) -> Union[str, Awaitable[str]]:
        raise NotImplementedError


class PlaceholderVideoGenerator(VideoGenerator):
    """Returns the same sample video for every prompt."""

    def __init__(self, video_url: str = VIDEO_PLACEHOLDER_URL):
        self.video_url = video_url

    def generate(self, prompt: str) -> str:
        if not self.video_url:
            raise VideoGenerationError("No placeholder video URL configured.")
        return self.video_url


def format_sse(event: ProgressEvent) -> str:
    """Frames an event as a server-sent event."""
    return f"{SSE_DATA_PREFIX}{event.to_json()}\n\n"


class ProgressStreamer:
    """Emits the scripted stages for a prompt, then one terminal event."""

    def __init__(
        self,
        generator: Optional[VideoGenerator] = None,
        stages: List[Tuple[int, str]] = STAGES,
        delay_range: Tuple[float, float] = (STAGE_DELAY_MIN, STAGE_DELAY_MAX),
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.generator = generator or PlaceholderVideoGenerator()
        self.stages = stages
        self.delay_min, self.delay_max = delay_range
        self.sleep = sleep
        self.rng = rng or random.Random()

    def _next_delay(self) -> float:
        # random() is in [0, 1), so the delay never reaches delay_max
        return self.delay_min + self.rng.random() * (self.delay_max - self.delay_min)

    async def _generate_video(self, prompt: str) -> str:
        result = self.generator.generate(prompt)
        if inspect.isawaitable(result):
            result = await result
        if not result:
            raise VideoGenerationError("Generator returned an empty video reference.")
        return result

    async def events(self, prompt: str) -> AsyncIterator[ProgressEvent]:
        for progress, message in self.stages:
            yield ProgressEvent.generating(progress, message)
            await self.sleep(self._next_delay())

        try:
            video_url = await self._generate_video(prompt)
        except Exception as e:
            logging.error(f"❌ Video generation failed for prompt '{prompt}': {e}")
            yield ProgressEvent.failed(GENERATION_FAILED_MESSAGE)
            return

        logging.info(f"✅ Video ready for prompt '{prompt}': {video_url}")
        yield ProgressEvent.completed(video_url)

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        async for event in self.events(prompt):
            yield format_sse(event)
