"""
Pydantic models for the video generation stream.
"""

import time
import uuid
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Status = Literal["generating", "completed", "failed"]
TERMINAL_STATUSES = ("completed", "failed")
SSE_DATA_PREFIX = "data: "


class GenerateRequest(BaseModel):
    """Request model for starting a generation stream."""
    prompt: str = ""


class ProgressEvent(BaseModel):
    """One frame of the generation stream."""
    model_config = ConfigDict(populate_by_name=True)

    progress: int = Field(ge=0, le=100)
    status: Status
    message: Optional[str] = None
    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    error: Optional[str] = None

    @classmethod
    def generating(cls, progress: int, message: str) -> "ProgressEvent":
        return cls(progress=progress, status="generating", message=message)

    @classmethod
    def completed(cls, video_url: str) -> "ProgressEvent":
        return cls(progress=100, status="completed", video_url=video_url)

    @classmethod
    def failed(cls, error: str) -> "ProgressEvent":
        return cls(progress=0, status="failed", error=error)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ExamplesResponse(BaseModel):
    """Response model for the example prompt shortcuts."""
    examples: List[str]


class GenerationRecord(BaseModel):
    """Client-side state for one generation request."""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    prompt: str
    status: Status = "generating"
    progress: int = 0
    message: Optional[str] = None
    video_url: Optional[str] = None
    error: Optional[str] = None
    timestamp: float = Field(default_factory=time.time)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def apply(self, event: ProgressEvent) -> bool:
        """
        Copies the event's fields onto the record.
        Returns False (and changes nothing) once the record is terminal.
        """
        if self.is_terminal:
            return False
        self.progress = event.progress
        self.status = event.status
        if event.message is not None:
            self.message = event.message
        if event.video_url is not None:
            self.video_url = event.video_url
        if event.error is not None:
            self.error = event.error
        return True

    def mark_failed(self):
        if not self.is_terminal:
            self.status = "failed"
