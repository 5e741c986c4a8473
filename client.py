"""
Python client for the generation stream.
Tracks every submitted prompt as a GenerationRecord and updates it
as progress events arrive.
"""

import argparse
import json
import logging
import requests
from typing import Callable, Dict, Iterator, List, Optional

from config import GENERATE_API_URL
from schemas import SSE_DATA_PREFIX, GenerationRecord, ProgressEvent


class GenerationInProgressError(Exception):
    """Raised when a prompt is submitted while another one is still generating."""


def parse_sse_line(line: str) -> Optional[ProgressEvent]:
    """Returns the event carried by a `data: ` line, or None for any other line."""
    if not line.startswith(SSE_DATA_PREFIX):
        return None
    return ProgressEvent.model_validate(json.loads(line[len(SSE_DATA_PREFIX):]))


class GenerationClient:
    """Submits prompts and keeps the resulting records, most recent first."""

    def __init__(self, api_url: str = GENERATE_API_URL, session: Optional[requests.Session] = None, timeout: float = 60):
        self.api_url = api_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self._records: Dict[str, GenerationRecord] = {}
        self._order: List[str] = []

    @property
    def records(self) -> List[GenerationRecord]:
        return [self._records[record_id] for record_id in self._order]

    @property
    def is_generating(self) -> bool:
        return any(record.status == "generating" for record in self._records.values())

    def get(self, record_id: str) -> Optional[GenerationRecord]:
        return self._records.get(record_id)

    def _create_record(self, prompt: str) -> GenerationRecord:
        record = GenerationRecord(prompt=prompt)
        self._records[record.id] = record
        self._order.insert(0, record.id)
        return record

    def _read_events(self, prompt: str) -> Iterator[ProgressEvent]:
        with self.session.post(self.api_url, json={"prompt": prompt}, stream=True, timeout=self.timeout) as response:
            response.raise_for_status()
            for raw_line in response.iter_lines():
                line = raw_line.decode("utf-8") if isinstance(raw_line, bytes) else raw_line
                event = parse_sse_line(line)
                if event is not None:
                    yield event

    def submit(self, prompt: str, on_event: Optional[Callable[[GenerationRecord, ProgressEvent], None]] = None) -> GenerationRecord:
        """
        Starts a generation and consumes its stream until it ends.
        Transport errors mark the record as failed instead of raising.
        Errors raised by `on_event` propagate to the caller.
        """
        if not prompt or not prompt.strip():
            raise ValueError("Prompt must not be empty.")
        if self.is_generating:
            raise GenerationInProgressError("Another generation is still in progress.")

        record = self._create_record(prompt)
        logging.info(f"📝 Submitting generation {record.id} for prompt: '{prompt}'")

        events = self._read_events(prompt)
        try:
            while True:
                try:
                    event = next(events)
                except StopIteration:
                    break
                except (requests.RequestException, ValueError) as e:
                    logging.warning(f"Generation {record.id} lost its stream: {e}")
                    record.mark_failed()
                    break
                if record.apply(event) and on_event:
                    on_event(record, event)
        finally:
            events.close()
            if not record.is_terminal:
                logging.warning(f"Generation {record.id} ended without a final event.")
                record.mark_failed()

        logging.info(f"Generation {record.id} finished with status '{record.status}'")
        return record


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a video from a text prompt.")
    parser.add_argument("prompt", help="Description of the video to create")
    parser.add_argument("--url", default=GENERATE_API_URL, help="Generation endpoint")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    def show(record, event):
        if event.status == "generating":
            print(f"[{event.progress:3d}%] {event.message}")

    client = GenerationClient(api_url=args.url)
    record = client.submit(args.prompt, on_event=show)
    if record.status == "completed":
        print(f"Video ready: {record.video_url}")
        return 0
    print("Generation failed")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
