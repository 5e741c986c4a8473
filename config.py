"""
Configuration file for the Sora video generation demo.
Contains all global constants and the scripted generation stages.
"""

import os

# --- Constants ---
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
TEMPLATES_DIR = os.path.join(PROJECT_ROOT, "routers", "templates")
INDEX_PAGE = os.path.join(TEMPLATES_DIR, "index.html")

API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
GENERATE_API_URL = os.getenv("GENERATE_API_URL", f"http://{API_HOST}:{API_PORT}/api/generate")

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
).split(",")

# Public domain sample returned in place of a real render
VIDEO_PLACEHOLDER_URL = os.getenv(
    "VIDEO_PLACEHOLDER_URL",
    "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4",
)

# Seconds to wait after each stage, drawn uniformly from [min, max)
STAGE_DELAY_MIN = float(os.getenv("STAGE_DELAY_MIN", "0.8"))
STAGE_DELAY_MAX = float(os.getenv("STAGE_DELAY_MAX", "1.2"))

GENERATION_FAILED_MESSAGE = "Failed to generate video"

# --- Generation Script ---

STAGES = [
    (10, "Analyzing prompt..."),
    (25, "Generating scene layout..."),
    (40, "Creating visual elements..."),
    (55, "Applying motion dynamics..."),
    (70, "Rendering frames..."),
    (85, "Adding transitions..."),
    (95, "Finalizing video..."),
]

# --- Examples ---
EXAMPLE_PROMPTS = [
    "A futuristic city with flying cars at night, neon lights reflecting on wet streets",
    "A majestic dragon soaring through clouds at sunset with golden light",
    "An underwater scene with colorful coral reefs and tropical fish swimming gracefully",
]
