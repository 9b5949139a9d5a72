"""ytt: fetch YouTube caption transcripts through the Innertube API."""

__version__ = "0.1.0"

from ytt.core.config import TranscriptConfig, YTTSettings, load_settings
from ytt.core.errors import (
    InvalidVideoIdError,
    LanguageNotAvailableError,
    TooManyRequestsError,
    TranscriptNotAvailableError,
    TranscriptsDisabledError,
    VideoUnavailableError,
    YoutubeTranscriptError,
)
from ytt.core.models import CaptionTrack, TranscriptSegment
from ytt.core.pipeline import YoutubeTranscript, fetch_transcript
from ytt.fetcher.resolver import retrieve_video_id
from ytt.fetcher.transport import FetchParams, Fetcher, default_fetch
from ytt.utils.cache import CacheStrategy, InMemoryCache

__all__ = [
    "CacheStrategy",
    "CaptionTrack",
    "FetchParams",
    "Fetcher",
    "InMemoryCache",
    "InvalidVideoIdError",
    "LanguageNotAvailableError",
    "TooManyRequestsError",
    "TranscriptConfig",
    "TranscriptNotAvailableError",
    "TranscriptSegment",
    "TranscriptsDisabledError",
    "VideoUnavailableError",
    "YTTSettings",
    "YoutubeTranscript",
    "YoutubeTranscriptError",
    "default_fetch",
    "fetch_transcript",
    "load_settings",
    "retrieve_video_id",
]
