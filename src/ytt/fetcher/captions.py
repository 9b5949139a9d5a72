"""Caption payload handling: URL normalization and XML segment extraction."""

from __future__ import annotations

import re

from ytt.core.errors import TranscriptNotAvailableError
from ytt.core.models import CaptionTrack, TranscriptSegment

_RE_XML_TRANSCRIPT = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')
_RE_FMT_PARAM = re.compile(r"&fmt=[^&]+$")


def caption_url(track: CaptionTrack, video_id: str, disable_https: bool = False) -> str:
    """Resolve the payload URL for a track.

    A trailing ``fmt`` parameter is dropped so the default XML format is
    served.

    Raises:
        TranscriptNotAvailableError: If the track carries no URL.
    """
    if not track.base_url:
        raise TranscriptNotAvailableError(video_id)
    url = _RE_FMT_PARAM.sub("", track.base_url)
    if disable_https and url.startswith("https://"):
        url = "http://" + url[len("https://") :]
    return url


def _to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return float("nan")


def parse_transcript_xml(payload: str, lang: str | None = None) -> list[TranscriptSegment]:
    """Extract every ``<text start=".." dur="..">..</text>`` element.

    Inner text is kept as-is (no entity decoding); start and duration are
    parsed as floats (NaN when malformed) without unit conversion.
    """
    return [
        TranscriptSegment(
            text=text,
            duration=_to_float(dur),
            offset=_to_float(start),
            lang=lang,
        )
        for start, dur, text in _RE_XML_TRANSCRIPT.findall(payload)
    ]
