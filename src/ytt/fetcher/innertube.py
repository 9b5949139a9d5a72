"""Innertube helpers: API-key scrape, player request, caption-track discovery.

The watch page embeds the Innertube API key; the ``player`` endpoint,
called as the ANDROID client, lists the available caption tracks. All
lookups are best-effort: the upstream shapes are undocumented.
"""

from __future__ import annotations

import json
import re

from ytt.core.errors import (
    LanguageNotAvailableError,
    TooManyRequestsError,
    TranscriptNotAvailableError,
    TranscriptsDisabledError,
)
from ytt.core.models import CaptionTrack

WATCH_HOST = "www.youtube.com"
PLAYER_ENDPOINT = "https://www.youtube.com/youtubei/v1/player"
CLIENT_NAME = "ANDROID"
CLIENT_VERSION = "20.10.38"

RECAPTCHA_MARKER = 'class="g-recaptcha"'

_RE_API_KEY = re.compile(r'"INNERTUBE_API_KEY":"([^"]+)"')
_RE_API_KEY_ESCAPED = re.compile(r'INNERTUBE_API_KEY\\":\\"([^\\"]+)\\"')


def watch_url(video_id: str, disable_https: bool = False) -> str:
    protocol = "http" if disable_https else "https"
    return f"{protocol}://{WATCH_HOST}/watch?v={video_id}"


def check_bot_challenge(page: str) -> None:
    """Raise TooManyRequestsError if the page is a recaptcha challenge."""
    if RECAPTCHA_MARKER in page:
        raise TooManyRequestsError()


def extract_api_key(page: str, video_id: str) -> str:
    """Find the Innertube API key in the watch page HTML.

    Both the plain JSON form and the backslash-escaped form (key embedded
    in a JS string literal) are recognized.

    Raises:
        TranscriptNotAvailableError: If no key is present.
    """
    match = _RE_API_KEY.search(page) or _RE_API_KEY_ESCAPED.search(page)
    if match is None:
        raise TranscriptNotAvailableError(video_id)
    return match.group(1)


def player_url(api_key: str) -> str:
    return f"{PLAYER_ENDPOINT}?key={api_key}"


def player_body(video_id: str) -> str:
    """JSON request body identifying as the ANDROID client."""
    return json.dumps(
        {
            "context": {
                "client": {
                    "clientName": CLIENT_NAME,
                    "clientVersion": CLIENT_VERSION,
                },
            },
            "videoId": video_id,
        }
    )


def _get(data: object, key: str) -> object:
    return data.get(key) if isinstance(data, dict) else None


def parse_caption_tracks(player: object, video_id: str) -> list[CaptionTrack]:
    """Extract the caption track list from a player response.

    The tracklist renderer is looked up under ``captions`` first, then at
    the top level. Classification when it cannot be found:

    * ``captions`` or the renderer missing: disabled if the video is
      playable (``playabilityStatus.status == "OK"``), otherwise not
      available, since the two cannot be told apart.
    * renderer present but ``captionTracks`` empty or not a list: disabled.
    """
    captions = _get(player, "captions")
    tracklist = _get(captions, "playerCaptionsTracklistRenderer")
    if tracklist is None:
        tracklist = _get(player, "playerCaptionsTracklistRenderer")

    if captions is None or tracklist is None:
        if _get(_get(player, "playabilityStatus"), "status") == "OK":
            raise TranscriptsDisabledError(video_id)
        raise TranscriptNotAvailableError(video_id)

    tracks = _get(tracklist, "captionTracks")
    if not isinstance(tracks, list) or not tracks:
        raise TranscriptsDisabledError(video_id)

    return [CaptionTrack.from_json(t) for t in tracks if isinstance(t, dict)]


def select_track(tracks: list[CaptionTrack], lang: str | None, video_id: str) -> CaptionTrack:
    """Pick the track matching ``lang`` exactly, or the first one if no language is set.

    Raises:
        LanguageNotAvailableError: If ``lang`` is set and no track matches.
    """
    if not lang:
        if not tracks:
            raise TranscriptsDisabledError(video_id)
        return tracks[0]

    for track in tracks:
        if track.language_code == lang:
            return track

    available = [t.language_code for t in tracks if t.language_code]
    raise LanguageNotAvailableError(lang, available, video_id)
