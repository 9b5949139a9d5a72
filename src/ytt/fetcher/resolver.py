"""Resolve user input (raw ID or URL) to an 11-character video identifier."""

from __future__ import annotations

import re

from ytt.core.errors import InvalidVideoIdError

VIDEO_ID_LENGTH = 11

_RE_VIDEO_ID = re.compile(
    r"(?:v=|/|v/|embed/|watch\?.*v=|youtu\.be/|/v/|e/|watch\?.*vi?=|/embed/|/v/|vi?/"
    r"|watch\?.*vi?=|youtu\.be/|/vi?/|/e/)([a-zA-Z0-9_-]{11})",
    re.IGNORECASE,
)


def retrieve_video_id(video: str) -> str:
    """Return the video identifier contained in ``video``.

    Any 11-character string is taken as an identifier as-is. Otherwise
    the first 11-character token following a known URL shape
    (``watch?v=``, ``youtu.be/``, ``embed/``, ...) is returned. No case or
    whitespace normalization is performed.

    Raises:
        InvalidVideoIdError: If neither form matches.
    """
    if len(video) == VIDEO_ID_LENGTH:
        return video

    match = _RE_VIDEO_ID.search(video)
    if match:
        return match.group(1)
    raise InvalidVideoIdError()
