"""Error taxonomy for transcript retrieval.

Every failure in the pipeline is terminal and raised at the point of
detection; nothing here is retried.
"""

from __future__ import annotations


class YoutubeTranscriptError(Exception):
    """Base class for all ytt errors."""


class TooManyRequestsError(YoutubeTranscriptError):
    def __init__(self) -> None:
        super().__init__(
            "YouTube is receiving too many requests from your IP address. "
            "Please try again later or use a proxy. If the issue persists, "
            "consider reducing the frequency of requests."
        )


class VideoUnavailableError(YoutubeTranscriptError):
    def __init__(self, video_id: str) -> None:
        self.video_id = video_id
        super().__init__(
            f'The video with ID "{video_id}" is no longer available or has been removed. '
            "Please check the video URL or ID and try again."
        )


class TranscriptsDisabledError(YoutubeTranscriptError):
    def __init__(self, video_id: str) -> None:
        self.video_id = video_id
        super().__init__(
            f'Transcripts are disabled for the video with ID "{video_id}". '
            "This may be due to the video owner disabling captions or the video "
            "not supporting transcripts."
        )


class TranscriptNotAvailableError(YoutubeTranscriptError):
    def __init__(self, video_id: str) -> None:
        self.video_id = video_id
        super().__init__(
            f'No transcripts are available for the video with ID "{video_id}". '
            "This may be because the video does not have captions or the captions "
            "are not accessible."
        )


class LanguageNotAvailableError(YoutubeTranscriptError):
    """The requested language has no caption track.

    Attributes:
        lang: The requested language code.
        available_langs: Language codes of every listed track, in order.
        video_id: The resolved video identifier.
    """

    def __init__(self, lang: str, available_langs: list[str], video_id: str) -> None:
        self.lang = lang
        self.available_langs = list(available_langs)
        self.video_id = video_id
        super().__init__(
            f'No transcripts are available in "{lang}" for the video with ID "{video_id}". '
            f"Available languages: {', '.join(self.available_langs)}. "
            "Please try a different language."
        )


class InvalidVideoIdError(YoutubeTranscriptError, ValueError):
    def __init__(self) -> None:
        super().__init__(
            "Invalid YouTube video ID or URL. Please provide a valid video ID or URL. "
            'Example: "dQw4w9WgXcQ" or "https://www.youtube.com/watch?v=dQw4w9WgXcQ".'
        )
