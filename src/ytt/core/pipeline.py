"""Transcript pipeline: resolve, scrape key, query player, fetch and parse captions."""

from __future__ import annotations

from functools import partial

from pydantic import ValidationError

from ytt.core.config import TranscriptConfig, YTTSettings, get_settings
from ytt.core.errors import (
    TooManyRequestsError,
    TranscriptNotAvailableError,
    VideoUnavailableError,
)
from ytt.core.models import CaptionTrack, TranscriptSegment, dump_segments, load_segments
from ytt.fetcher import innertube
from ytt.fetcher.captions import caption_url, parse_transcript_xml
from ytt.fetcher.resolver import retrieve_video_id
from ytt.fetcher.transport import FetchParams, Fetcher, default_fetch
from ytt.utils.cache import CacheStrategy, cache_key
from ytt.utils.console import get_console


def _read_cache(cache: CacheStrategy, key: str) -> list[TranscriptSegment] | None:
    """Cached segments for key, or None on a miss or any read/decode failure."""
    try:
        raw = cache.get(key)
        if not raw:
            return None
        return load_segments(raw)
    except ValidationError:
        get_console().print(f"[dim]Ignoring unreadable cache entry:[/dim] {key}")
    except Exception as e:
        get_console().print(f"[yellow]Cache read failed:[/yellow] {e}")
    return None


class YoutubeTranscript:
    """Fetches transcripts with a fixed configuration.

    Args:
        config: Per-instance overrides. Unset fields fall back to
            ``settings``.
        settings: Process-wide defaults; loaded from the environment and
            TOML files when omitted.
    """

    def __init__(
        self,
        config: TranscriptConfig | None = None,
        settings: YTTSettings | None = None,
    ) -> None:
        self.config = config or TranscriptConfig()
        self.settings = settings or get_settings()

    @property
    def user_agent(self) -> str:
        return self.config.user_agent or self.settings.user_agent

    @property
    def disable_https(self) -> bool:
        if self.config.disable_https is not None:
            return self.config.disable_https
        return self.settings.disable_https

    @property
    def cache_ttl(self) -> int | None:
        if self.config.cache_ttl is not None:
            return self.config.cache_ttl
        return self.settings.cache_ttl

    def _fetcher(self, hook: Fetcher | None) -> Fetcher:
        if hook is not None:
            return hook
        return partial(default_fetch, timeout=self.settings.timeout)

    def _discover_tracks(self, video_id: str) -> list[CaptionTrack]:
        """Watch page -> API key -> player response -> caption tracks."""
        lang = self.config.lang

        page_res = self._fetcher(self.config.video_fetch)(
            FetchParams(
                url=innertube.watch_url(video_id, self.disable_https),
                lang=lang,
                user_agent=self.user_agent,
            )
        )
        if not page_res.is_success:
            raise VideoUnavailableError(video_id)

        page = page_res.text
        innertube.check_bot_challenge(page)
        api_key = innertube.extract_api_key(page, video_id)

        player_res = self._fetcher(self.config.player_fetch)(
            FetchParams(
                url=innertube.player_url(api_key),
                method="POST",
                lang=lang,
                user_agent=self.user_agent,
                headers={"Content-Type": "application/json"},
                body=innertube.player_body(video_id),
            )
        )
        if not player_res.is_success:
            raise VideoUnavailableError(video_id)

        return innertube.parse_caption_tracks(player_res.json(), video_id)

    def list_tracks(self, video: str) -> list[CaptionTrack]:
        """List the caption tracks available for a video, in upstream order.

        Bypasses the cache.
        """
        return self._discover_tracks(retrieve_video_id(video))

    def fetch_transcript(self, video: str) -> list[TranscriptSegment]:
        """Fetch and parse the transcript of a video.

        Args:
            video: An 11-character video ID or a URL containing one.

        Returns:
            Transcript segments in payload order.

        Raises:
            InvalidVideoIdError: ``video`` holds no recognizable ID.
            VideoUnavailableError: Watch page or player request failed.
            TooManyRequestsError: Bot challenge, or HTTP 429 on the captions.
            TranscriptsDisabledError: The video lists no caption tracks.
            TranscriptNotAvailableError: Captions could not be located or
                fetched, or the payload held no segments.
            LanguageNotAvailableError: ``config.lang`` has no matching track.
        """
        video_id = retrieve_video_id(video)
        lang = self.config.lang
        cache = self.config.cache
        key = cache_key(video_id, lang)

        if cache is not None:
            cached = _read_cache(cache, key)
            if cached is not None:
                get_console().print(f"[dim]Transcript found in cache:[/dim] {key}")
                return cached

        tracks = self._discover_tracks(video_id)
        track = innertube.select_track(tracks, lang, video_id)
        get_console().print(
            f"[bold]Caption track:[/bold] {track.language_code}"
            + (" (auto-generated)" if track.kind == "asr" else "")
        )

        transcript_res = self._fetcher(self.config.transcript_fetch)(
            FetchParams(
                url=caption_url(track, video_id, self.disable_https),
                lang=lang,
                user_agent=self.user_agent,
            )
        )
        if not transcript_res.is_success:
            if transcript_res.status_code == 429:
                raise TooManyRequestsError()
            raise TranscriptNotAvailableError(video_id)

        segments = parse_transcript_xml(transcript_res.text, lang or track.language_code)
        if not segments:
            raise TranscriptNotAvailableError(video_id)
        get_console().print(f"[green]Transcript fetched:[/green] {len(segments)} segments")

        if cache is not None:
            try:
                cache.set(key, dump_segments(segments), self.cache_ttl)
            except Exception as e:
                # Cache writes never fail the fetch
                get_console().print(f"[yellow]Cache write failed:[/yellow] {e}")

        return segments

    @classmethod
    def fetch(cls, video: str, config: TranscriptConfig | None = None) -> list[TranscriptSegment]:
        """One-shot fetch without keeping an instance around."""
        return cls(config).fetch_transcript(video)


def fetch_transcript(
    video: str,
    config: TranscriptConfig | None = None,
    **overrides: object,
) -> list[TranscriptSegment]:
    """Fetch a transcript in one call.

    Args:
        video: Video ID or URL.
        config: Full configuration object.
        **overrides: Individual ``TranscriptConfig`` fields (lang="fr",
            cache=..., ...), applied on top of ``config``.
    """
    if overrides:
        base = dict(config) if config is not None else {}
        config = TranscriptConfig(**{**base, **overrides})
    return YoutubeTranscript.fetch(video, config)
