"""Shared data models for ytt."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ConfigDict, TypeAdapter


@dataclass(frozen=True)
class TranscriptSegment:
    """One timed unit of caption text.

    Timing values are copied verbatim from the caption payload, which
    encodes them in seconds.
    """

    text: str
    duration: float
    offset: float
    lang: str | None = None

    __pydantic_config__ = ConfigDict(ser_json_inf_nan="constants")


@dataclass(frozen=True)
class CaptionTrack:
    """A language-tagged pointer to a caption payload, from the player response."""

    language_code: str | None
    base_url: str | None
    name: str = ""
    kind: str | None = None  # "asr" for auto-generated tracks

    @classmethod
    def from_json(cls, data: dict) -> CaptionTrack:
        """Build a track from a raw ``captionTracks`` entry."""
        name = data.get("name")
        if isinstance(name, dict):
            runs = name.get("runs")
            if not isinstance(runs, list):
                runs = []
            label = name.get("simpleText")
            if not isinstance(label, str) or not label:
                label = "".join(
                    run["text"]
                    for run in runs
                    if isinstance(run, dict) and isinstance(run.get("text"), str)
                )
        elif isinstance(name, str):
            label = name
        else:
            label = ""
        return cls(
            language_code=data.get("languageCode"),
            base_url=data.get("baseUrl") or data.get("url"),
            name=label,
            kind=data.get("kind"),
        )


# NaN timings (malformed payload numbers) must survive a cache round trip
_SEGMENT_LIST = TypeAdapter(
    list[TranscriptSegment], config=ConfigDict(ser_json_inf_nan="constants")
)


def dump_segments(segments: list[TranscriptSegment]) -> str:
    """Serialize a segment list to a JSON string."""
    return _SEGMENT_LIST.dump_json(segments).decode("utf-8")


def load_segments(raw: str | bytes) -> list[TranscriptSegment]:
    """Deserialize a JSON segment list.

    Raises:
        pydantic.ValidationError: If ``raw`` is not a valid segment list.
    """
    return _SEGMENT_LIST.validate_json(raw)
