from __future__ import annotations

"""Video metadata records and their camelCase wire mapping.

The same key names are used for the per-video YAML documents, the index
document and any JSON handed to other tools.
"""

import json
from dataclasses import dataclass, field, fields

# Wire keys that are not a plain lower-camel-case of the attribute name
_WIRE_OVERRIDES = {
    "project_url": "projectURL",
    "youtube_highlight": "youTubeHighlight",
    "youtube_comment": "youTubeComment",
    "youtube_comment_reply": "youTubeCommentReply",
}


def _wire_name(attr: str) -> str:
    if attr in _WIRE_OVERRIDES:
        return _WIRE_OVERRIDES[attr]
    head, *rest = attr.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _coerce(value, default):
    """Coerce a decoded YAML value to the type of the field default."""
    if value is None:
        return default
    if isinstance(default, (bool, int, str)) and isinstance(value, (dict, list)):
        raise ValueError(f"expected a scalar, got {type(value).__name__}")
    if isinstance(default, bool):
        if isinstance(value, str):
            return value.strip().lower() in ("true", "yes", "1")
        return bool(value)
    if isinstance(default, int):
        return int(value)
    if isinstance(default, str):
        return str(value)
    return value


@dataclass
class Sponsorship:
    amount: str = ""
    emails: str = ""  # comma separated
    blocked: str = ""  # reason the sponsorship is blocked, if any

    def email_list(self) -> list[str]:
        return [e.strip() for e in self.emails.split(",") if e.strip()]

    def to_dict(self) -> dict:
        return {"amount": self.amount, "emails": self.emails, "blocked": self.blocked}

    @classmethod
    def from_dict(cls, data: dict | None) -> "Sponsorship":
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"sponsorship must be a mapping, got {type(data).__name__}")
        return cls(
            amount=_coerce(data.get("amount"), ""),
            emails=_coerce(data.get("emails"), ""),
            blocked=_coerce(data.get("blocked"), ""),
        )


@dataclass
class VideoIndex:
    """Lightweight projection of a Video used to list videos without loading them."""

    name: str
    category: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "category": self.category}

    @classmethod
    def from_dict(cls, data: dict) -> "VideoIndex":
        return cls(
            name=_coerce(data.get("name"), ""),
            category=_coerce(data.get("category"), ""),
        )


@dataclass
class Video:
    name: str = ""
    index: int = 0
    path: str = ""
    category: str = ""

    # Initial details
    project_name: str = ""
    project_url: str = ""
    sponsorship: Sponsorship = field(default_factory=Sponsorship)
    publish_date: str = ""
    delayed: bool = False
    gist: str = ""

    # Work progress
    code: bool = False
    head: bool = False
    screen: bool = False
    related_videos: str = ""
    thumbnails: bool = False
    diagrams: bool = False
    screenshots: bool = False
    location: str = ""
    tagline: str = ""
    tagline_ideas: str = ""
    other_logos: str = ""

    # Definition
    title: str = ""
    description: str = ""
    tags: str = ""
    description_tags: str = ""
    tweet: str = ""
    animations: str = ""

    # Post-production
    thumbnail: str = ""
    members: str = ""
    request_edit: bool = False
    timecodes: str = ""
    movie: bool = False
    slides: bool = False

    # Publishing
    upload_video: str = ""  # local video file path
    video_id: str = ""
    hugo_path: str = ""

    # Post-publish
    blue_sky_posted: bool = False
    linked_in_posted: bool = False
    slack_posted: bool = False
    youtube_highlight: bool = False
    youtube_comment: bool = False
    youtube_comment_reply: bool = False
    gde: bool = False
    repo: str = ""
    notified_sponsors: bool = False

    # Requested languages, empty means "use the default"
    language: str = ""
    audio_language: str = ""
    # What was actually sent to YouTube after validation and fallback
    applied_language: str = ""
    applied_audio_language: str = ""

    def get_language(self, default_language: str) -> str:
        """Return the video language, or the default when none is set."""
        return self.language or default_language

    def get_audio_language(self, default_language: str) -> str:
        """Return the video audio language, or the default when none is set."""
        return self.audio_language or default_language

    def used_language_fallback(self) -> bool:
        """True if the applied languages differ from what the video asked for.

        Only meaningful after languages were applied; a video that never went
        through language validation reports False.
        """
        if not self.applied_language and not self.applied_audio_language:
            return False
        return (
            (bool(self.language) and self.language != self.applied_language)
            or (bool(self.audio_language) and self.audio_language != self.applied_audio_language)
        )

    def to_index(self) -> VideoIndex:
        return VideoIndex(name=self.name, category=self.category)

    def to_dict(self) -> dict:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Sponsorship):
                value = value.to_dict()
            data[_wire_name(f.name)] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Video":
        """Build a Video from camelCase keys. Unknown keys are ignored."""
        defaults = cls()
        kwargs = {}
        for f in fields(cls):
            key = _wire_name(f.name)
            if key not in data:
                continue
            if f.name == "sponsorship":
                kwargs[f.name] = Sponsorship.from_dict(data[key])
            else:
                kwargs[f.name] = _coerce(data[key], getattr(defaults, f.name))
        return cls(**kwargs)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "Video":
        return cls.from_dict(json.loads(text))
