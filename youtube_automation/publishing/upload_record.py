from __future__ import annotations

"""Outbound video resource in the shape the YouTube Data API expects.

Only the parts this project fills in are modelled. The API client that sends
it lives outside this package.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class UploadSnippet:
    title: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    category_id: str = "28"  # Science & Technology
    default_language: str = ""
    default_audio_language: str = ""

    def to_dict(self) -> dict:
        body = {
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "categoryId": self.category_id,
        }
        if self.default_language:
            body["defaultLanguage"] = self.default_language
        if self.default_audio_language:
            body["defaultAudioLanguage"] = self.default_audio_language
        return body


@dataclass
class UploadRecord:
    snippet: Optional[UploadSnippet] = None
    status: dict = field(default_factory=lambda: {"privacyStatus": "private"})

    def ensure_snippet(self) -> UploadSnippet:
        if self.snippet is None:
            self.snippet = UploadSnippet()
        return self.snippet

    def set_language(self, language: str):
        self.ensure_snippet().default_language = language

    def set_audio_language(self, language: str):
        self.ensure_snippet().default_audio_language = language

    def to_request_body(self) -> dict:
        """Body for videos.insert / videos.update."""
        return {"snippet": self.ensure_snippet().to_dict(), "status": dict(self.status)}
