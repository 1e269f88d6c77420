"""Shared test fixtures for youtube_automation tests."""
from __future__ import annotations

import pytest

from youtube_automation.publishing.metrics import Metrics
from youtube_automation.publishing.upload_record import UploadRecord, UploadSnippet
from youtube_automation.storage.models import Sponsorship, Video
from youtube_automation.storage.repository import Repository


@pytest.fixture
def repo(tmp_path):
    """Repository writing its index and manuscripts under a temp dir."""
    return Repository(
        index_path=str(tmp_path / "index.yaml"),
        manuscript_dir=str(tmp_path / "manuscript"),
    )


@pytest.fixture
def metrics():
    """A fresh Metrics instance per test instead of the process-wide one."""
    return Metrics()


@pytest.fixture
def upload_record():
    return UploadRecord(snippet=UploadSnippet(title="Test Upload"))


@pytest.fixture
def full_video():
    """A Video with every field set to a non-default value."""
    return Video(
        name="Kubernetes Operators",
        index=3,
        path="manuscript/kubernetes/kubernetes-operators.yaml",
        category="kubernetes",
        project_name="Crossplane",
        project_url="https://crossplane.io",
        sponsorship=Sponsorship(
            amount="1000",
            emails="sponsor@example.com,ops@example.com",
            blocked="Waiting for contract",
        ),
        publish_date="2025-03-10T16:00",
        delayed=True,
        gist="gists/operators.md",
        code=True,
        head=True,
        screen=True,
        related_videos="https://youtu.be/abc,https://youtu.be/def",
        thumbnails=True,
        diagrams=True,
        screenshots=True,
        location="https://drive.google.com/folder/123",
        tagline="Operators without the pain",
        tagline_ideas="idea one\nidea two",
        other_logos="kubernetes.png",
        title="Stop Writing Kubernetes Operators",
        description="A look at operators.",
        tags="kubernetes,operators,crossplane",
        description_tags="#kubernetes #operators",
        tweet="New video! [YOUTUBE]",
        animations="- Logo: Crossplane",
        thumbnail="thumbnails/operators.png",
        members="alice,bob",
        request_edit=True,
        timecodes="00:00 Intro",
        movie=True,
        slides=True,
        upload_video="videos/operators.mp4",
        video_id="dQw4w9WgXcQ",
        hugo_path="content/posts/operators.md",
        blue_sky_posted=True,
        linked_in_posted=True,
        slack_posted=True,
        youtube_highlight=True,
        youtube_comment=True,
        youtube_comment_reply=True,
        gde=True,
        repo="https://github.com/example/operators",
        notified_sponsors=True,
        language="es",
        audio_language="fr",
        applied_language="es",
        applied_audio_language="fr",
    )
