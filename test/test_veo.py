# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
import sys
from collections import OrderedDict
from unittest.mock import MagicMock, patch

import pytest
from google.genai import types

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common import media_store
from common.error_handling import GenerationError
from models.requests import GenerateVideoParams, GenerationMode, MediaReference, Resolution
from models.veo import generate_video

VIDEO_URI = "https://generativelanguage.googleapis.com/v1beta/files/abc123:download?alt=media"


@pytest.fixture(autouse=True)
def empty_media_store(monkeypatch):
    monkeypatch.setattr(media_store, "_sessions", OrderedDict())
    monkeypatch.setattr(media_store, "_owners", {})


def _done_operation(**response_kwargs):
    if "generated_videos" not in response_kwargs:
        response_kwargs["generated_videos"] = [
            types.GeneratedVideo(video=types.Video(uri=VIDEO_URI, mime_type="video/mp4"))
        ]
    return types.GenerateVideosOperation(
        name="operations/xyz",
        done=True,
        response=types.GenerateVideosResponse(**response_kwargs),
    )


def _mock_client(operation=None):
    client = MagicMock()
    client.models.generate_videos.return_value = operation or _done_operation()
    client.files.download.return_value = b"mp4-bytes"
    return client


def test_text_to_video_success():
    client = _mock_client()
    params = GenerateVideoParams(
        prompt="a river at dawn",
        mode=GenerationMode.TEXT_TO_VIDEO,
        model="3.1-fast-preview",
        resolution=Resolution.P720,
    )

    result = generate_video(params, api_key="key", client=client)

    kwargs = client.models.generate_videos.call_args.kwargs
    assert kwargs["model"] == "veo-3.1-fast-generate-preview"
    assert kwargs["prompt"] == "a river at dawn"
    assert kwargs["image"] is None
    assert kwargs["video"] is None
    assert kwargs["config"].number_of_videos == 1
    assert kwargs["config"].resolution == "720p"
    assert kwargs["config"].aspect_ratio == "16:9"

    assert result.uri == VIDEO_URI
    assert result.blob == b"mp4-bytes"
    assert result.video.uri == VIDEO_URI
    assert result.mime_type == "video/mp4"
    assert result.object_url.startswith(media_store.OBJECT_URL_PREFIX)
    assert media_store.get_object(result.object_url).data == b"mp4-bytes"


@patch("models.veo.time.sleep")
def test_polls_until_operation_is_done(mock_sleep):
    pending = types.GenerateVideosOperation(name="operations/xyz", done=False)
    client = _mock_client(operation=pending)
    client.operations.get.side_effect = [pending, _done_operation()]

    result = generate_video(GenerateVideoParams(prompt="waves"), api_key="key", client=client)

    assert client.operations.get.call_count == 2
    assert mock_sleep.call_count == 2
    assert result.uri == VIDEO_URI


def test_frames_to_video_sends_start_frame_bytes():
    frame_url = media_store.create_object_url(b"png-bytes", "image/png")
    client = _mock_client()
    params = GenerateVideoParams(
        prompt="the basket slowly rotates",
        mode=GenerationMode.FRAMES_TO_VIDEO,
        start_frame=MediaReference(uri=frame_url, mime_type="image/png"),
    )

    generate_video(params, api_key="key", client=client)

    image = client.models.generate_videos.call_args.kwargs["image"]
    assert image.image_bytes == b"png-bytes"
    assert image.mime_type == "image/png"


def test_frames_to_video_with_expired_start_frame():
    client = _mock_client()
    params = GenerateVideoParams(
        prompt="x",
        mode=GenerationMode.FRAMES_TO_VIDEO,
        start_frame=MediaReference(uri="/blob/gone", mime_type="image/png"),
    )
    with pytest.raises(GenerationError, match="no longer available"):
        generate_video(params, api_key="key", client=client)
    client.models.generate_videos.assert_not_called()


def test_extend_video_sends_prior_video_handle():
    client = _mock_client()
    params = GenerateVideoParams(
        prompt="the boat drifts away",
        mode=GenerationMode.EXTEND_VIDEO,
        input_video=MediaReference(uri=VIDEO_URI, mime_type="video/mp4"),
    )

    generate_video(params, api_key="key", client=client)

    kwargs = client.models.generate_videos.call_args.kwargs
    assert kwargs["video"].uri == VIDEO_URI
    assert kwargs["config"].aspect_ratio is None


def test_unsupported_model_or_mode():
    client = _mock_client()
    with pytest.raises(GenerationError, match="Unsupported VEO model"):
        generate_video(GenerateVideoParams(prompt="x", model="1.0"), api_key="key", client=client)

    params = GenerateVideoParams(
        mode=GenerationMode.EXTEND_VIDEO,
        model="2.0",
        input_video=MediaReference(uri=VIDEO_URI, mime_type="video/mp4"),
    )
    with pytest.raises(GenerationError, match="not supported"):
        generate_video(params, api_key="key", client=client)
    client.models.generate_videos.assert_not_called()


def test_provider_message_is_kept_verbatim():
    client = _mock_client()
    client.models.generate_videos.side_effect = Exception(
        "404 NOT_FOUND. Requested entity was not found."
    )
    with pytest.raises(GenerationError) as excinfo:
        generate_video(GenerateVideoParams(prompt="x"), api_key="stale", client=client)
    assert excinfo.value.message == "404 NOT_FOUND. Requested entity was not found."


def test_transport_failure_is_a_generation_error():
    client = _mock_client()
    client.models.generate_videos.side_effect = ConnectionError("Connection reset by peer")
    with pytest.raises(GenerationError, match="Connection reset by peer"):
        generate_video(GenerateVideoParams(prompt="x"), api_key="key", client=client)


def test_operation_error():
    failed = types.GenerateVideosOperation(
        name="operations/xyz",
        done=True,
        error={"code": 429, "message": "Quota exceeded for veo requests."},
    )
    client = _mock_client(operation=failed)
    with pytest.raises(GenerationError) as excinfo:
        generate_video(GenerateVideoParams(prompt="x"), api_key="key", client=client)
    assert excinfo.value.message == "Quota exceeded for veo requests."


def test_content_filtered():
    client = _mock_client(
        operation=_done_operation(
            generated_videos=[],
            rai_media_filtered_count=1,
            rai_media_filtered_reasons=["The prompt violates the usage guidelines."],
        )
    )
    with pytest.raises(GenerationError, match="Content Filtered: The prompt violates"):
        generate_video(GenerateVideoParams(prompt="x"), api_key="key", client=client)


def test_empty_response():
    client = _mock_client(operation=_done_operation(generated_videos=[]))
    with pytest.raises(GenerationError, match="no video was found"):
        generate_video(GenerateVideoParams(prompt="x"), api_key="key", client=client)
    client.files.download.assert_not_called()


@patch("models.veo.genai.Client")
def test_client_is_created_with_api_key(mock_client_cls):
    mock_client_cls.return_value = _mock_client()
    generate_video(GenerateVideoParams(prompt="x"), api_key="secret-key")
    mock_client_cls.assert_called_once_with(api_key="secret-key")
