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

import pytest

# Setup sys.path to allow imports from the parent directory.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config.default import Default
from models.requests import GenerateVideoParams, GenerationMode, MediaReference, Resolution
from models.veo import generate_video

config = Default()

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not config.GEMINI_API_KEY, reason="GEMINI_API_KEY is not set"),
]


def test_text_to_video_then_extend():
    """Generates a 720p clip and extends it with the returned handle."""
    params = GenerateVideoParams(
        prompt="a river at dawn, mist over the water, cinematic",
        mode=GenerationMode.TEXT_TO_VIDEO,
        resolution=Resolution.P720,
    )

    print(f"\nStarting text to video with {params.model}...")
    result = generate_video(params, api_key=config.GEMINI_API_KEY)

    assert result.blob
    assert result.uri
    assert result.object_url.startswith("/blob/")
    print(f"SUCCESS: video generated at {result.uri}")

    extend_params = GenerateVideoParams(
        prompt="a small fishing boat drifts into view",
        mode=GenerationMode.EXTEND_VIDEO,
        model=params.model,
        resolution=Resolution.P720,
        input_video=MediaReference(uri=result.uri, mime_type=result.mime_type),
    )
    extended = generate_video(extend_params, api_key=config.GEMINI_API_KEY)

    assert extended.blob
    print(f"SUCCESS: video extended at {extended.uri}")


if __name__ == "__main__":
    pytest.main([__file__, "-m", "integration", "-s"])
