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

from dataclasses import field

import mesop as me

from config.default import Default
from config.products import DEFAULT_CATEGORY_ID
from models.requests import GenerationMode, Resolution
from workflows.video_studio.backend import StudioState


@me.stateclass
class PageState:
    """Mesop Page State"""

    # pylint: disable=E3701:invalid-field-call

    # Video studio controller state
    studio: StudioState = field(default_factory=StudioState)

    # Prompt form
    prompt: str = ""
    prompt_textarea_key: int = 0
    mode: str = GenerationMode.TEXT_TO_VIDEO.value
    model: str = field(default_factory=lambda: Default().VEO_MODEL_ID)
    aspect_ratio: str = "16:9"
    resolution: str = Resolution.P720.value
    start_frame_uri: str = ""
    start_frame_mime_type: str = ""
    input_video_uri: str = ""
    input_video_mime_type: str = ""
    form_error: str = ""

    # API key dialog
    api_key_input: str = ""

    # Catalog
    active_category: str = DEFAULT_CATEGORY_ID
