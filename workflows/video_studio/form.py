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

"""Conversions between the prompt form fields and GenerateVideoParams."""

from models.requests import GenerateVideoParams, GenerationMode, MediaReference, Resolution


def params_from_form(state) -> GenerateVideoParams:
    """Builds request params from the form fields of a page state.

    Raises:
        pydantic.ValidationError: If the fields don't make a valid request for the mode.
    """
    mode = GenerationMode(state.mode)
    start_frame = None
    input_video = None
    if mode == GenerationMode.FRAMES_TO_VIDEO and state.start_frame_uri:
        start_frame = MediaReference(
            uri=state.start_frame_uri, mime_type=state.start_frame_mime_type or "image/png"
        )
    if mode == GenerationMode.EXTEND_VIDEO and state.input_video_uri:
        input_video = MediaReference(
            uri=state.input_video_uri, mime_type=state.input_video_mime_type or "video/mp4"
        )
    return GenerateVideoParams(
        prompt=state.prompt or "",
        mode=mode,
        model=state.model,
        aspect_ratio=state.aspect_ratio,
        resolution=Resolution(state.resolution),
        start_frame=start_frame,
        input_video=input_video,
    )


def fill_form(state, params: GenerateVideoParams | None) -> None:
    """Pre-fills the form from params, or resets it when params is None."""
    if params is None:
        state.prompt = ""
        state.mode = GenerationMode.TEXT_TO_VIDEO.value
        state.resolution = Resolution.P720.value
        state.aspect_ratio = "16:9"
        state.start_frame_uri = ""
        state.start_frame_mime_type = ""
        state.input_video_uri = ""
        state.input_video_mime_type = ""
    else:
        state.prompt = params.prompt
        state.mode = params.mode.value
        state.model = params.model
        state.resolution = params.resolution.value
        state.aspect_ratio = params.aspect_ratio
        state.start_frame_uri = params.start_frame.uri if params.start_frame else ""
        state.start_frame_mime_type = params.start_frame.mime_type if params.start_frame else ""
        state.input_video_uri = params.input_video.uri if params.input_video else ""
        state.input_video_mime_type = params.input_video.mime_type if params.input_video else ""
    state.form_error = ""
    # Forces Mesop to re-create the textarea with the new value.
    state.prompt_textarea_key += 1
