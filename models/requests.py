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

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from google.genai import types
from pydantic import BaseModel, ConfigDict, Field, model_validator

from config.default import Default


class GenerationMode(str, Enum):
    """Supported generation modes."""

    TEXT_TO_VIDEO = "Text to Video"
    FRAMES_TO_VIDEO = "Frames to Video"
    EXTEND_VIDEO = "Extend Video"


class Resolution(str, Enum):
    """Supported output resolutions."""

    P720 = "720p"
    P1080 = "1080p"


class MediaReference(BaseModel):
    """Represents a single piece of reference media for the API request."""

    model_config = ConfigDict(frozen=True)

    uri: str
    mime_type: str


class GenerateVideoParams(BaseModel):
    """
    Defines the contract for a video generation request.
    Built by the prompt form, consumed once per generation attempt and
    replaced, never mutated, on retry or extend.
    """

    model_config = ConfigDict(frozen=True)

    prompt: str = ""
    mode: GenerationMode = GenerationMode.TEXT_TO_VIDEO
    model: str = Field(default_factory=lambda: Default().VEO_MODEL_ID)
    aspect_ratio: str = "16:9"
    resolution: Resolution = Resolution.P720

    # For Frames to Video
    start_frame: Optional[MediaReference] = None

    # For Extend Video
    input_video: Optional[MediaReference] = None

    @model_validator(mode="after")
    def check_mode_inputs(self):
        if self.mode == GenerationMode.TEXT_TO_VIDEO and not self.prompt.strip():
            raise ValueError("Prompt cannot be empty for text to video generation.")
        if self.mode == GenerationMode.FRAMES_TO_VIDEO and self.start_frame is None:
            raise ValueError("A start frame image is required for frames to video generation.")
        if self.mode == GenerationMode.EXTEND_VIDEO and self.input_video is None:
            raise ValueError("A previously generated video is required to extend.")
        return self


@dataclass
class GeneratedVideoResult:
    """A playable generation result."""

    object_url: str
    blob: bytes
    uri: str
    video: types.Video
    mime_type: str = "video/mp4"
