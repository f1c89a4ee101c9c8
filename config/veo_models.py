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
from typing import List, Optional

from config.default import Default
from models.requests import GenerationMode, Resolution


@dataclass
class VeoModelConfig:
    """Configuration for a specific VEO model version."""

    version_id: str
    model_name: str
    display_name: str
    supported_modes: List[GenerationMode]
    supported_aspect_ratios: List[str]
    resolutions: List[Resolution]
    supports_video_extension: bool = False


# This list is the single source of truth for all VEO model configurations.
VEO_MODELS: List[VeoModelConfig] = [
    VeoModelConfig(
        version_id="3.1-fast-preview",
        model_name="veo-3.1-fast-generate-preview",
        display_name="Veo 3.1 Fast Preview",
        supported_modes=[
            GenerationMode.TEXT_TO_VIDEO,
            GenerationMode.FRAMES_TO_VIDEO,
            GenerationMode.EXTEND_VIDEO,
        ],
        supported_aspect_ratios=["16:9", "9:16"],
        resolutions=[Resolution.P720, Resolution.P1080],
        supports_video_extension=True,
    ),
    VeoModelConfig(
        version_id="3.1-preview",
        model_name="veo-3.1-generate-preview",
        display_name="Veo 3.1 Preview",
        supported_modes=[
            GenerationMode.TEXT_TO_VIDEO,
            GenerationMode.FRAMES_TO_VIDEO,
            GenerationMode.EXTEND_VIDEO,
        ],
        supported_aspect_ratios=["16:9", "9:16"],
        resolutions=[Resolution.P720, Resolution.P1080],
        supports_video_extension=True,
    ),
    VeoModelConfig(
        version_id="3.0-fast",
        model_name="veo-3.0-fast-generate-001",
        display_name="Veo 3.0 Fast",
        supported_modes=[GenerationMode.TEXT_TO_VIDEO, GenerationMode.FRAMES_TO_VIDEO],
        supported_aspect_ratios=["16:9", "9:16"],
        resolutions=[Resolution.P720, Resolution.P1080],
    ),
    VeoModelConfig(
        version_id="2.0",
        model_name="veo-2.0-generate-001",
        display_name="Veo 2.0",
        supported_modes=[GenerationMode.TEXT_TO_VIDEO, GenerationMode.FRAMES_TO_VIDEO],
        supported_aspect_ratios=["16:9", "9:16"],
        resolutions=[Resolution.P720],
    ),
]


# Helper function to easily find a model's config by its version_id.
def get_veo_model_config(version_id: str) -> Optional[VeoModelConfig]:
    """Finds and returns the configuration for a given VEO model version_id."""
    for model in VEO_MODELS:
        if model.version_id == version_id:
            return model
    return None


def get_default_veo_model_config() -> VeoModelConfig:
    """Returns the configured default model, falling back to the first entry."""
    return get_veo_model_config(Default().VEO_MODEL_ID) or VEO_MODELS[0]


def get_extension_model_config(version_id: str) -> Optional[VeoModelConfig]:
    """Returns a model that can extend a video made with `version_id`.

    Prefers the same model, then the configured default, then the first model
    that supports extension.
    """
    candidates = [get_veo_model_config(version_id), get_default_veo_model_config(), *VEO_MODELS]
    for model in candidates:
        if model and model.supports_video_extension and Resolution.P720 in model.resolutions:
            return model
    return None
