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
from pydantic import ValidationError

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common.error_handling import GenerationError, is_api_key_not_found_error
from config.veo_models import VEO_MODELS, get_default_veo_model_config, get_veo_model_config
from models.requests import GenerateVideoParams, GenerationMode, MediaReference, Resolution


def test_text_to_video_requires_prompt():
    with pytest.raises(ValidationError, match="Prompt cannot be empty"):
        GenerateVideoParams(prompt="   ", mode=GenerationMode.TEXT_TO_VIDEO)


def test_frames_to_video_requires_start_frame():
    with pytest.raises(ValidationError, match="start frame"):
        GenerateVideoParams(prompt="pan left", mode=GenerationMode.FRAMES_TO_VIDEO)


def test_extend_requires_input_video_but_not_prompt():
    with pytest.raises(ValidationError, match="previously generated video"):
        GenerateVideoParams(mode=GenerationMode.EXTEND_VIDEO)
    params = GenerateVideoParams(
        mode=GenerationMode.EXTEND_VIDEO,
        input_video=MediaReference(uri="https://example.com/v.mp4", mime_type="video/mp4"),
    )
    assert params.prompt == ""


def test_params_are_frozen():
    params = GenerateVideoParams(prompt="a river at dawn")
    with pytest.raises(ValidationError):
        params.prompt = "something else"


def test_params_survive_json_round_trip():
    params = GenerateVideoParams(
        prompt="a basket of mangoes",
        mode=GenerationMode.FRAMES_TO_VIDEO,
        resolution=Resolution.P1080,
        start_frame=MediaReference(uri="/blob/abc", mime_type="image/png"),
    )
    assert GenerateVideoParams.model_validate(params.model_dump(mode="json")) == params


def test_default_model_comes_from_config(monkeypatch):
    monkeypatch.setenv("VEO_MODEL_ID", "2.0")
    assert GenerateVideoParams(prompt="x").model == "2.0"
    assert get_default_veo_model_config().version_id == "2.0"


def test_unknown_default_model_falls_back_to_first(monkeypatch):
    monkeypatch.setenv("VEO_MODEL_ID", "9.9")
    assert get_default_veo_model_config() is VEO_MODELS[0]


def test_extension_models_support_720p():
    for model in VEO_MODELS:
        if model.supports_video_extension:
            assert GenerationMode.EXTEND_VIDEO in model.supported_modes
            assert Resolution.P720 in model.resolutions
        else:
            assert GenerationMode.EXTEND_VIDEO not in model.supported_modes
    assert get_veo_model_config("nope") is None


def test_api_key_not_found_signal():
    assert is_api_key_not_found_error("404 NOT_FOUND. Requested entity was not found.")
    assert not is_api_key_not_found_error("429 RESOURCE_EXHAUSTED")
    assert not is_api_key_not_found_error("")
    assert not is_api_key_not_found_error(None)
    assert GenerationError("boom").message == "boom"
