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

import time

from google import genai
from google.genai import types

from common import media_store
from common.analytics import get_logger, track_model_call
from common.error_handling import GenerationError
from config.default import Default
from config.veo_models import get_veo_model_config
from models.requests import GeneratedVideoResult, GenerateVideoParams, GenerationMode

config = Default()

logger = get_logger(__name__)


def _build_image_input(params: GenerateVideoParams) -> types.Image | None:
    if params.mode != GenerationMode.FRAMES_TO_VIDEO or not params.start_frame:
        return None
    stored = media_store.get_object(params.start_frame.uri)
    if stored is None:
        raise GenerationError("The start frame image is no longer available. Please upload it again.")
    logger.info(f" start_frame: {params.start_frame.uri} ({stored.mime_type})")
    return types.Image(image_bytes=stored.data, mime_type=stored.mime_type)


def _build_video_input(params: GenerateVideoParams) -> types.Video | None:
    if params.mode != GenerationMode.EXTEND_VIDEO or not params.input_video:
        return None
    logger.info(f" video_input: {params.input_video.uri}")
    return types.Video(
        uri=params.input_video.uri,
        mime_type=params.input_video.mime_type or "video/mp4",
    )


def generate_video(
    params: GenerateVideoParams,
    api_key: str | None,
    client: genai.Client | None = None,
    session_id: str = "",
) -> GeneratedVideoResult:
    """Generate a single video from the form parameters using the genai SDK.

    Handles text-to-video, frames-to-video and extend-video. Provider errors
    are raised as GenerationError carrying the provider message verbatim, so
    callers can match on it. Nothing is retried here. The downloaded video is
    cached under `session_id` in the media store.
    """
    model_config = get_veo_model_config(params.model)
    if not model_config:
        raise GenerationError(f"Unsupported VEO model version: {params.model}")
    if params.mode not in model_config.supported_modes:
        raise GenerationError(
            f"{params.mode.value} is not supported by model: {model_config.display_name}"
        )

    logger.info(f"Mode: {params.mode.value}")
    image_input = _build_image_input(params)
    video_input = _build_video_input(params)

    gen_config_args = {
        "number_of_videos": 1,
        "resolution": params.resolution.value,
    }
    # The extension keeps the source video's framing.
    if params.mode != GenerationMode.EXTEND_VIDEO:
        gen_config_args["aspect_ratio"] = params.aspect_ratio
    gen_config = types.GenerateVideosConfig(**gen_config_args)

    logger.info(f"Calling generate_videos with model: {model_config.model_name}")
    logger.info(f"Config: {gen_config_args}")

    try:
        with track_model_call(
            model_name=model_config.model_name,
            prompt_length=len(params.prompt),
            mode=params.mode.value,
            resolution=params.resolution.value,
        ):
            if client is None:
                client = genai.Client(api_key=api_key)

            operation = client.models.generate_videos(
                model=model_config.model_name,
                prompt=params.prompt or None,
                image=image_input,
                video=video_input,
                config=gen_config,
            )

            logger.info("Polling video generation operation...")
            while not operation.done:
                time.sleep(config.VEO_POLL_INTERVAL_SECONDS)
                operation = client.operations.get(operation)
                logger.info(f"Operation in progress: {operation.name}")

            if operation.error:
                error_details = str(operation.error)
                if isinstance(operation.error, dict) and operation.error.get("message"):
                    error_details = operation.error["message"]
                logger.info(f"Video generation failed with error: {error_details}")
                raise GenerationError(error_details)

            response = operation.response
            if response is None:
                raise GenerationError(
                    "Unexpected API response structure or operation not done."
                )

            if getattr(response, "rai_media_filtered_count", None):
                reasons = response.rai_media_filtered_reasons or ["unknown reason"]
                raise GenerationError(f"Content Filtered: {reasons[0]}")

            if not response.generated_videos:
                raise GenerationError(
                    "API reported success but no video was found in the response."
                )

            video = response.generated_videos[0].video
            video_bytes = client.files.download(file=video)
    except GenerationError:
        raise
    except Exception as e:
        logger.info(f"Video generation failed: {e}")
        raise GenerationError(str(e) or e.__class__.__name__) from e

    mime_type = video.mime_type or "video/mp4"
    object_url = media_store.create_object_url(video_bytes, mime_type, session_id=session_id)
    logger.info(f"Successfully generated video {video.uri} -> {object_url}")
    return GeneratedVideoResult(
        object_url=object_url,
        blob=video_bytes,
        uri=video.uri,
        video=video,
        mime_type=mime_type,
    )
