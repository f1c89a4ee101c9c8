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

"""Video studio controller.

Every operation is a generator over a StudioState: each `yield` marks a point
where the page should re-render, so Mesop handlers can `yield from` them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Optional

from common import media_store
from common.analytics import get_logger
from common.api_key import ApiKeyHost
from common.error_handling import (
    ApiKeySelectionError,
    GenerationError,
    is_api_key_not_found_error,
)
from config.veo_models import get_extension_model_config
from models.requests import (
    GeneratedVideoResult,
    GenerateVideoParams,
    GenerationMode,
    MediaReference,
    Resolution,
)
from models.veo import generate_video

logger = get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"

# Called as video_client(params, api_key, session_id=...).
VideoClient = Callable[..., GeneratedVideoResult]


class AppStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class VideoResultRef:
    """The parts of a GeneratedVideoResult that are kept in UI state."""

    object_url: str = ""
    uri: str = ""
    mime_type: str = "video/mp4"


@dataclass
class StudioState:
    status: str = AppStatus.IDLE.value
    error_message: str = ""
    # Params are stored as JSON dicts so the state stays serializable.
    last_params: dict = field(default_factory=dict)
    pending_params: dict = field(default_factory=dict)
    show_key_dialog: bool = False
    result: VideoResultRef = field(default_factory=VideoResultRef)


def load_params(data: dict) -> Optional[GenerateVideoParams]:
    return GenerateVideoParams.model_validate(data) if data else None


def _dump_params(params: GenerateVideoParams) -> dict:
    return params.model_dump(mode="json")


def has_result(state: StudioState) -> bool:
    return bool(state.result.object_url)


def _discard_result(state: StudioState) -> None:
    if has_result(state):
        media_store.revoke_object_url(state.result.object_url)
    state.result = VideoResultRef()


def _request_api_key(state: StudioState, params: GenerateVideoParams) -> None:
    state.pending_params = _dump_params(params)
    state.show_key_dialog = True
    state.error_message = ""
    state.status = AppStatus.IDLE.value


def generate(
    state: StudioState,
    params: GenerateVideoParams,
    key_host: ApiKeyHost,
    skip_key_check: bool = False,
    video_client: VideoClient = generate_video,
) -> Iterator[None]:
    """Runs one generation attempt through the API key gate."""
    if state.status == AppStatus.LOADING:
        logger.warning("Ignoring generate request while a generation is in flight.")
        return

    if not skip_key_check and not key_host.has_selected_api_key():
        _request_api_key(state, params)
        yield
        return

    _discard_result(state)
    state.status = AppStatus.LOADING.value
    state.error_message = ""
    state.last_params = _dump_params(params)
    yield

    try:
        result = video_client(
            params, key_host.get_api_key(), session_id=key_host.session_id
        )
    except GenerationError as ge:
        logger.error(f"Generation failed: {ge.message}")
        if is_api_key_not_found_error(ge.message):
            _request_api_key(state, params)
        else:
            state.error_message = ge.message or DEFAULT_ERROR_MESSAGE
            state.status = AppStatus.ERROR.value
        yield
        return

    state.result = VideoResultRef(
        object_url=result.object_url,
        uri=result.uri,
        mime_type=result.mime_type,
    )
    state.status = AppStatus.SUCCESS.value
    yield


def select_key(
    state: StudioState,
    key_host: ApiKeyHost,
    api_key: str | None,
    video_client: VideoClient = generate_video,
) -> Iterator[None]:
    """Runs the host key selection flow, then replays the pending request once.

    Selection is assumed to have succeeded as soon as the flow returns; the
    host may not report the new key as selected yet, so the replay skips the
    key check.
    """
    try:
        key_host.open_select_key(api_key)
    except ApiKeySelectionError as e:
        logger.error(f"Error selecting key: {e}")
        state.show_key_dialog = False
        state.pending_params = {}
        state.status = AppStatus.IDLE.value
        yield
        return

    state.show_key_dialog = False
    params = load_params(state.pending_params)
    state.pending_params = {}
    if params is None:
        yield
        return
    yield from generate(state, params, key_host, skip_key_check=True, video_client=video_client)


def dismiss_key_dialog(state: StudioState) -> None:
    state.show_key_dialog = False
    state.pending_params = {}


def retry(state: StudioState) -> None:
    """Back to the form with the last parameters still filled in."""
    _discard_result(state)
    state.status = AppStatus.IDLE.value


def new_video(state: StudioState) -> None:
    _discard_result(state)
    state.last_params = {}
    state.error_message = ""
    state.status = AppStatus.IDLE.value


def can_extend(state: StudioState) -> bool:
    """Only 720p results can be extended, by a model that supports extension."""
    if state.status != AppStatus.SUCCESS or not has_result(state):
        return False
    params = load_params(state.last_params)
    return (
        params is not None
        and params.resolution == Resolution.P720
        and get_extension_model_config(params.model) is not None
    )


def extend(state: StudioState) -> bool:
    """Pre-fills the form to extend the current result. Returns False if unavailable.

    Results made with a model that cannot extend are extended by another one.
    """
    if not can_extend(state):
        return False
    last = load_params(state.last_params)
    extend_params = last.model_copy(
        update={
            "mode": GenerationMode.EXTEND_VIDEO,
            "model": get_extension_model_config(last.model).version_id,
            "resolution": last.resolution,
            "start_frame": None,
            "input_video": MediaReference(
                uri=state.result.uri, mime_type=state.result.mime_type
            ),
        }
    )
    state.last_params = _dump_params(extend_params)
    _discard_result(state)
    state.status = AppStatus.IDLE.value
    return True
