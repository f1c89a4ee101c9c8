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

from typing import Callable

import mesop as me

from config.veo_models import VEO_MODELS, get_default_veo_model_config, get_veo_model_config
from models.requests import GenerationMode
from state.studio_state import PageState
from workflows.video_studio.backend import AppStatus


@me.component
def prompt_form(
    on_blur_prompt: Callable,
    on_selection_change_mode: Callable,
    on_selection_change_model: Callable,
    on_selection_change_resolution: Callable,
    on_selection_change_aspect_ratio: Callable,
    on_upload_start_frame: Callable,
    on_click_clear_start_frame: Callable,
    on_click_generate: Callable,
    on_click_cancel_extend: Callable,
):
    """Prompt entry and generation settings for the video studio."""
    state = me.state(PageState)
    model_config = get_veo_model_config(state.model) or get_default_veo_model_config()
    is_loading = state.studio.status == AppStatus.LOADING
    is_extend = state.mode == GenerationMode.EXTEND_VIDEO

    with me.box(style=me.Style(display="flex", flex_direction="column", gap=16)):
        if is_extend:
            with me.box(
                style=me.Style(
                    background="rgba(99, 102, 241, 0.15)",
                    border_radius=8,
                    padding=me.Padding.all(12),
                    display="flex",
                    align_items="center",
                    gap=8,
                )
            ):
                me.icon("movie_edit")
                me.text("Extending your previous video. Describe what happens next.")

        me.textarea(
            key=str(state.prompt_textarea_key),
            label="Describe your video",
            value=state.prompt,
            on_blur=on_blur_prompt,
            rows=4,
            appearance="outline",
            style=me.Style(width="100%"),
        )

        with me.box(style=me.Style(display="flex", flex_direction="row", flex_wrap="wrap", gap=10)):
            me.select(
                label="Mode",
                appearance="outline",
                options=[
                    me.SelectOption(label=mode.value, value=mode.value)
                    for mode in model_config.supported_modes
                    # Extend is only entered from a finished video.
                    if mode != GenerationMode.EXTEND_VIDEO or is_extend
                ],
                value=state.mode,
                on_selection_change=on_selection_change_mode,
                disabled=is_extend,
            )
            me.select(
                label="Model",
                appearance="outline",
                options=[
                    me.SelectOption(label=model.display_name, value=model.version_id)
                    for model in VEO_MODELS
                    if not is_extend or model.supports_video_extension
                ],
                value=state.model,
                on_selection_change=on_selection_change_model,
            )
            me.select(
                label="Resolution",
                appearance="outline",
                options=[
                    me.SelectOption(label=res.value, value=res.value)
                    for res in model_config.resolutions
                ],
                value=state.resolution,
                on_selection_change=on_selection_change_resolution,
                disabled=is_extend,
                style=me.Style(width="150px"),
            )
            me.select(
                label="Aspect Ratio",
                appearance="outline",
                options=[
                    me.SelectOption(label=ratio, value=ratio)
                    for ratio in model_config.supported_aspect_ratios
                ],
                value=state.aspect_ratio,
                on_selection_change=on_selection_change_aspect_ratio,
                disabled=is_extend,
                style=me.Style(width="150px"),
            )

        if state.mode == GenerationMode.FRAMES_TO_VIDEO:
            with me.box(style=me.Style(display="flex", align_items="center", gap=12)):
                if state.start_frame_uri:
                    me.image(
                        src=state.start_frame_uri,
                        style=me.Style(height=96, border_radius=8),
                    )
                    me.button("Remove", on_click=on_click_clear_start_frame, type="stroked")
                else:
                    me.uploader(
                        label="Upload start frame",
                        on_upload=on_upload_start_frame,
                        accepted_file_types=["image/jpeg", "image/png"],
                        key="start_frame_uploader",
                    )

        if state.form_error:
            me.text(state.form_error, style=me.Style(color=me.theme_var("error")))

        with me.box(style=me.Style(display="flex", flex_direction="row", gap=12)):
            me.button(
                "Extend Video" if is_extend else "Generate Video",
                on_click=on_click_generate,
                type="flat",
                disabled=is_loading,
            )
            if is_extend:
                me.button(
                    "Start Over",
                    on_click=on_click_cancel_extend,
                    type="stroked",
                    disabled=is_loading,
                )
