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
"""Storefront and video studio mesop UI page."""

import datetime

import mesop as me
from pydantic import ValidationError

from common import media_store
from common.analytics import log_page_view, log_ui_click, track_click
from common.api_key import ApiKeyHost
from components.catalog.product_catalog import product_catalog
from components.header import header
from components.studio.api_key_dialog import api_key_dialog
from components.studio.loading_indicator import loading_indicator
from components.studio.prompt_form import prompt_form
from components.studio.video_result import video_result
from config.default import SITE_CONTENT, Default
from config.veo_models import get_veo_model_config
from state.state import AppState, ensure_session
from state.studio_state import PageState
from workflows.video_studio import backend
from workflows.video_studio.backend import AppStatus
from workflows.video_studio.form import fill_form, params_from_form

config = Default()


def on_home_load(e: me.LoadEvent):  # pylint: disable=unused-argument
    app_state = me.state(AppState)
    app_state.current_page = "/"
    log_page_view("/", session_id=ensure_session(app_state))
    yield


@me.page(
    path="/",
    title=f"{config.BRAND_NAME} - Eat Natural, Live Healthy",
    on_load=on_home_load,
)
def home_page():
    """Main Page."""
    home_content()


def _key_host() -> ApiKeyHost:
    return ApiKeyHost(ensure_session(me.state(AppState)))


def home_content():
    state = me.state(PageState)

    api_key_dialog(
        is_open=state.studio.show_key_dialog,
        on_blur_api_key=on_blur_api_key,
        on_click_continue=on_click_key_continue,
        on_click_cancel=on_click_key_cancel,
    )

    header()

    with me.box(
        style=me.Style(
            max_width=1200,
            margin=me.Margin.symmetric(horizontal="auto"),
            padding=me.Padding.symmetric(vertical=32, horizontal=16),
            display="flex",
            flex_direction="column",
            gap=64,
        )
    ):
        intro_section()
        studio_section(state)
        offerings_section(state)
        contact_section()
        me.text(
            f"© {datetime.date.today().year} {config.BRAND_NAME}. All rights reserved.",
            style=me.Style(text_align="center", font_size=14, color="#9ca3af"),
        )


def intro_section():
    intro = SITE_CONTENT["intro"]
    with me.box(style=me.Style(text_align="center", max_width=768, margin=me.Margin.symmetric(horizontal="auto"))):
        me.text(intro["title"], type="headline-4", style=me.Style(color="#14532d", font_weight="bold"))
        me.text(intro["description"], style=me.Style(font_size=18, color="#166534", margin=me.Margin(bottom=24)))
        me.text(
            intro["mission"],
            style=me.Style(
                display="inline-block",
                background="#dcfce7",
                border_radius=8,
                padding=me.Padding.symmetric(vertical=12, horizontal=24),
                color="#166534",
                font_weight="500",
            ),
        )


def studio_section(state: PageState):
    studio = SITE_CONTENT["studio"]
    with me.box(
        style=me.Style(
            background="#111827",
            color="white",
            border_radius=24,
            padding=me.Padding.all(48),
        )
    ):
        with me.box(style=me.Style(display="flex", align_items="center", gap=12, margin=me.Margin(bottom=24))):
            me.icon("videocam", style=me.Style(color="#818cf8"))
            with me.box():
                me.text(studio["title"], type="headline-5", style=me.Style(font_weight="bold"))
                me.text(studio["subtitle"], style=me.Style(color="#9ca3af"))

        with me.box(style=me.Style(max_width=896, margin=me.Margin.symmetric(horizontal="auto"))):
            status = state.studio.status
            if status in (AppStatus.IDLE, AppStatus.ERROR):
                prompt_form(
                    on_blur_prompt=on_blur_prompt,
                    on_selection_change_mode=on_selection_change_mode,
                    on_selection_change_model=on_selection_change_model,
                    on_selection_change_resolution=on_selection_change_resolution,
                    on_selection_change_aspect_ratio=on_selection_change_aspect_ratio,
                    on_upload_start_frame=on_upload_start_frame,
                    on_click_clear_start_frame=on_click_clear_start_frame,
                    on_click_generate=on_click_generate,
                    on_click_cancel_extend=on_click_cancel_extend,
                )
                if state.studio.error_message:
                    me.text(
                        state.studio.error_message,
                        style=me.Style(
                            background="rgba(239, 68, 68, 0.1)",
                            border=me.Border.all(me.BorderSide(width=1, style="solid", color="rgba(239, 68, 68, 0.2)")),
                            border_radius=8,
                            color="#fecaca",
                            padding=me.Padding.all(16),
                            margin=me.Margin(top=24),
                            text_align="center",
                        ),
                    )
            elif status == AppStatus.LOADING:
                loading_indicator()
            else:
                video_result(
                    video_url=state.studio.result.object_url,
                    on_click_retry=on_click_retry,
                    on_click_new_video=on_click_new_video,
                    on_click_extend=on_click_extend,
                    can_extend=backend.can_extend(state.studio),
                )


def offerings_section(state: PageState):
    with me.box():
        with me.box(style=me.Style(display="flex", align_items="center", gap=12, margin=me.Margin(bottom=32))):
            me.box(style=me.Style(height=32, width=4, background="#16a34a", border_radius=9999))
            me.text(SITE_CONTENT["offerings"]["title"], type="headline-5", style=me.Style(color="#14532d", font_weight="bold"))
        product_catalog(
            active_category=state.active_category,
            on_click_category=on_click_category,
        )


def contact_section():
    contact = SITE_CONTENT["contact"]
    with me.box(
        style=me.Style(
            background="#14532d",
            color="white",
            border_radius=24,
            padding=me.Padding.all(48),
            text_align="center",
        )
    ):
        me.text(contact["title"], type="headline-5", style=me.Style(font_weight="bold", margin=me.Margin(bottom=24)))
        with me.box(style=me.Style(display="flex", flex_wrap="wrap", justify_content="center", gap=32)):
            _contact_entry("call", contact["phone_label"], config.WHATSAPP_NUMBER)
            _contact_entry("mail", contact["email_label"], config.CONTACT_EMAIL)


def _contact_entry(icon: str, label: str, value: str):
    with me.box(style=me.Style(display="flex", align_items="center", gap=12)):
        me.icon(icon)
        with me.box(style=me.Style(text_align="left")):
            me.text(label, style=me.Style(color="#86efac", font_size=14))
            me.text(value, style=me.Style(font_weight="bold", font_size=18))


# --- Prompt form handlers ---


def on_blur_prompt(e: me.InputBlurEvent):
    state = me.state(PageState)
    state.prompt = e.value
    yield


def on_selection_change_mode(e: me.SelectSelectionChangeEvent):
    state = me.state(PageState)
    state.mode = e.value
    state.form_error = ""
    yield


def on_selection_change_model(e: me.SelectSelectionChangeEvent):
    """Switch model, falling back to settings the new model supports."""
    state = me.state(PageState)
    state.model = e.value
    model_config = get_veo_model_config(e.value)
    if model_config:
        if state.mode not in [mode.value for mode in model_config.supported_modes]:
            state.mode = model_config.supported_modes[0].value
        if state.resolution not in [res.value for res in model_config.resolutions]:
            state.resolution = model_config.resolutions[0].value
        if state.aspect_ratio not in model_config.supported_aspect_ratios:
            state.aspect_ratio = model_config.supported_aspect_ratios[0]
    yield


def on_selection_change_resolution(e: me.SelectSelectionChangeEvent):
    state = me.state(PageState)
    state.resolution = e.value
    yield


def on_selection_change_aspect_ratio(e: me.SelectSelectionChangeEvent):
    state = me.state(PageState)
    state.aspect_ratio = e.value
    yield


def on_upload_start_frame(e: me.UploadEvent):
    """Keep the uploaded start frame in memory and reference it by object URL."""
    state = me.state(PageState)
    media_store.revoke_object_url(state.start_frame_uri)
    state.start_frame_uri = media_store.create_object_url(
        e.file.getvalue(),
        e.file.mime_type,
        session_id=ensure_session(me.state(AppState)),
    )
    state.start_frame_mime_type = e.file.mime_type
    state.form_error = ""
    yield


def on_click_clear_start_frame(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    media_store.revoke_object_url(state.start_frame_uri)
    state.start_frame_uri = ""
    state.start_frame_mime_type = ""
    yield


@track_click(element_id="studio_generate_button")
def on_click_generate(e: me.ClickEvent):  # pylint: disable=unused-argument
    """Video generate request handler."""
    state = me.state(PageState)
    try:
        params = params_from_form(state)
    except ValidationError as ve:
        state.form_error = "; ".join(err["msg"].removeprefix("Value error, ") for err in ve.errors())
        yield
        return
    state.form_error = ""
    yield from backend.generate(state.studio, params, _key_host())


# --- API key dialog handlers ---


def on_blur_api_key(e: me.InputBlurEvent):
    state = me.state(PageState)
    state.api_key_input = e.value
    yield


@track_click(element_id="studio_api_key_continue")
def on_click_key_continue(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    api_key = state.api_key_input
    state.api_key_input = ""
    yield from backend.select_key(state.studio, _key_host(), api_key)


def on_click_key_cancel(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    state.api_key_input = ""
    backend.dismiss_key_dialog(state.studio)
    yield


# --- Result handlers ---


@track_click(element_id="studio_retry_button")
def on_click_retry(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    backend.retry(state.studio)
    fill_form(state, backend.load_params(state.studio.last_params))
    yield


@track_click(element_id="studio_new_video_button")
def on_click_new_video(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    backend.new_video(state.studio)
    fill_form(state, None)
    yield


@track_click(element_id="studio_extend_button")
def on_click_extend(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    if backend.extend(state.studio):
        fill_form(state, backend.load_params(state.studio.last_params))
    yield


@track_click(element_id="studio_cancel_extend_button")
def on_click_cancel_extend(e: me.ClickEvent):  # pylint: disable=unused-argument
    """Leave extend mode and start a fresh request."""
    state = me.state(PageState)
    backend.new_video(state.studio)
    fill_form(state, None)
    yield


# --- Catalog handlers ---


def on_click_category(e: me.ClickEvent):
    """Select a catalog tab."""
    app_state = me.state(AppState)
    log_ui_click(
        element_id="catalog_category_tab",
        page_name=app_state.current_page,
        session_id=app_state.session_id,
        extras={"category": e.key},
    )
    state = me.state(PageState)
    state.active_category = e.key
    yield
