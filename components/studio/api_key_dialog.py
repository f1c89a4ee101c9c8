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

from components.dialog import dialog, dialog_actions


@me.component
def api_key_dialog(
    is_open: bool,
    on_blur_api_key: Callable,
    on_click_continue: Callable,
    on_click_cancel: Callable,
):
    """Asks for a Gemini API key before a generation request can run."""
    with dialog(is_open=is_open):  # pylint: disable=E1129:not-context-manager
        me.text("API key required", type="headline-6")
        me.markdown(
            "Video generation with Veo needs a Gemini API key from a paid Google Cloud "
            "project. See [billing](https://ai.google.dev/gemini-api/docs/billing) for details."
        )
        me.input(
            label="Gemini API key",
            type="password",
            on_blur=on_blur_api_key,
            appearance="outline",
            style=me.Style(width="100%", margin=me.Margin(top=12)),
        )
        with dialog_actions():  # pylint: disable=E1129:not-context-manager
            me.button("Cancel", on_click=on_click_cancel)
            me.button("Continue", on_click=on_click_continue, type="flat")
