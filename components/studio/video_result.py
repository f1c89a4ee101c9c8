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


@me.component
def video_result(
    video_url: str,
    on_click_retry: Callable,
    on_click_new_video: Callable,
    on_click_extend: Callable,
    can_extend: bool,
):
    """Player for the generated video with follow-up actions."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            align_items="center",
            gap=16,
            width="100%",
        )
    ):
        me.video(
            key=video_url,
            src=video_url,
            style=me.Style(width="100%", max_width="90vh", border_radius=12, display="block"),
        )
        with me.box(style=me.Style(display="flex", flex_direction="row", gap=12)):
            me.button("Retry", on_click=on_click_retry, type="stroked")
            me.button("New Video", on_click=on_click_new_video, type="stroked")
            me.button("Extend", on_click=on_click_extend, type="flat", disabled=not can_extend)
        if not can_extend:
            me.text(
                "Only 720p videos can be extended.",
                style=me.Style(font_size=12, color="#9ca3af"),
            )
