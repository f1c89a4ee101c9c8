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

import mesop as me

from config.default import Default
from models.catalog import build_chat_link


@me.component
def header():
    """Sticky brand bar with the chat-to-order link."""
    config = Default()
    with me.box(
        style=me.Style(
            background="#166534",
            color="white",
            position="sticky",
            top=0,
            z_index=40,
            padding=me.Padding.symmetric(vertical=16, horizontal=24),
            display="flex",
            justify_content="space-between",
            align_items="center",
        )
    ):
        with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
            me.icon("eco", style=me.Style(color="#86efac"))
            with me.box():
                me.text(config.BRAND_NAME, type="headline-6", style=me.Style(margin=me.Margin.all(0)))
                me.text(config.BRAND_TAGLINE, style=me.Style(font_size=12, color="#bbf7d0"))
        me.link(
            text="Order Now",
            url=build_chat_link(),
            open_in_new_tab=True,
            style=me.Style(
                background="#16a34a",
                color="white",
                border_radius=9999,
                padding=me.Padding.symmetric(vertical=8, horizontal=16),
                font_weight="bold",
                text_decoration="none",
            ),
        )
