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

"""Modal dialog components."""

import mesop as me


@me.content_component
def dialog(is_open: bool, dialog_style: me.Style | None = None):
    """Renders a modal dialog over the page; the slot is the dialog body."""
    with me.box(
        style=me.Style(
            background="rgba(0, 0, 0, 0.6)",
            display="block" if is_open else "none",
            height="100%",
            left=0,
            top=0,
            overflow_y="auto",
            position="fixed",
            width="100%",
            z_index=1000,
        )
    ):
        with me.box(
            style=me.Style(
                align_items="center",
                display="grid",
                height="100vh",
                justify_items="center",
            )
        ):
            with me.box(
                style=dialog_style
                or me.Style(
                    background=me.theme_var("surface-container-lowest"),
                    border_radius=20,
                    box_shadow=me.theme_var("shadow_elevation_2"),
                    max_width="min(480px, 90vw)",
                    padding=me.Padding.all(24),
                )
            ):
                me.slot()


@me.content_component
def dialog_actions():
    """Right-aligned row for dialog buttons."""
    with me.box(
        style=me.Style(
            display="flex",
            justify_content="end",
            gap=8,
            margin=me.Margin(top=20),
        )
    ):
        me.slot()
