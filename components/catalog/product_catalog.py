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

from config.products import PRODUCT_CATEGORIES
from models.catalog import ProductCard, render_category


@me.component
def product_catalog(active_category: str, on_click_category: Callable):
    """Category tabs and the product grid for the selected tab."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            gap=8,
            overflow_x="auto",
            padding=me.Padding(bottom=16),
            margin=me.Margin(bottom=16),
        )
    ):
        for category in PRODUCT_CATEGORIES:
            is_active = category.id == active_category
            with me.content_button(
                key=category.id,
                on_click=on_click_category,
                type="flat" if is_active else "stroked",
                style=me.Style(
                    background=category.color if is_active else "white",
                    color="white" if is_active else "#4b5563",
                    border_radius=9999,
                    white_space="nowrap",
                ),
            ):
                with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
                    me.icon(category.icon)
                    me.text(category.title)

    view = render_category(active_category)

    if view.placeholder:
        with me.box(
            style=me.Style(
                background="white",
                border_radius=16,
                padding=me.Padding.symmetric(vertical=64, horizontal=24),
                text_align="center",
            )
        ):
            me.icon("eco", style=me.Style(color="#bbf7d0", font_size=48, width=48, height=48))
            me.text("Coming Soon", type="headline-6", style=me.Style(color="#166534"))
            me.text(view.placeholder, style=me.Style(color="#16a34a"))
        return

    with me.box(
        style=me.Style(
            display="grid",
            grid_template_columns="repeat(auto-fill, minmax(280px, 1fr))",
            gap=24,
        )
    ):
        for card in view.cards:
            product_card(card)


@me.component
def product_card(card: ProductCard):
    with me.box(
        key=card.item_id,
        style=me.Style(
            background="white",
            border_radius=12,
            border=me.Border.all(me.BorderSide(width=1, style="solid", color="#f3f4f6")),
            display="flex",
            flex_direction="column",
            padding=me.Padding.all(24),
        ),
    ):
        with me.box(style=me.Style(flex_grow=1)):
            with me.box(
                style=me.Style(
                    display="flex",
                    justify_content="space-between",
                    align_items="start",
                    gap=8,
                    margin=me.Margin(bottom=8),
                )
            ):
                me.text(card.name, style=me.Style(font_weight="bold", font_size=18, color="#1f2937"))
                me.text(
                    card.price,
                    style=me.Style(
                        background="#f0fdf4",
                        color="#15803d",
                        border_radius=9999,
                        padding=me.Padding.symmetric(vertical=4, horizontal=12),
                        font_weight="bold",
                        white_space="nowrap",
                    ),
                )
            if card.description:
                me.text(
                    card.description,
                    style=me.Style(font_size=14, color="#6b7280", margin=me.Margin(bottom=24)),
                )
        me.link(
            text="Order on WhatsApp",
            url=card.order_url,
            open_in_new_tab=True,
            style=me.Style(
                background="#16a34a",
                color="white",
                border_radius=8,
                padding=me.Padding.symmetric(vertical=12, horizontal=16),
                text_align="center",
                text_decoration="none",
                font_weight="500",
            ),
        )
