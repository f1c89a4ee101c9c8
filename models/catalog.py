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

import urllib.parse
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from config.default import Default
from config.products import PRODUCT_CATEGORIES, ProductCategory, get_category

WHATSAPP_BASE_URL = "https://wa.me"
ORDER_MESSAGE_TEMPLATE = "I'm interested in {item_name}"


@dataclass
class ProductCard:
    item_id: str
    name: str
    price: str
    description: Optional[str]
    order_url: str


@dataclass
class CategoryView:
    """What the product grid shows for the selected tab."""

    category_id: str
    title: str = ""
    placeholder: Optional[str] = None
    cards: List[ProductCard] = field(default_factory=list)


def build_chat_link(phone: str | None = None) -> str:
    """Link that opens a chat with the store."""
    return f"{WHATSAPP_BASE_URL}/{phone or Default().WHATSAPP_NUMBER}"


def build_order_link(item_name: str, phone: str | None = None) -> str:
    """Chat link pre-filled with an order inquiry for one item."""
    message = ORDER_MESSAGE_TEMPLATE.format(item_name=item_name)
    return f"{build_chat_link(phone)}?text={urllib.parse.quote(message)}"


def coming_soon_text(category: ProductCategory) -> str:
    return f"We are sourcing the freshest {category.title.lower()} for you."


def render_category(
    category_id: str,
    categories: Sequence[ProductCategory] = PRODUCT_CATEGORIES,
    phone: str | None = None,
) -> CategoryView:
    """Builds the grid contents for a category.

    Empty categories get the "coming soon" placeholder instead of cards. An
    unknown id renders nothing.
    """
    category = get_category(category_id, categories)
    if category is None:
        return CategoryView(category_id=category_id)

    if not category.items:
        return CategoryView(
            category_id=category.id,
            title=category.title,
            placeholder=coming_soon_text(category),
        )

    return CategoryView(
        category_id=category.id,
        title=category.title,
        cards=[
            ProductCard(
                item_id=item.id,
                name=item.name,
                price=item.price,
                description=item.description,
                order_url=build_order_link(item.name, phone),
            )
            for item in category.items
        ],
    )
