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

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class ProductItem:
    """A single product offered in a category."""

    id: str
    name: str
    price: str
    description: Optional[str] = None


@dataclass(frozen=True)
class ProductCategory:
    """A tab of the storefront catalog."""

    id: str
    title: str
    icon: str
    description: str
    color: str
    items: Tuple[ProductItem, ...] = ()


DEFAULT_CATEGORY_ID = "fish"

# This tuple is the single source of truth for the storefront catalog.
PRODUCT_CATEGORIES: Tuple[ProductCategory, ...] = (
    ProductCategory(
        id="vegetables",
        title="Organic Vegetables",
        icon="eco",
        description="Farm-fresh, pesticide-free vegetables for your daily nutrition.",
        color="#16a34a",
    ),
    ProductCategory(
        id="fruits",
        title="Natural Fruits",
        icon="nutrition",
        description="Seasonally picked, naturally ripened fruits bursting with flavor.",
        color="#ef4444",
    ),
    ProductCategory(
        id="fish",
        title="Fresh Fish",
        icon="set_meal",
        description="Premium quality catch, cleaned and prepped for your convenience.",
        color="#3b82f6",
        items=(
            ProductItem(
                id="murrel-fillet",
                name="Murrel (Maral) Fillet - Boneless",
                price="₹880/kg",
                description="Best for wound healing & surgery",
            ),
            ProductItem(
                id="basa-fillet",
                name="Fatless Basa - Boneless",
                price="₹500/kg",
                description="High protein, good for diet",
            ),
            ProductItem(
                id="apollo-boneless",
                name="Apollo Boneless",
                price="₹400/kg",
                description="Small boneless cubes. Safe for kids",
            ),
            ProductItem(
                id="murrel-curry",
                name="Murrel (Maral) - Curry Cut",
                price="₹500/kg",
                description="With bone. Great for skin & recovery",
            ),
            ProductItem(
                id="rohu-curry",
                name="Rohu - Curry Cut",
                price="₹250/kg",
                description="River Fish. Rich in Omega-3",
            ),
            ProductItem(
                id="tilapia-curry",
                name="Tilapia - Curry Cut",
                price="₹220/kg",
                description="Good for bone strength",
            ),
            ProductItem(
                id="prawns",
                name="Cleaned Prawns (Tiger/Jumbo)",
                price="₹600–800",
                description="Boosts immunity & zinc levels",
            ),
        ),
    ),
    ProductCategory(
        id="chicken",
        title="Organic Poultry",
        icon="shopping_basket",
        description="Free-range, chemical-free poultry for natural strength.",
        color="#f97316",
        items=(
            ProductItem(
                id="country-chicken",
                name="Country Chicken",
                price="₹450/kg",
                description="Chemical-free, Natural Strength",
            ),
            ProductItem(
                id="quail",
                name="Quail (Batir)",
                price="₹100/pc",
                description="Cures asthma, improves energy",
            ),
        ),
    ),
    ProductCategory(
        id="grocery",
        title="Healthy Grocery",
        icon="shopping_basket",
        description="Natural food products chosen with care.",
        color="#d97706",
    ),
)


# Helper function to easily find a category by its id.
def get_category(
    category_id: str, categories: Sequence[ProductCategory] = PRODUCT_CATEGORIES
) -> Optional[ProductCategory]:
    """Finds and returns the catalog category for a given id."""
    for category in categories:
        if category.id == category_id:
            return category
    return None
