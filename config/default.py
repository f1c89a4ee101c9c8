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

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv(override=True)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class Default:
    """Defaults class"""

    # pylint: disable=invalid-name

    # Gemini API
    GEMINI_API_KEY: str = field(default_factory=lambda: os.environ.get("GEMINI_API_KEY", ""))
    ALLOW_USER_API_KEYS: bool = field(
        default_factory=lambda: _env_bool("ALLOW_USER_API_KEYS", "true")
    )

    # Veo
    VEO_MODEL_ID: str = field(
        default_factory=lambda: os.environ.get("VEO_MODEL_ID", "3.1-fast-preview")
    )
    VEO_POLL_INTERVAL_SECONDS: float = field(
        default_factory=lambda: float(os.environ.get("VEO_POLL_INTERVAL_SECONDS", "10"))
    )

    # Per-session state held in memory: media blobs served at /blob/<id> and
    # user-selected API keys. The least recently active session is dropped first.
    MAX_CACHED_BLOBS: int = field(
        default_factory=lambda: int(os.environ.get("MAX_CACHED_BLOBS", "4"))
    )
    MAX_SESSIONS: int = field(
        default_factory=lambda: int(os.environ.get("MAX_SESSIONS", "100"))
    )

    # Storefront
    BRAND_NAME: str = field(default_factory=lambda: os.environ.get("BRAND_NAME", "Nature's Fresh"))
    BRAND_TAGLINE: str = "Eat Natural · Live Healthy"
    WHATSAPP_NUMBER: str = field(
        default_factory=lambda: os.environ.get("WHATSAPP_NUMBER", "9182373800")
    )
    CONTACT_EMAIL: str = field(
        default_factory=lambda: os.environ.get("CONTACT_EMAIL", "mohmmedasifuddin@gmail.com")
    )

    # Server
    PORT: int = field(default_factory=lambda: int(os.environ.get("PORT", "8080")))
    DEBUG_MODE: bool = field(default_factory=lambda: _env_bool("DEBUG_MODE", "false"))


SITE_CONTENT = {
    "intro": {
        "title": "Pure, Fresh & Chemical-Free",
        "description": (
            "A social health initiative by Deccan Multi Services. We bring you the best "
            "from nature: Organic Vegetables, Natural Fruits, Fresh Fish, and Desi Chicken."
        ),
        "mission": "Not a business, but a mission to spread health awareness.",
    },
    "studio": {
        "title": "Nature's Video Studio",
        "subtitle": "Create videos with Veo",
    },
    "offerings": {"title": "Our Offerings"},
    "contact": {
        "title": "Contact Us",
        "phone_label": "Call for orders",
        "email_label": "Email us",
    },
}
