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
import sys
from collections import OrderedDict

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common import media_store


@pytest.fixture(autouse=True)
def empty_media_store(monkeypatch):
    monkeypatch.setattr(media_store, "_sessions", OrderedDict())
    monkeypatch.setattr(media_store, "_owners", {})


def test_object_url_round_trip():
    url = media_store.create_object_url(b"data", "video/mp4")
    assert url.startswith("/blob/")
    stored = media_store.get_object(url)
    assert stored.data == b"data"
    assert stored.mime_type == "video/mp4"
    assert media_store.get_object(url.removeprefix("/blob/")) == stored


def test_revoke():
    url = media_store.create_object_url(b"data", "video/mp4")
    media_store.revoke_object_url(url)
    assert media_store.get_object(url) is None
    media_store.revoke_object_url(url)
    media_store.revoke_object_url("")


def test_unknown_or_empty_url():
    assert media_store.get_object("/blob/missing") is None
    assert media_store.get_object("") is None


def test_oldest_blob_of_a_session_is_evicted(monkeypatch):
    monkeypatch.setenv("MAX_CACHED_BLOBS", "2")
    first = media_store.create_object_url(b"1", "video/mp4", session_id="a")
    second = media_store.create_object_url(b"2", "video/mp4", session_id="a")
    third = media_store.create_object_url(b"3", "video/mp4", session_id="a")
    assert media_store.get_object(first) is None
    assert media_store.get_object(second).data == b"2"
    assert media_store.get_object(third).data == b"3"


def test_other_sessions_do_not_evict_a_sessions_blobs(monkeypatch):
    monkeypatch.setenv("MAX_CACHED_BLOBS", "2")
    result = media_store.create_object_url(b"result", "video/mp4", session_id="shown")
    for i in range(10):
        media_store.create_object_url(str(i).encode(), "video/mp4", session_id=f"other-{i % 3}")
    assert media_store.get_object(result).data == b"result"


def test_least_recently_active_session_is_dropped(monkeypatch):
    monkeypatch.setenv("MAX_SESSIONS", "2")
    idle = media_store.create_object_url(b"idle", "video/mp4", session_id="idle")
    active = media_store.create_object_url(b"active", "video/mp4", session_id="active")
    # Serving a blob counts as activity for its session.
    media_store.get_object(idle)
    media_store.create_object_url(b"new", "video/mp4", session_id="new")
    assert media_store.get_object(idle).data == b"idle"
    assert media_store.get_object(active) is None


def test_revoking_last_blob_releases_the_session():
    url = media_store.create_object_url(b"data", "video/mp4", session_id="a")
    media_store.revoke_object_url(url)
    assert "a" not in media_store._sessions
    assert media_store._owners == {}
