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
import uuid
from collections import OrderedDict

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common import api_key
from common.api_key import ApiKeyHost
from common.error_handling import ApiKeySelectionError
from config.default import Default


@pytest.fixture(autouse=True)
def empty_key_registry(monkeypatch):
    monkeypatch.setattr(api_key, "_session_keys", OrderedDict())


def _host(server_key="", allow_user_keys=True, session_id=None, max_sessions=100):
    return ApiKeyHost(
        session_id=session_id or str(uuid.uuid4()),
        config=Default(
            GEMINI_API_KEY=server_key,
            ALLOW_USER_API_KEYS=allow_user_keys,
            MAX_SESSIONS=max_sessions,
        ),
    )


def test_no_key_selected():
    host = _host()
    assert not host.has_selected_api_key()
    assert host.get_api_key() is None


def test_server_key_counts_as_selected():
    host = _host(server_key="server-key")
    assert host.has_selected_api_key()
    assert host.get_api_key() == "server-key"


def test_session_key_takes_precedence():
    host = _host(server_key="server-key")
    host.open_select_key("  user-key  ")
    assert host.get_api_key() == "user-key"


def test_keys_are_isolated_per_session():
    first = _host()
    second = _host()
    first.open_select_key("first-key")
    assert first.has_selected_api_key()
    assert not second.has_selected_api_key()
    assert _host(session_id=first.session_id).get_api_key() == "first-key"


def test_empty_selection_clears_session_key():
    host = _host()
    host.open_select_key("user-key")
    host.open_select_key("")
    assert not host.has_selected_api_key()


def test_least_recently_used_key_is_forgotten():
    first = _host(max_sessions=2)
    second = _host(max_sessions=2)
    first.open_select_key("first-key")
    second.open_select_key("second-key")
    # Using a key keeps its session alive.
    assert first.get_api_key() == "first-key"

    _host(max_sessions=2).open_select_key("third-key")

    assert first.get_api_key() == "first-key"
    assert second.get_api_key() is None
    assert len(api_key._session_keys) == 2


def test_selection_fails_when_disabled():
    host = _host(allow_user_keys=False)
    with pytest.raises(ApiKeySelectionError):
        host.open_select_key("user-key")
    assert not host.has_selected_api_key()
