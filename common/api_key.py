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

"""Host credential environment for the Gemini API key.

Mesop state is serialized to the browser, so selected keys are held in a
process-local registry keyed by session id instead. The registry keeps at
most `MAX_SESSIONS` keys and forgets the least recently used one first.
"""

import threading
from collections import OrderedDict
from typing import Optional

from common.analytics import get_logger
from common.error_handling import ApiKeySelectionError
from config.default import Default

logger = get_logger(__name__)

_session_keys: "OrderedDict[str, str]" = OrderedDict()
_lock = threading.Lock()


class ApiKeyHost:
    """Answers whether a usable key is selected and runs the selection flow."""

    def __init__(self, session_id: str, config: Default | None = None):
        self.session_id = session_id
        self.config = config or Default()

    def has_selected_api_key(self) -> bool:
        return bool(self.get_api_key())

    def get_api_key(self) -> Optional[str]:
        with _lock:
            session_key = _session_keys.get(self.session_id)
            if session_key:
                _session_keys.move_to_end(self.session_id)
        return session_key or self.config.GEMINI_API_KEY or None

    def open_select_key(self, api_key: str | None) -> None:
        """Selects a key for this session.

        The selection is not verified against the provider. An empty entry
        completes the flow without selecting anything.

        Raises:
            ApiKeySelectionError: If user-selected keys are disabled on this host.
        """
        if not self.config.ALLOW_USER_API_KEYS:
            raise ApiKeySelectionError("API key selection is disabled on this server.")

        api_key = (api_key or "").strip()
        with _lock:
            if api_key:
                _session_keys[self.session_id] = api_key
                _session_keys.move_to_end(self.session_id)
                while len(_session_keys) > max(1, self.config.MAX_SESSIONS):
                    _session_keys.popitem(last=False)
            else:
                _session_keys.pop(self.session_id, None)
        logger.info(
            f"API key selection completed for session {self.session_id} "
            f"(key provided: {bool(api_key)})"
        )
