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

import uuid

import mesop as me


@me.stateclass
class AppState:
    """Mesop Application State"""

    session_id: str = ""
    current_page: str = "/"


def ensure_session(state: AppState) -> str:
    """Assigns a session id on first use and returns it."""
    if not state.session_id:
        state.session_id = str(uuid.uuid4())
    return state.session_id
