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

"""In-memory object URLs for generated and uploaded media.

Blobs live only in this process and are served by the `/blob/{blob_id}`
route in main.py. Nothing is written to disk.

Each session owns its blobs. `MAX_CACHED_BLOBS` caps one session's blobs, so
uploads and results from other sessions never evict them. At most
`MAX_SESSIONS` sessions are kept; the least recently active one is dropped
as a whole.
"""

import threading
import uuid
from collections import OrderedDict
from typing import NamedTuple, Optional

from common.analytics import get_logger
from config.default import Default

OBJECT_URL_PREFIX = "/blob/"

logger = get_logger(__name__)


class StoredObject(NamedTuple):
    data: bytes
    mime_type: str


# session id -> blob id -> blob, both in least recently used order
_sessions: "OrderedDict[str, OrderedDict[str, StoredObject]]" = OrderedDict()
# blob id -> owning session id
_owners: dict[str, str] = {}
_lock = threading.Lock()


def _blob_id(url_or_id: str) -> str:
    if url_or_id.startswith(OBJECT_URL_PREFIX):
        return url_or_id[len(OBJECT_URL_PREFIX):]
    return url_or_id


def _drop_session(session_id: str) -> None:
    for blob_id in _sessions.pop(session_id, {}):
        _owners.pop(blob_id, None)


def create_object_url(data: bytes, mime_type: str, session_id: str = "") -> str:
    """Registers a blob for a session and returns a URL the browser can play it from."""
    blob_id = uuid.uuid4().hex
    config = Default()
    max_objects = max(1, config.MAX_CACHED_BLOBS)
    max_sessions = max(1, config.MAX_SESSIONS)
    with _lock:
        objects = _sessions.setdefault(session_id, OrderedDict())
        _sessions.move_to_end(session_id)
        objects[blob_id] = StoredObject(data, mime_type)
        _owners[blob_id] = session_id
        while len(objects) > max_objects:
            evicted, _ = objects.popitem(last=False)
            _owners.pop(evicted, None)
            logger.info(f"Evicted cached blob {evicted} of session {session_id}")
        while len(_sessions) > max_sessions:
            oldest = next(iter(_sessions))
            _drop_session(oldest)
            logger.info(f"Evicted cached blobs of inactive session {oldest}")
    return f"{OBJECT_URL_PREFIX}{blob_id}"


def get_object(url_or_id: str) -> Optional[StoredObject]:
    """Returns the stored blob for an object URL or bare id, if still cached."""
    if not url_or_id:
        return None
    blob_id = _blob_id(url_or_id)
    with _lock:
        session_id = _owners.get(blob_id)
        if session_id is None:
            return None
        _sessions.move_to_end(session_id)
        return _sessions[session_id][blob_id]


def revoke_object_url(url_or_id: str) -> None:
    """Releases a blob. Unknown URLs are ignored."""
    if not url_or_id:
        return
    blob_id = _blob_id(url_or_id)
    with _lock:
        session_id = _owners.pop(blob_id, None)
        if session_id is None:
            return
        objects = _sessions[session_id]
        objects.pop(blob_id, None)
        if not objects:
            del _sessions[session_id]
