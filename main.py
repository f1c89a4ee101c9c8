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
"""FastAPI entry point: serves in-memory media blobs and mounts the Mesop app."""

import logging

import mesop as me
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.wsgi import WSGIMiddleware

from common import media_store
from common.analytics import get_logger
from common.error_handling import UnknownHandlerIdFilter
from config.default import Default

# Register Mesop pages.
import pages.home  # noqa: F401  # pylint: disable=unused-import

config = Default()
logger = get_logger(__name__)

logging.getLogger("mesop").addFilter(UnknownHandlerIdFilter())

app = FastAPI()


@app.get("/blob/{blob_id}")
def get_blob(blob_id: str):
    """Streams a generated video or uploaded image held in memory."""
    stored = media_store.get_object(blob_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Media not found")
    return Response(
        content=stored.data,
        media_type=stored.mime_type,
        headers={"Cache-Control": "private, max-age=3600"},
    )


@app.get("/health")
def health():
    return {"status": "ok"}


app.mount(
    "/",
    WSGIMiddleware(
        me.create_wsgi_app(debug_mode=config.DEBUG_MODE)
    ),
)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {config.BRAND_NAME} on port {config.PORT}")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=config.DEBUG_MODE,
        reload_includes=["*.py", "*.js"],
        timeout_graceful_shutdown=0,
    )
