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

import logging

# Dedicated logger for tracking the suppressed error
race_condition_logger = logging.getLogger("naturesfresh.race_condition_tracker")

# Message the provider returns when the selected API key is no longer valid.
API_KEY_NOT_FOUND_SIGNAL = "Requested entity was not found"


class GenerationError(Exception):
    """Custom exception for video generation errors."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class ApiKeySelectionError(Exception):
    """Raised when the host API key selection flow fails."""
    pass


def is_api_key_not_found_error(message: str | None) -> bool:
    """True when an error message signals an invalidated API key."""
    return bool(message) and API_KEY_NOT_FOUND_SIGNAL in message


class UnknownHandlerIdFilter(logging.Filter):
    """A logging filter to suppress Mesop's benign 'Unknown handler id' errors."""

    def filter(self, record):
        if "Unknown handler id" in record.getMessage():
            race_condition_logger.info(
                "Suppressed 'Unknown handler id' error",
                extra={"original_record": record.getMessage()},
            )
            return False
        return True
