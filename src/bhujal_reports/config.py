# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Configuration for the report assistant.

Values come from environment variables, optionally loaded from a `.env` file
with `python-dotenv`. The API key is exposed through a small provider interface
so the wizard can be handed a deterministic value in tests instead of reading
the environment inline.
"""
import logging
import os
from typing import Protocol

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from bhujal_reports.constants import (
    API_KEY_ENV, BASE_URL_ENV, MODEL_ENV, TIMEOUT_ENV, LOG_LEVEL_ENV,
    DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_TIMEOUT, DEFAULT_LOG_LEVEL,
)


class ConfigProvider(Protocol):
    def get_api_key(self) -> str:
        """Return the API credential, or an empty string when none is configured."""
        ...


class EnvConfigProvider:
    """
    Reads the API key from the process environment.

    The variable is looked up on every call so a key added to the environment
    (or to `.env` before the provider is built) is picked up by the next
    generate action. A missing key is returned as an empty string; rejecting it
    is left to the report service.
    """

    def __init__(self, env_var: str = API_KEY_ENV, dotenv_path: str | None = None):
        self.env_var = env_var
        load_dotenv(dotenv_path=dotenv_path)

    def get_api_key(self) -> str:
        return os.getenv(self.env_var) or ""


class StaticConfigProvider:
    def __init__(self, api_key: str = ""):
        self.api_key = api_key

    def get_api_key(self) -> str:
        return self.api_key


class Settings(BaseModel):
    base_url: str = Field(DEFAULT_BASE_URL, description="Root URL of the chat completions API")
    model: str = Field(DEFAULT_MODEL, description="Model used to write the report")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds")
    log_level: str = Field(DEFAULT_LOG_LEVEL)

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            base_url=os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL,
            model=os.getenv(MODEL_ENV) or DEFAULT_MODEL,
            timeout=os.getenv(TIMEOUT_ENV) or DEFAULT_TIMEOUT,
            log_level=os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL,
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
