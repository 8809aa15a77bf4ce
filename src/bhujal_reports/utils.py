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

import json
import re
from typing import Any


def strip_think_tags(text: str) -> str:
    """
    Remove <think>...</think> reasoning blocks emitted by reasoning models.
    """
    while "<think>" in text and "</think>" in text:
        start = text.find("<think>")
        end = text.find("</think>") + len("</think>")
        text = text[:start] + text[end:]

    # Handle case where opening <think> tag might be missing
    while "</think>" in text:
        end = text.find("</think>") + len("</think>")
        text = text[end:]

    return text.strip()


def extract_json_object(text: str) -> dict[str, Any]:
    """
    Parse the first JSON object found in a model reply.

    Replies are often wrapped in ```json fences or preceded by a sentence of
    prose, so everything outside the outermost braces is ignored.

    Raises:
        ValueError: if the text holds no JSON object.
    """
    text = strip_think_tags(text)
    fenced = re.search(r"```(?:json)?\s*(.*?)```", text, flags=re.DOTALL)
    if fenced:
        text = fenced.group(1)

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        raise ValueError("No JSON object found in model reply")

    data = json.loads(text[start:end + 1])
    if not isinstance(data, dict):
        raise ValueError("Model reply is not a JSON object")
    return data


def get_domain(url: str) -> str:
    """
    Extract the domain from a URL.
    """
    parts = url.split("/")
    if len(parts) < 3:
        return url
    domain = parts[2]
    return domain.replace("www.", "") if domain.startswith("www.") else domain


def slugify(text: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")
    return slug or "report"
