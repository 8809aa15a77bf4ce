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
Report service backed by the Perplexity chat completions API.

The service turns a completed wizard form into a prompt, sends a single
request to the API, and validates the JSON reply into a `ProcessedReport`.
Every failure (missing credential, network error, HTTP error status, malformed
reply) is raised as a `ReportServiceError` whose message is suitable for
showing to the user as-is. There is no retry: one request per generate action.
"""
import json
import logging
from typing import Any, Protocol

import requests
from pydantic import ValidationError

from bhujal_reports.config import Settings
from bhujal_reports.prompts import report_system_prompt, report_writer_instructions
from bhujal_reports.schema import FormData, ProcessedReport
from bhujal_reports.exceptions import ReportServiceError
from bhujal_reports.utils import extract_json_object

logger = logging.getLogger(__name__)

MALFORMED_RESPONSE_MESSAGE = "Malformed response from report service"


class ReportService(Protocol):
    def generate_report(self, form_data: FormData, api_key: str) -> ProcessedReport:
        ...


def build_messages(form_data: FormData) -> list[dict[str, str]]:
    user_input = report_writer_instructions.format(
        report_type=form_data.report_type or "groundwater report",
        location=form_data.location.strip(),
        period=form_data.period or "the most recent data available",
        parameters="\n".join(f"- {p}" for p in form_data.parameters),
    )
    return [
        {"role": "system", "content": report_system_prompt},
        {"role": "user", "content": user_input},
    ]


def _error_detail(response: requests.Response) -> str | None:
    """
    Pull a human readable message out of an error response, if there is one.
    """
    try:
        error_data = response.json()
    except ValueError:
        return None
    if not isinstance(error_data, dict):
        return None
    error = error_data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    detail = error_data.get("detail")
    if detail:
        return str(detail)
    return None


def _raise_for_status(response: requests.Response) -> None:
    status = response.status_code
    if status < 400:
        return
    if status in (401, 403):
        message = "Invalid Perplexity API key"
    elif status == 429:
        message = "rate limited"
    else:
        message = _error_detail(response) or f"Report service returned HTTP {status}"
    logger.warning("Report request failed with HTTP %s: %s", status, message)
    raise ReportServiceError(message, status_code=status)


def parse_report(response_data: Any, form_data: FormData, model: str) -> ProcessedReport:
    """
    Validate a chat completions response body into a `ProcessedReport`.

    The request metadata (report type, location, period, parameters) is copied
    from the form rather than trusted from the model reply.

    Raises:
        ReportServiceError: if the body has no message content or the content is
            not a JSON object with at least a summary.
    """
    try:
        content = response_data["choices"][0]["message"]["content"]
        report_json = extract_json_object(content)
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.warning("Could not parse report reply: %s", e)
        raise ReportServiceError(MALFORMED_RESPONSE_MESSAGE) from e

    citations = response_data.get("citations") or []
    try:
        return ProcessedReport(
            title=report_json.get("title") or f"{form_data.report_type}: {form_data.location.strip()}",
            report_type=form_data.report_type,
            location=form_data.location.strip(),
            period=form_data.period,
            parameters=list(form_data.parameters),
            summary=report_json["summary"],
            sections=report_json.get("sections") or [],
            parameter_findings=report_json.get("parameter_findings") or [],
            recommendations=report_json.get("recommendations") or [],
            citations=[str(c) for c in citations if c],
            model=response_data.get("model") or model,
        )
    except (KeyError, ValidationError) as e:
        logger.warning("Report reply failed validation: %s", e)
        raise ReportServiceError(MALFORMED_RESPONSE_MESSAGE) from e


class PerplexityReportService:
    """
    Generates groundwater reports with a single Perplexity chat completion.

    Args:
        base_url (str): Root URL of the API, without the `/chat/completions` path.
        model (str): Model name sent with each request.
        timeout (float): HTTP timeout in seconds.
        session (requests.Session | None): HTTP session to send requests with.
            A new session is created when omitted.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout: float,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    def generate_report(self, form_data: FormData, api_key: str) -> ProcessedReport:
        if not api_key:
            raise ReportServiceError("Perplexity API key is not configured")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        payload = {
            "model": self.model,
            "messages": build_messages(form_data),
            "temperature": 0.2,
        }

        logger.info(
            "Requesting %s for %s (%d parameters)",
            form_data.report_type, form_data.location.strip(), len(form_data.parameters),
        )
        try:
            response = self.session.post(self.url, headers=headers, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Report request could not be sent: %s", e)
            raise ReportServiceError(f"Could not reach the report service: {e}") from e

        _raise_for_status(response)

        try:
            response_data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Report response is not JSON: %s", e)
            raise ReportServiceError(MALFORMED_RESPONSE_MESSAGE) from e

        report = parse_report(response_data, form_data, self.model)
        logger.info("Report generated for %s with %d sections", report.location, len(report.sections))
        return report


def create_report_service(settings: Settings) -> PerplexityReportService:
    return PerplexityReportService(
        base_url=settings.base_url,
        model=settings.model,
        timeout=settings.timeout,
    )
