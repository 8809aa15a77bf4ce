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
from unittest.mock import Mock

import pytest
import requests

from bhujal_reports.config import Settings
from bhujal_reports.exceptions import ReportServiceError
from bhujal_reports.report_service import (
    PerplexityReportService, build_messages, create_report_service,
)
from bhujal_reports.schema import FormData

from conftest import TEST_API_KEY

REPORT_JSON = {
    "title": "Water Quality Assessment: Jaipur",
    "summary": "Fluoride exceeds the permissible limit in several blocks.",
    "parameter_findings": [
        {"parameter": "pH Level", "value": "7.2 - 8.1", "status": "Within limits", "remarks": ""},
        {"parameter": "Fluoride Level", "value": "0.8 - 2.4 mg/L", "status": "Exceeds permissible limit"},
    ],
    "sections": [{"heading": "Hydrogeological Setting", "content": "Alluvium over hard rock."}],
    "recommendations": ["Install defluoridation units"],
}

FORM = FormData(
    report_type="Water Quality Assessment",
    location=" Jaipur ",
    period="Last 1 year",
    parameters=["pH Level", "Fluoride Level"],
)


def make_response(status_code: int, body) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


def completion(content: str, citations=None) -> dict:
    body = {
        "id": "cmpl-1",
        "model": "sonar",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }
    if citations is not None:
        body["citations"] = citations
    return body


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def service(session):
    return PerplexityReportService(
        base_url="https://api.perplexity.test/",
        model="sonar",
        timeout=12.5,
        session=session,
    )


def test_request_shape(service, session):
    """The request goes to /chat/completions with a bearer token and the form in the prompt."""
    session.post.return_value = make_response(200, completion(json.dumps(REPORT_JSON)))

    service.generate_report(FORM, TEST_API_KEY)

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == "https://api.perplexity.test/chat/completions"
    assert kwargs["headers"]["Authorization"] == f"Bearer {TEST_API_KEY}"
    assert kwargs["timeout"] == 12.5
    payload = kwargs["json"]
    assert payload["model"] == "sonar"
    assert [m["role"] for m in payload["messages"]] == ["system", "user"]
    user_prompt = payload["messages"][1]["content"]
    assert "Water Quality Assessment" in user_prompt
    assert "Jaipur" in user_prompt
    assert "Last 1 year" in user_prompt
    assert "- pH Level\n- Fluoride Level" in user_prompt


def test_report_is_parsed(service, session):
    session.post.return_value = make_response(
        200, completion(json.dumps(REPORT_JSON), citations=["https://cgwb.gov.in/a", "https://indiawris.gov.in/b"])
    )

    report = service.generate_report(FORM, TEST_API_KEY)

    assert report.title == "Water Quality Assessment: Jaipur"
    assert report.location == "Jaipur"
    assert report.report_type == "Water Quality Assessment"
    assert report.period == "Last 1 year"
    assert report.parameters == ["pH Level", "Fluoride Level"]
    assert report.summary.startswith("Fluoride exceeds")
    assert [f.parameter for f in report.parameter_findings] == ["pH Level", "Fluoride Level"]
    assert report.parameter_findings[1].remarks == ""
    assert report.sections[0].heading == "Hydrogeological Setting"
    assert report.recommendations == ["Install defluoridation units"]
    assert report.citations == ["https://cgwb.gov.in/a", "https://indiawris.gov.in/b"]
    assert report.model == "sonar"
    assert report.generated_at.tzinfo is not None


def test_fenced_reply_with_reasoning(service, session):
    content = "<think>\nlooking up CGWB data\n</think>\nHere is the report:\n```json\n" + json.dumps(REPORT_JSON) + "\n```"
    session.post.return_value = make_response(200, completion(content))

    report = service.generate_report(FORM, TEST_API_KEY)

    assert report.summary == REPORT_JSON["summary"]
    assert report.citations == []


def test_title_defaults_from_form(service, session):
    session.post.return_value = make_response(200, completion(json.dumps({"summary": "Stable levels."})))

    report = service.generate_report(FORM, TEST_API_KEY)

    assert report.title == "Water Quality Assessment: Jaipur"
    assert report.sections == []


def test_empty_api_key_is_rejected_without_request(service, session):
    with pytest.raises(ReportServiceError, match="API key is not configured"):
        service.generate_report(FORM, "")
    session.post.assert_not_called()


@pytest.mark.parametrize("status_code, body, message", [
    (401, {"error": {"message": "Invalid API key provided"}}, "Invalid Perplexity API key"),
    (403, b"forbidden", "Invalid Perplexity API key"),
    (429, {"error": {"message": "Too many requests"}}, "rate limited"),
    (400, {"error": {"message": "Invalid model 'foo'", "type": "invalid_model"}}, "Invalid model 'foo'"),
    (422, {"detail": "messages must alternate"}, "messages must alternate"),
    (503, b"<html>Service Unavailable</html>", "Report service returned HTTP 503"),
])
def test_http_errors(service, session, status_code, body, message):
    session.post.return_value = make_response(status_code, body)

    with pytest.raises(ReportServiceError) as exc_info:
        service.generate_report(FORM, TEST_API_KEY)

    assert str(exc_info.value) == message
    assert exc_info.value.status_code == status_code


def test_network_error(service, session):
    session.post.side_effect = requests.exceptions.ConnectionError("connection refused")

    with pytest.raises(ReportServiceError, match="Could not reach the report service: connection refused"):
        service.generate_report(FORM, TEST_API_KEY)


@pytest.mark.parametrize("body", [
    b"not json at all",
    {"choices": []},
    {"choices": [{"message": {}}]},
    completion("I could not find any data for this location."),
    completion(json.dumps(["not", "an", "object"])),
    completion(json.dumps({"title": "No summary"})),
    completion(json.dumps({"summary": "ok", "sections": [{"heading": "Missing content"}]})),
])
def test_malformed_responses(service, session, body):
    session.post.return_value = make_response(200, body)

    with pytest.raises(ReportServiceError, match="Malformed response from report service"):
        service.generate_report(FORM, TEST_API_KEY)


def test_build_messages_fills_gaps():
    messages = build_messages(FormData(location="Nagpur", parameters=["Recharge Rate"]))
    assert "groundwater report" in messages[1]["content"]
    assert "the most recent data available" in messages[1]["content"]


def test_create_report_service_uses_settings():
    service = create_report_service(Settings(base_url="https://example.test", model="sonar-pro", timeout=5))
    assert service.url == "https://example.test/chat/completions"
    assert service.model == "sonar-pro"
    assert service.timeout == 5
