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

import pytest

from bhujal_reports.config import StaticConfigProvider
from bhujal_reports.schema import (
    FormData, ParameterFinding, ProcessedReport, ReportArtifact, ReportSection,
)
from bhujal_reports.wizard import WizardController

TEST_API_KEY = "pplx-test-key"


def make_report(location: str = "Jaipur", parameters: list[str] | None = None) -> ProcessedReport:
    parameters = parameters if parameters is not None else ["pH Level", "Fluoride Level"]
    return ProcessedReport(
        title=f"Water Quality Assessment: {location}",
        report_type="Water Quality Assessment",
        location=location,
        period="Last 1 year",
        parameters=parameters,
        summary="Groundwater in the district is mostly potable with localized fluoride contamination.",
        sections=[ReportSection(heading="Hydrogeological Setting", content="Alluvium over hard rock.")],
        parameter_findings=[
            ParameterFinding(parameter="pH Level", value="7.2 - 8.1", status="Within limits"),
            ParameterFinding(parameter="Fluoride Level", value="0.8 - 2.4 mg/L", status="Exceeds permissible limit",
                             remarks="BIS 10500 permissible limit is 1.5 mg/L"),
        ],
        recommendations=["Install defluoridation units in affected blocks"],
        citations=["https://www.cgwb.gov.in/report.pdf"],
        model="sonar",
    )


class FakeReportService:
    """Records every call; returns `result` or raises `error`."""

    def __init__(self, result: ProcessedReport | None = None, error: Exception | None = None):
        self.result = result if result is not None else make_report()
        self.error = error
        self.calls: list[tuple[FormData, str]] = []
        self.on_call = None

    def generate_report(self, form_data: FormData, api_key: str) -> ProcessedReport:
        self.calls.append((form_data, api_key))
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.result


class FakeReportRenderer:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.rendered: list[ProcessedReport] = []

    def download_report_as_pdf(self, report: ProcessedReport) -> ReportArtifact:
        self.rendered.append(report)
        if self.error is not None:
            raise self.error
        return ReportArtifact(file_name="report.pdf", mime_type="application/pdf", data=b"%PDF-1.4 test")


@pytest.fixture
def report_service():
    return FakeReportService()


@pytest.fixture
def report_renderer():
    return FakeReportRenderer()


@pytest.fixture
def wizard(report_service, report_renderer):
    return WizardController(
        report_service=report_service,
        report_renderer=report_renderer,
        config=StaticConfigProvider(TEST_API_KEY),
    )


@pytest.fixture
def details_wizard(wizard):
    """A wizard with both questions answered, sitting on the details step."""
    wizard.select_option("reportType", "Water Quality Assessment")
    wizard.go_to_step(1)
    wizard.select_option("period", "Last 1 year")
    wizard.go_to_step(1)
    return wizard
