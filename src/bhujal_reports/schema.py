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

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionId(str, Enum):
    """Identifiers of the questionnaire steps."""
    REPORT_TYPE = "reportType"
    PERIOD = "period"


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: QuestionId = Field(..., description="Form field this question fills in")
    text: str = Field(..., description="Prompt shown to the user")
    options: tuple[str, ...] = Field(..., description="Selectable answers, in display order")


##
# Form collected by the wizard
##
class FormData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    report_type: str = Field("", alias="reportType")
    location: str = Field("", description="Free-text location, stored verbatim")
    period: str = Field("")
    parameters: list[str] = Field(default_factory=list, description="Selected parameters in selection order")

    def get_answer(self, question_id: QuestionId) -> str:
        if question_id == QuestionId.REPORT_TYPE:
            return self.report_type
        if question_id == QuestionId.PERIOD:
            return self.period
        raise ValueError(f"Unknown question id: {question_id}")

    def set_answer(self, question_id: QuestionId, value: str) -> None:
        if question_id == QuestionId.REPORT_TYPE:
            self.report_type = value
        elif question_id == QuestionId.PERIOD:
            self.period = value
        else:
            raise ValueError(f"Unknown question id: {question_id}")


##
# Report returned by the report service
##
class ReportSection(BaseModel):
    heading: str
    content: str


class ParameterFinding(BaseModel):
    parameter: str = Field(..., description="Name of the measured parameter")
    value: str = Field("", description="Observed value or range, with units")
    status: str = Field("", description="Assessment such as 'Within limits' or 'Critical'")
    remarks: str = Field("")


class ProcessedReport(BaseModel):
    title: str
    report_type: str
    location: str
    period: str
    parameters: list[str] = Field(default_factory=list)
    summary: str
    sections: list[ReportSection] = Field(default_factory=list)
    parameter_findings: list[ParameterFinding] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    citations: list[str] = Field(default_factory=list)
    model: str = ""
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ReportArtifact(BaseModel):
    """A downloadable file produced from a processed report."""
    file_name: str
    mime_type: str
    data: bytes
