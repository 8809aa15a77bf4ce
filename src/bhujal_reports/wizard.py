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
Wizard controller for the groundwater report questionnaire.

The controller owns all state of one wizard session:

1.  **Question steps**: one step per entry of the question catalog. The user
    picks an option; "Next" is gated on the step's field being filled in.
2.  **Details step**: free-text location plus a parameter checklist. The
    generate action is gated on a non-blank location, at least one parameter,
    and no request already in flight.
3.  **Result**: entered only when the report service returns a report. It is
    terminal for the session; only the PDF download remains actionable.

The report service, the report renderer and the config provider are handed in
at construction so tests can substitute doubles for them. Failures from either
collaborator are turned into a single user-visible `error` message, which any
edit of the form clears again.
"""
import logging
from enum import Enum
from typing import Sequence

from bhujal_reports.config import ConfigProvider
from bhujal_reports.constants import (
    QUESTIONS, PARAMETERS,
    LOCATION_REQUIRED_MESSAGE, GENERATE_FAILED_MESSAGE, DOWNLOAD_FAILED_MESSAGE,
)
from bhujal_reports.report_renderer import ReportRenderer
from bhujal_reports.report_service import ReportService
from bhujal_reports.schema import FormData, ProcessedReport, Question, QuestionId, ReportArtifact

logger = logging.getLogger(__name__)


class WizardView(str, Enum):
    """What the UI should render for the current state."""
    QUESTION = "question"
    DETAILS = "details"
    RESULT = "result"


class WizardStage(str, Enum):
    QUESTION = "question"
    DETAILS = "details"
    GENERATING = "generating"
    RESULT = "result"


class WizardController:

    def __init__(
        self,
        report_service: ReportService,
        report_renderer: ReportRenderer,
        config: ConfigProvider,
        questions: Sequence[Question] = QUESTIONS,
        parameter_catalog: Sequence[str] = PARAMETERS,
    ):
        self.report_service = report_service
        self.report_renderer = report_renderer
        self.config = config
        self.questions = tuple(questions)
        self.parameter_catalog = tuple(parameter_catalog)

        self._current_step = 0
        self._form_data = FormData()
        self._is_generating = False
        self._error: str | None = None
        self._report_data: ProcessedReport | None = None
        self._download_artifact: ReportArtifact | None = None
        self._mounted = True

    # --- Read-only state ---
    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def form_data(self) -> FormData:
        return self._form_data.model_copy(deep=True)

    @property
    def is_generating(self) -> bool:
        return self._is_generating

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def report_data(self) -> ProcessedReport | None:
        return self._report_data

    @property
    def download_artifact(self) -> ReportArtifact | None:
        return self._download_artifact

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question | None:
        if self._current_step < self.question_count:
            return self.questions[self._current_step]
        return None

    def selected_value(self, question: Question) -> str | None:
        """Value already stored for `question`, used to pre-select its option."""
        return self._form_data.get_answer(question.id) or None

    @property
    def view(self) -> WizardView:
        if self._report_data is not None:
            return WizardView.RESULT
        if self._current_step == self.question_count:
            return WizardView.DETAILS
        return WizardView.QUESTION

    @property
    def stage(self) -> WizardStage:
        view = self.view
        if view == WizardView.RESULT:
            return WizardStage.RESULT
        if view == WizardView.DETAILS:
            return WizardStage.GENERATING if self._is_generating else WizardStage.DETAILS
        return WizardStage.QUESTION

    @property
    def progress(self) -> float:
        # The details and result screens count as the two extra steps.
        return min(1.0, (self._current_step + 1) / (self.question_count + 2))

    # --- Gating ---
    @property
    def can_go_previous(self) -> bool:
        return self._report_data is None and self._current_step > 0

    @property
    def can_go_next(self) -> bool:
        question = self.current_question
        if self._report_data is not None or question is None:
            return False
        return bool(self._form_data.get_answer(question.id))

    @property
    def can_generate(self) -> bool:
        return (
            self.view == WizardView.DETAILS
            and not self._is_generating
            and len(self._form_data.parameters) > 0
            and bool(self._form_data.location.strip())
        )

    # --- Form edits ---
    def select_option(self, question_id: QuestionId, value: str) -> None:
        self._form_data.set_answer(QuestionId(question_id), value)
        self._error = None

    def set_location(self, value: str) -> None:
        self._form_data.location = value
        self._error = None

    def toggle_parameter(self, name: str) -> None:
        if name in self._form_data.parameters:
            self._form_data.parameters.remove(name)
        else:
            self._form_data.parameters.append(name)
        self._error = None

    # --- Navigation ---
    def go_to_step(self, delta: int) -> None:
        if delta < 0 and not self.can_go_previous:
            return
        if delta > 0 and not self.can_go_next:
            return
        self._current_step += delta
        logger.debug("Moved to step %d (%s)", self._current_step, self.view.value)

    # --- Actions ---
    def generate_report(self) -> bool:
        """
        Ask the report service for a report built from the current form.

        A blank location is reported as a validation error without contacting
        the service. When the action is otherwise unavailable (a request already
        in flight, or no parameters selected) nothing happens.

        Returns:
            bool: `True` if a report was received and the wizard moved to the
                result view, `False` otherwise.
        """
        if not self._form_data.location.strip():
            self._error = LOCATION_REQUIRED_MESSAGE
            return False
        if not self.can_generate:
            return False

        self._is_generating = True
        self._error = None
        logger.debug("Generating report for %s", self._form_data.location.strip())
        try:
            report = self.report_service.generate_report(self.form_data, self.config.get_api_key())
        except Exception as e:
            if not self._mounted:
                logger.debug("Discarding report failure after unmount: %s", e)
                return False
            self._error = str(e) or GENERATE_FAILED_MESSAGE
            return False
        finally:
            self._is_generating = False

        if not self._mounted:
            logger.debug("Discarding report received after unmount")
            return False
        self._report_data = report
        logger.debug("Wizard reached the result view")
        return True

    def download_report(self) -> ReportArtifact | None:
        """
        Export the received report through the renderer.

        Returns:
            ReportArtifact | None: The file to offer for download, or `None` if
                there is no report yet or the export failed (in which case
                `error` is set).
        """
        if self._report_data is None:
            return None
        try:
            artifact = self.report_renderer.download_report_as_pdf(self._report_data)
        except Exception as e:
            logger.debug("Report download failed: %s", e)
            self._error = DOWNLOAD_FAILED_MESSAGE
            return None
        self._download_artifact = artifact
        return artifact

    def unmount(self) -> None:
        """End the session; results that arrive afterwards are discarded."""
        self._mounted = False
