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
Groundwater report assistant.

Collects report parameters through a step-gated questionnaire
(`WizardController`), asks an AI summarization API for a report
(`PerplexityReportService`) and exports the result as PDF
(`PdfReportRenderer`).
"""

from .wizard import WizardController, WizardStage, WizardView
from .report_service import PerplexityReportService, create_report_service
from .report_renderer import PdfReportRenderer
from .config import EnvConfigProvider, StaticConfigProvider, Settings

__all__ = [
    "WizardController",
    "WizardStage",
    "WizardView",
    "PerplexityReportService",
    "create_report_service",
    "PdfReportRenderer",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "Settings",
]
