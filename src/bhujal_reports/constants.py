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

from bhujal_reports.schema import Question, QuestionId

##
# Question catalog shown one per wizard step
##
QUESTIONS: tuple[Question, ...] = (
    Question(
        id=QuestionId.REPORT_TYPE,
        text="What type of report do you need?",
        options=(
            "Groundwater Level Analysis",
            "Water Quality Assessment",
            "Aquifer Characterization",
            "Sustainability Analysis",
        ),
    ),
    Question(
        id=QuestionId.PERIOD,
        text="Select the time period for analysis",
        options=(
            "Last 6 months",
            "Last 1 year",
            "Last 5 years",
            "Last 10 years",
        ),
    ),
)

##
# Parameters offered on the details step
##
PARAMETERS: tuple[str, ...] = (
    "pH Level",
    "Total Dissolved Solids (TDS)",
    "Chloride Content",
    "Fluoride Level",
    "Nitrate Concentration",
    "Groundwater Level",
    "Recharge Rate",
    "Extraction Rate",
)

# User-visible error messages
LOCATION_REQUIRED_MESSAGE = "Please enter a location"
GENERATE_FAILED_MESSAGE = "Failed to generate report"
DOWNLOAD_FAILED_MESSAGE = "Failed to download PDF"

# Environment variables
API_KEY_ENV = "PERPLEXITY_API_KEY"
BASE_URL_ENV = "PERPLEXITY_BASE_URL"
MODEL_ENV = "PERPLEXITY_MODEL"
TIMEOUT_ENV = "REPORT_REQUEST_TIMEOUT"
LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_BASE_URL = "https://api.perplexity.ai"
DEFAULT_MODEL = "sonar"
DEFAULT_TIMEOUT = 60.0  # seconds
DEFAULT_LOG_LEVEL = "INFO"

PDF_MIME_TYPE = "application/pdf"
REPORT_DISCLAIMER = "AI-generated summary for pre-assessment only. Verify against field measurements before use."
