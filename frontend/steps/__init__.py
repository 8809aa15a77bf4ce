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
Package for UI rendering functions of the wizard's views.

Each module defines one function that draws a single view of the
`WizardController` (a question, the location and parameter details, or the
generated report) and forwards user input back to the controller. The
controller decides which view is current; `app.py` picks the renderer.
"""

from .question_step import render_question_step
from .details_step import render_details_step
from .result_step import render_result_step

__all__ = [
    "render_question_step",
    "render_details_step",
    "render_result_step",
]
