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

import streamlit as st

from bhujal_reports import WizardController


# --- Question Steps ---
def render_question_step(wizard: WizardController):
    """
    Renders the question at the wizard's current step as a radio group.

    The option already stored in the form for this question (if any) is
    pre-selected, so going back and forth between steps keeps the answers.
    Choosing an option writes it to the form through the controller, which
    also clears any error currently shown.
    """
    question = wizard.current_question
    if question is None:
        return

    selected = wizard.selected_value(question)
    index = question.options.index(selected) if selected in question.options else None

    choice = st.radio(
        question.text,
        question.options,
        index=index,
        key=f"question_{question.id.value}",
    )
    if choice is not None and choice != selected:
        wizard.select_option(question.id, choice)
