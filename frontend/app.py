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
Main Streamlit application file for the Bhujal groundwater report assistant.

The application walks the user through a step-by-step wizard:
1.  **Question Steps**: Report type, then time period, one question per step.
2.  **Details Step**: Location and the groundwater parameters to analyse.
3.  **Result**: The AI-generated report, with PDF export.

All wizard state lives in a `WizardController` kept in `st.session_state`
(see `utils/session.py`). This file only draws the page frame (header, error
banner, progress bar, navigation buttons) around the view the controller says
is current, and forwards button clicks to it.
"""
import streamlit as st
from dotenv import load_dotenv

from bhujal_reports import WizardView, Settings
from bhujal_reports.config import configure_logging
from utils.session import get_wizard

# Import step renderers from the steps package
from steps import (
    render_question_step,
    render_details_step,
    render_result_step,
)

from streamlit_extras.stylable_container import stylable_container

# Load environment variables from .env file, typically used for the API key.
load_dotenv()

# --- Page Configuration ---
st.set_page_config(
    page_title="AI Report Generation",
    page_icon="💧",
    layout="centered",
    menu_items={
        'About': """
        ## Bhujal AI Reports
        Generate customized groundwater analysis reports.
        """
    },
)


def init_session_state():
    """
    Initializes the session state variables shared by every rerun.

    - `settings`: API and logging settings read once per session from the environment.
    - `wizard`: The wizard controller for this session (created by `get_wizard`).
    """
    if 'settings' not in st.session_state:
        st.session_state.settings = Settings.from_env()
        configure_logging(st.session_state.settings.log_level)


def render_navigation(wizard):
    """
    Renders the Previous button and either Next or Generate Report.

    Each button is disabled exactly when the controller says its action is
    unavailable, so the gating rules live in one place.
    """
    nav_cols = st.columns([1, 3, 1.5])
    with nav_cols[0]:
        if st.button("Previous", use_container_width=True, key="prev_step_button",
                     disabled=not wizard.can_go_previous or wizard.is_generating):
            wizard.go_to_step(-1)
            st.rerun()

    with nav_cols[2]:
        if wizard.view == WizardView.QUESTION:
            if st.button("Next", type="primary", use_container_width=True, key="next_step_button",
                         disabled=not wizard.can_go_next):
                wizard.go_to_step(1)
                st.rerun()
        else:
            if st.button("Generate Report", type="primary", use_container_width=True,
                         key="generate_report_button", disabled=not wizard.can_generate):
                with st.spinner("Generating..."):
                    wizard.generate_report()
                st.rerun()


# --- Main Application Flow ---
def main():
    init_session_state()
    wizard = get_wizard()

    with stylable_container(
        key="page-title",
        css_styles="""
            {
                margin-bottom: 1rem !important;
            }
        """,
    ):
        st.title("AI Report Generation")
        st.caption("Generate customized groundwater analysis reports")

    # Filled in last, after the view has applied this rerun's edits (which clear the error).
    error_placeholder = st.empty()

    if wizard.view != WizardView.RESULT:
        st.progress(wizard.progress)

    # Dictionary mapping views to their respective rendering functions.
    view_renderers = {
        WizardView.QUESTION: render_question_step,
        WizardView.DETAILS: render_details_step,
        WizardView.RESULT: render_result_step,
    }
    view_renderers[wizard.view](wizard)

    if wizard.view != WizardView.RESULT:
        render_navigation(wizard)

    if wizard.error:
        error_placeholder.error(wizard.error, icon="⚠️")


if __name__ == "__main__":
    main()
