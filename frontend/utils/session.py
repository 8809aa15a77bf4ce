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
Session-state helpers for the report wizard.

Streamlit reruns the whole script on every interaction, so the wizard
controller is kept in `st.session_state` and survives reruns for as long as
the browser session lives. The controller's collaborators (report service,
PDF renderer, config provider) are built here, once per session, and injected
into it.
"""
import streamlit as st

from bhujal_reports import (
    WizardController, PdfReportRenderer, EnvConfigProvider, Settings, create_report_service,
)

WIZARD_KEY = "wizard"
WIDGET_KEY_PREFIXES = ("question_", "parameter_", "location_input")


def build_wizard() -> WizardController:
    settings = st.session_state.get("settings") or Settings.from_env()
    return WizardController(
        report_service=create_report_service(settings),
        report_renderer=PdfReportRenderer(),
        config=EnvConfigProvider(),
    )


def get_wizard() -> WizardController:
    """
    Returns the wizard mounted for this session, mounting a new one if needed.
    """
    if WIZARD_KEY not in st.session_state:
        st.session_state[WIZARD_KEY] = build_wizard()
    return st.session_state[WIZARD_KEY]


def reset_wizard() -> WizardController:
    """
    Unmounts the current wizard and mounts a fresh one with an empty form.
    """
    wizard = st.session_state.pop(WIZARD_KEY, None)
    if wizard is not None:
        wizard.unmount()
    # Drop widget state so the new form starts empty.
    for key in list(st.session_state.keys()):
        if key.startswith(WIDGET_KEY_PREFIXES):
            del st.session_state[key]
    return get_wizard()
