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
from components.report_view import report_view
from utils.session import reset_wizard


# --- Result ---
def render_result_step(wizard: WizardController):
    """
    Renders the generated report and its export actions.

    The result view is terminal for the wizard session: the form can no longer
    be navigated. "Export PDF" asks the controller to render the report; once a
    file is available a download button is shown for it. "Start a new report"
    unmounts this wizard and mounts an empty one.
    """
    report = wizard.report_data
    if report is None:
        st.info("The report has not been generated yet.")
        return

    report_view(report)

    cols = st.columns([1, 1, 2])
    with cols[0]:
        if st.button("📄 Export PDF", use_container_width=True, key="export_pdf_button"):
            with st.spinner("Rendering PDF..."):
                wizard.download_report()
            st.rerun()
    with cols[1]:
        artifact = wizard.download_artifact
        if artifact is not None:
            st.download_button(
                label="Download PDF",
                type="primary",
                data=artifact.data,
                file_name=artifact.file_name,
                mime=artifact.mime_type,
                use_container_width=True,
            )
    with cols[2]:
        if st.button("↺ Start a new report", type="secondary", key="new_report_button"):
            reset_wizard()
            st.rerun()
