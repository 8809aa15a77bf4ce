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


# --- Details Step ---
def render_details_step(wizard: WizardController):
    """
    Renders the location input and the parameter checklist.

    This is the last step before generation. The location is stored exactly
    as typed; the parameter checkboxes toggle entries of the form's parameter
    list, keeping the order in which they were picked. Any edit clears the
    error banner through the controller.
    """
    form = wizard.form_data

    st.markdown("#### Enter Location Details")
    location = st.text_input(
        "Location:",
        value=form.location,
        placeholder="Enter precise location (e.g., City, District, State)",
        key="location_input",
        disabled=wizard.is_generating,
    )
    if location != form.location:
        wizard.set_location(location)

    st.markdown("#### Select Parameters")
    cols = st.columns(2)
    for idx, parameter in enumerate(wizard.parameter_catalog):
        with cols[idx % 2]:
            checked = st.checkbox(
                parameter,
                value=parameter in form.parameters,
                key=f"parameter_{idx}",
                disabled=wizard.is_generating,
            )
        if checked != (parameter in form.parameters):
            wizard.toggle_parameter(parameter)

    selected = wizard.form_data.parameters
    if selected:
        st.caption(f"Selected: {', '.join(selected)}")
