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
from streamlit_extras.stylable_container import stylable_container

from bhujal_reports.schema import ProcessedReport
from bhujal_reports.utils import get_domain


def report_view(report: ProcessedReport, height: int = 600) -> None:
    """
    Renders a processed report inside a scrollable container.

    Args:
        report (ProcessedReport): The report returned by the report service.
        height (int): Height of the scrollable area in pixels. Defaults to 600.
    """
    st.markdown(f"### {report.title}")
    meta_cols = st.columns(3)
    meta_cols[0].metric("Report Type", report.report_type)
    meta_cols[1].metric("Location", report.location)
    meta_cols[2].metric("Period", report.period)

    with stylable_container(
        key="report-scroll-container",
        css_styles=f"""
            {{
                max-height: {height}px;
                overflow-y: auto;
                overflow-x: hidden;
                padding: 10px;
            }}
            """,
    ):
        st.markdown("#### Summary")
        st.markdown(report.summary)

        if report.parameter_findings:
            st.markdown("#### Parameter Findings")
            st.table([
                {
                    "Parameter": finding.parameter,
                    "Value": finding.value,
                    "Status": finding.status,
                    "Remarks": finding.remarks,
                }
                for finding in report.parameter_findings
            ])

        for section in report.sections:
            st.markdown(f"#### {section.heading}")
            st.markdown(section.content)

        if report.recommendations:
            st.markdown("#### Recommendations")
            st.markdown("\n".join(f"{idx}. {rec}" for idx, rec in enumerate(report.recommendations, start=1)))

        if report.citations:
            st.markdown("#### Sources")
            st.markdown("\n".join(
                f"{idx}. [{get_domain(url)}]({url})" for idx, url in enumerate(report.citations, start=1)
            ))

    st.caption(f"Generated {report.generated_at:%Y-%m-%d %H:%M} UTC with {report.model}")
