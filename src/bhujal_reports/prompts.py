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

report_system_prompt = """You are a hydrogeologist preparing groundwater reports for district water boards in India.
Use published government and scientific sources (CGWB, state groundwater departments, BIS 10500 drinking water limits) wherever possible.
If reliable data for a parameter cannot be found, say so in the findings instead of estimating.
Respond with a single JSON object and nothing else."""

report_writer_instructions = """Write a {report_type} for the location below.

# Location
{location}

# Time period
{period}

# Parameters to analyse
{parameters}

# Instructions
1. Summarise the groundwater situation for the location over the time period in 1-2 paragraphs.
2. Report one finding for each parameter listed above, with the observed value or range (with units) and a status.
3. Organise the rest of the analysis into sections with headings relevant to the report type.
4. Finish with practical recommendations for the local water authority.
5. Format your response as a JSON object with the following keys:
- "title": Title of the report
- "summary": Executive summary
- "parameter_findings": List of objects with "parameter", "value", "status" and "remarks"
- "sections": List of objects with "heading" and "content"
- "recommendations": List of strings

**Output example**
```json
{{
    "title": "Water Quality Assessment: Jaipur, Rajasthan",
    "summary": "Groundwater in Jaipur district ...",
    "parameter_findings": [
        {{
            "parameter": "Fluoride Level",
            "value": "0.8 - 2.4 mg/L",
            "status": "Exceeds permissible limit",
            "remarks": "BIS 10500 permissible limit is 1.5 mg/L"
        }}
    ],
    "sections": [
        {{
            "heading": "Hydrogeological Setting",
            "content": "..."
        }}
    ],
    "recommendations": ["Install defluoridation units in affected blocks"]
}}
```"""
