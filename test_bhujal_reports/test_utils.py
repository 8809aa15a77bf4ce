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

import pytest

from bhujal_reports.constants import PARAMETERS, QUESTIONS
from bhujal_reports.schema import FormData, QuestionId
from bhujal_reports.utils import extract_json_object, get_domain, slugify, strip_think_tags


def test_strip_think_tags():
    assert strip_think_tags("<think>plan</think>\nAnswer") == "Answer"
    assert strip_think_tags("a <think>x</think> b <think>y</think> c") == "a  b  c"
    # opening tag cut off by the stream
    assert strip_think_tags("still thinking</think>Answer") == "Answer"
    assert strip_think_tags("no tags") == "no tags"


@pytest.mark.parametrize("text", [
    '{"summary": "ok"}',
    'Sure! Here it is: {"summary": "ok"} Hope this helps.',
    '```json\n{"summary": "ok"}\n```',
    '```\n{"summary": "ok"}\n```',
    '<think>{"draft": true}</think>{"summary": "ok"}',
])
def test_extract_json_object(text):
    assert extract_json_object(text) == {"summary": "ok"}


@pytest.mark.parametrize("text", ["", "no json here", "[1, 2, 3]", "{not valid json}"])
def test_extract_json_object_rejects(text):
    with pytest.raises(ValueError):
        extract_json_object(text)


def test_get_domain():
    assert get_domain("https://www.cgwb.gov.in/reports/2023.pdf") == "cgwb.gov.in"
    assert get_domain("http://indiawris.gov.in") == "indiawris.gov.in"
    assert get_domain("not a url") == "not a url"


def test_slugify():
    assert slugify("Jaipur, Rajasthan") == "jaipur_rajasthan"
    assert slugify("") == "report"


def test_catalogs():
    assert [q.id for q in QUESTIONS] == [QuestionId.REPORT_TYPE, QuestionId.PERIOD]
    assert all(len(q.options) == 4 for q in QUESTIONS)
    assert len(PARAMETERS) == 8
    assert len(set(PARAMETERS)) == 8


def test_form_answers_by_question_id():
    form = FormData()
    form.set_answer(QuestionId.PERIOD, "Last 5 years")
    form.set_answer(QuestionId.REPORT_TYPE, "Aquifer Characterization")
    assert form.get_answer(QuestionId.PERIOD) == "Last 5 years"
    assert form.get_answer(QuestionId.REPORT_TYPE) == "Aquifer Characterization"
    assert form.model_dump(by_alias=True) == {
        "reportType": "Aquifer Characterization",
        "location": "",
        "period": "Last 5 years",
        "parameters": [],
    }
