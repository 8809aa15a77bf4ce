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

import io
import logging
from typing import Protocol

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from bhujal_reports.constants import PDF_MIME_TYPE, REPORT_DISCLAIMER
from bhujal_reports.exceptions import ReportExportError
from bhujal_reports.schema import ProcessedReport, ReportArtifact
from bhujal_reports.utils import slugify

logger = logging.getLogger(__name__)

MARGIN = 40
LINE_HEIGHT = 14
BODY_FONT = ("Helvetica", 10)
HEADING_FONT = ("Helvetica-Bold", 12)
TITLE_FONT = ("Helvetica-Bold", 16)


class ReportRenderer(Protocol):
    def download_report_as_pdf(self, report: ProcessedReport) -> ReportArtifact:
        ...


def report_file_name(report: ProcessedReport) -> str:
    return f"bhujal_report_{slugify(report.location)}_{report.generated_at:%Y%m%d}.pdf"


class _PageWriter:
    """Writes wrapped lines top to bottom, starting a new page when one fills up."""

    def __init__(self, pdf: canvas.Canvas):
        self.pdf = pdf
        self.width, self.height = A4
        self.y = self.height - MARGIN - 10

    def line(self, text: str, font: tuple[str, int] = BODY_FONT, indent: int = 0) -> None:
        max_width = self.width - 2 * MARGIN - indent
        for chunk in simpleSplit(text, font[0], font[1], max_width) or [""]:
            if self.y < MARGIN + 30:
                self.pdf.showPage()
                self.y = self.height - MARGIN - 10
            self.pdf.setFont(*font)
            self.pdf.drawString(MARGIN + indent, self.y, chunk)
            self.y -= LINE_HEIGHT

    def paragraph(self, text: str, indent: int = 0) -> None:
        for line in text.splitlines() or [""]:
            self.line(line, indent=indent)

    def heading(self, text: str) -> None:
        self.gap()
        self.line(text, HEADING_FONT)

    def gap(self) -> None:
        self.y -= LINE_HEIGHT // 2


class PdfReportRenderer:
    """Renders processed reports as A4 PDF documents with reportlab."""

    def render(self, report: ProcessedReport) -> bytes:
        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        pdf.setTitle(report.title)
        writer = _PageWriter(pdf)

        writer.line(report.title, TITLE_FONT)
        writer.gap()
        writer.line(f"Report type: {report.report_type}")
        writer.line(f"Location: {report.location}")
        writer.line(f"Period: {report.period}")
        writer.line(f"Parameters: {', '.join(report.parameters)}")
        writer.line(f"Generated: {report.generated_at:%Y-%m-%d %H:%M} UTC")

        writer.heading("Summary")
        writer.paragraph(report.summary)

        if report.parameter_findings:
            writer.heading("Parameter Findings")
            for finding in report.parameter_findings:
                status = f" ({finding.status})" if finding.status else ""
                writer.line(f"{finding.parameter}: {finding.value}{status}")
                if finding.remarks:
                    writer.line(finding.remarks, indent=12)

        for section in report.sections:
            writer.heading(section.heading)
            writer.paragraph(section.content)

        if report.recommendations:
            writer.heading("Recommendations")
            for idx, recommendation in enumerate(report.recommendations, start=1):
                writer.line(f"{idx}. {recommendation}")

        if report.citations:
            writer.heading("Sources")
            for idx, citation in enumerate(report.citations, start=1):
                writer.line(f"[{idx}] {citation}")

        pdf.setFont("Helvetica-Oblique", 8)
        pdf.drawString(MARGIN, MARGIN, REPORT_DISCLAIMER)
        pdf.showPage()
        pdf.save()
        pdf_bytes = buffer.getvalue()
        buffer.close()
        return pdf_bytes

    def download_report_as_pdf(self, report: ProcessedReport) -> ReportArtifact:
        try:
            data = self.render(report)
        except Exception as e:
            logger.warning("PDF export failed for %s: %s", report.location, e)
            raise ReportExportError(f"Could not render report as PDF: {e}") from e

        file_name = report_file_name(report)
        logger.debug("Rendered %s (%d bytes)", file_name, len(data))
        return ReportArtifact(file_name=file_name, mime_type=PDF_MIME_TYPE, data=data)
