"""
Report export for Sell-or-Keep analyses.

Renders an analysis as a PDF summary (reportlab) and a CSV of the yearly
projections (pandas), and stores both through the configured storage
backend.
"""

import logging
from datetime import date
from io import BytesIO
from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape

import pandas as pd
from pydantic import BaseModel
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from property_planner.models.sell_or_keep import (
    Language,
    ScenarioId,
    SellOrKeepAnalysis,
    get_translations,
)
from property_planner.models.sell_or_keep.recommendation import format_euro
from property_planner.storage import StorageService, get_storage_service

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
CSV_CONTENT_TYPE = "text/csv"

GRID_STYLE = TableStyle(
    [
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.whitesmoke),
        ("FONT", (0, 0), (-1, 0), "Helvetica-Bold"),
    ]
)


class ExportedReport(BaseModel):
    """Storage keys of an exported report."""

    pdf_key: str
    csv_key: str
    language: Language
    generated_on: date


def format_percent(value: float) -> str:
    """Format a percentage with one decimal."""
    return f"{value:.1f}%"


def projections_frame(analysis: SellOrKeepAnalysis) -> pd.DataFrame:
    """Flatten the yearly projections into one row per year."""
    rows = [projection.model_dump() for projection in analysis.yearly_projections]
    return pd.json_normalize(rows, sep="_")


class SellOrKeepReportService:
    """Builds and stores PDF and CSV reports for an analysis."""

    def __init__(self, storage: Optional[StorageService] = None) -> None:
        """Initialize the report service.

        Args:
            storage: Storage backend; defaults to the globally configured one
        """
        self.storage = storage if storage is not None else get_storage_service()

    def build_pdf(
        self,
        analysis: SellOrKeepAnalysis,
        language: Language,
        generated_on: Optional[date] = None,
    ) -> bytes:
        """
        Render the analysis as an A4 PDF.

        Args:
            analysis: Completed analysis
            language: Label language
            generated_on: Date printed in the header (default today)

        Returns:
            PDF document bytes
        """
        t = get_translations(language)
        generated_on = generated_on or date.today()
        inputs = analysis.inputs
        styles = getSampleStyleSheet()

        def para(text: str, style: str = "Normal") -> Paragraph:
            return Paragraph(escape(text), styles[style])

        fields = t["fields"]
        years = t["years"]
        story: List[Any] = [
            para(t["title"], "Title"),
            para(t["subtitle"]),
            para(f"{t['generated_on']}: {generated_on.isoformat()}"),
            Spacer(1, 12),
            para(t["sections"]["basic_data"], "Heading2"),
        ]

        input_rows = [
            [fields["current_market_value"]["label"], format_euro(inputs.current_market_value)],
            [fields["original_purchase_price"]["label"], format_euro(inputs.original_purchase_price)],
            [fields["cadastral_value"]["label"], format_euro(inputs.cadastral_value)],
            [fields["remaining_debt"]["label"], format_euro(inputs.remaining_debt)],
            [fields["mortgage_rate"]["label"], format_percent(inputs.mortgage_rate)],
            [fields["remaining_years"]["label"], f"{inputs.remaining_years} {years}"],
            [fields["gross_monthly_rent"]["label"], format_euro(inputs.gross_monthly_rent)],
            [fields["vacancy_percent"]["label"], format_percent(inputs.vacancy_percent)],
            [fields["investment_horizon"]["label"], f"{inputs.investment_horizon} {years}"],
        ]
        story.append(self._table(input_rows, [9 * cm, 5 * cm], header=False))
        story.append(Spacer(1, 12))

        results = t["results"]
        story.append(para(results["title"], "Heading2"))
        scenario_rows = [
            [""] + [f"{sid.value}: {t['scenarios'][sid.value]}" for sid in ScenarioId]
        ]
        scenarios = [analysis.scenario(sid) for sid in ScenarioId]
        scenario_rows.append(
            [results["monthly_income"]] + [format_euro(s.monthly_income) for s in scenarios]
        )
        scenario_rows.append(
            [results["final_net_worth"]] + [format_euro(s.final_net_worth) for s in scenarios]
        )
        scenario_rows.append([results["irr"]] + [format_percent(s.irr) for s in scenarios])
        scenario_rows.append(
            [results["legacy_years"]] + [str(s.legacy_years) for s in scenarios]
        )
        story.append(self._table(scenario_rows, [5 * cm, 4 * cm, 4 * cm, 4 * cm]))
        story.append(Spacer(1, 12))

        stress = t["stress"]
        story.append(para(stress["title"], "Heading2"))
        stress_rows = [
            [
                stress["scenario"],
                stress["base_case"],
                stress["rate_increase"],
                stress["vacancy_increase"],
                stress["zero_growth"],
            ]
        ]
        for row in analysis.stress_tests:
            stress_rows.append(
                [
                    row.scenario.value,
                    format_euro(row.base_case),
                    format_euro(row.rate_increase),
                    format_euro(row.vacancy_increase),
                    format_euro(row.zero_growth),
                ]
            )
        story.append(self._table(stress_rows, [2.5 * cm] + [3.5 * cm] * 4))
        story.append(Spacer(1, 12))

        advice = t["advice"]
        recommendation = analysis.recommendation
        story.append(para(advice["title"], "Heading2"))
        story.append(para(recommendation.summary))
        story.append(
            para(
                f"{advice['best_for_goal']}: {recommendation.best_for_goal.value} | "
                f"{advice['best_overall']}: {recommendation.best_overall.value}"
            )
        )
        story.append(Spacer(1, 6))
        story.append(para(f"{advice['tradeoffs']}:", "Heading3"))
        story.extend(para(f"• {tradeoff}") for tradeoff in recommendation.tradeoffs)
        if recommendation.risks:
            story.append(para(f"{advice['risks']}:", "Heading3"))
            story.extend(para(f"• {risk}") for risk in recommendation.risks)
        story.append(Spacer(1, 12))
        story.append(para(advice["disclaimer"], "Italic"))

        buf = BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            leftMargin=2 * cm,
            rightMargin=2 * cm,
            topMargin=2 * cm,
            bottomMargin=2 * cm,
            title=t["title"],
        )
        doc.build(story)
        return buf.getvalue()

    @staticmethod
    def _table(rows: List[List[str]], col_widths: List[float], header: bool = True) -> Table:
        table = Table(rows, colWidths=col_widths)
        if header:
            table.setStyle(GRID_STYLE)
        else:
            table.setStyle(TableStyle([("GRID", (0, 0), (-1, -1), 0.5, colors.grey)]))
        return table

    def build_projections_csv(self, analysis: SellOrKeepAnalysis) -> bytes:
        """Render the yearly projections as UTF-8 CSV."""
        return projections_frame(analysis).to_csv(index=False).encode("utf-8")

    def export(
        self,
        analysis: SellOrKeepAnalysis,
        language: Language,
        generated_on: Optional[date] = None,
    ) -> ExportedReport:
        """
        Build both report files and store them.

        Args:
            analysis: Completed analysis
            language: Label language
            generated_on: Report date used in the header and file names

        Returns:
            ExportedReport with the storage keys

        Raises:
            StorageError: If a file cannot be stored
        """
        language = Language(language)
        generated_on = generated_on or date.today()
        base_key = f"reports/{get_translations(language)['report_slug']}-{generated_on.isoformat()}"

        metadata: Dict[str, Any] = {"language": language.value}
        pdf_key = self.storage.store_file(
            f"{base_key}.pdf",
            self.build_pdf(analysis, language, generated_on),
            {**metadata, "content_type": PDF_CONTENT_TYPE},
        )
        csv_key = self.storage.store_file(
            f"{base_key}.csv",
            self.build_projections_csv(analysis),
            {**metadata, "content_type": CSV_CONTENT_TYPE},
        )
        logger.info(f"Exported sell-or-keep report to {pdf_key} and {csv_key}")

        return ExportedReport(
            pdf_key=pdf_key,
            csv_key=csv_key,
            language=language,
            generated_on=generated_on,
        )
