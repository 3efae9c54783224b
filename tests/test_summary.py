"""Tests for report summaries."""

import pytest

from consistencygrader import analyze_consistency
from consistencygrader.analysis.summary import format_report, recommendation_lines, summarize_dimensions
from consistencygrader.core.constants import RecommendationConstants

pytestmark = pytest.mark.usefixtures("nltk_data")


def test_consistent_report_uses_sentinel():
    text = "Premium coffee roasted fresh daily for our loyal customers."
    report = analyze_consistency({"a": text, "b": text})
    assert recommendation_lines(report) == [RecommendationConstants.ALREADY_CONSISTENT_MESSAGE]

    summary = summarize_dimensions(report)
    assert "consistent emotional tone" in summary["sentiment"]
    assert "(100% consistency)" in summary["keywords"]
    assert "(100% average similarity)" in summary["similarity"]


def test_format_report(brand_content):
    report = analyze_consistency(brand_content)
    text = format_report(report)
    assert text.startswith(f"Overall consistency score: {report.overall_score}/100")
    assert "Recommendations:" in text
    for rec in report.recommendations:
        assert rec.title in text
