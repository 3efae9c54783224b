"""Plain-text summaries of an analysis report."""

from typing import Dict, List

from ..core.constants import RecommendationConstants, SummaryConstants
from ..core.models import AnalysisReport
from ..core.scoring import score_band


def summarize_dimensions(report: AnalysisReport) -> Dict[str, str]:
    """One sentence per analysis dimension."""
    variance = report.sentiment.variance
    if report.sentiment.is_consistent:
        sentiment = f"Your content maintains a consistent emotional tone across platforms (variance: {variance:.2f})."
    else:
        sentiment = f"Your content shows significant emotional tone variation across platforms (variance: {variance:.2f})."

    keyword_score = report.keywords.consistency_score
    if keyword_score > SummaryConstants.KEYWORD_CONSISTENT:
        keywords = f"Your key messaging terms are consistently used across platforms ({keyword_score * 100:.0f}% consistency)."
    else:
        keywords = f"Your key messaging terms vary significantly across platforms ({keyword_score * 100:.0f}% consistency)."

    tone_score = report.tone.consistency_score
    if tone_score > SummaryConstants.TONE_CONSISTENT:
        tone = f"Your communication style is consistent across platforms ({tone_score * 100:.0f}% consistency)."
    else:
        tone = f"Your communication style varies across platforms ({tone_score * 100:.0f}% consistency)."

    average = report.similarity.average_similarity
    if average > SummaryConstants.SIMILARITY_CONSISTENT:
        similarity = f"Your content is structurally similar across platforms ({average * 100:.0f}% average similarity)."
    else:
        similarity = f"Your content structure varies significantly across platforms ({average * 100:.0f}% average similarity)."

    return {
        "sentiment": sentiment,
        "keywords": keywords,
        "tone": tone,
        "similarity": similarity,
    }


def recommendation_lines(report: AnalysisReport) -> List[str]:
    """Recommendations as text, or the already-consistent message."""
    if report.is_already_consistent:
        return [RecommendationConstants.ALREADY_CONSISTENT_MESSAGE]
    return [f"{r.title}: {r.description}" for r in report.recommendations]


def format_report(report: AnalysisReport) -> str:
    """Human-readable multi-line report."""
    lines = [
        f"Overall consistency score: {report.overall_score}/100 ({score_band(report.overall_score)})",
        "",
    ]
    for name, sentence in summarize_dimensions(report).items():
        lines.append(f"{name.capitalize()}: {sentence}")
    lines.append("")
    lines.append("Recommendations:")
    for i, line in enumerate(recommendation_lines(report), 1):
        lines.append(f"  {i}. {line}")
    return "\n".join(lines)
