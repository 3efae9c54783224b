"""Basic usage examples for the Content Consistency Grader."""

from consistencygrader import analyze_consistency, InputValidationError
from consistencygrader.analysis.summary import format_report
from consistencygrader.core.scoring import score_band


def example_brand_check():
    """Example: compare a launch message across three channels."""
    print("🔍 Checking launch messaging across website, Twitter and newsletter")

    content = {
        "website": (
            "Introducing our new cold brew. Therefore, every batch is steeped for "
            "twenty hours to deliver a smooth, balanced flavor."
        ),
        "twitter": (
            "New cold brew just dropped! Super smooth and totally awesome. "
            "Grab yours today, limited batch!"
        ),
        "newsletter": (
            "Regarding our new cold brew: each batch is steeped for twenty hours, "
            "thus the flavor stays smooth and balanced."
        ),
    }

    report = analyze_consistency(content)
    print(f"📊 Score: {report.overall_score}/100 ({score_band(report.overall_score)})")
    print("🎭 Dominant tones: " + ", ".join(
        f"{label}={tone.dominant.value}" for label, tone in report.tone.platforms.items()
    ))
    print(f"🔑 Shared keywords: {', '.join(report.keywords.consistent_keywords) or 'none'}")
    print()
    print(format_report(report))


def example_invalid_input():
    """Example: a single sample cannot be compared."""
    print("\n🔍 Submitting a single sample")
    try:
        analyze_consistency({"website": "Only one channel here."})
    except InputValidationError as e:
        print(f"❌ {e}")


if __name__ == "__main__":
    example_brand_check()
    example_invalid_input()
