"""Input loading and report export."""

import datetime
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from .. import __version__
from ..core.config import settings
from ..core.constants import FileConstants, InputConstants
from ..core.errors import InputValidationError
from ..core.models import AnalysisReport
from ..core.scoring import score_band


def load_content_set(filename: str) -> Dict[str, Any]:
    """Load a platform -> content mapping from a JSON or YAML file.

    The mapping may be wrapped in a ``platformContent`` key, the shape the
    web client posts.
    """
    path = Path(filename)
    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in FileConstants.YAML_SUFFIXES:
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if isinstance(data, dict) and isinstance(data.get(InputConstants.WRAPPER_KEY), dict):
        data = data[InputConstants.WRAPPER_KEY]
    if not isinstance(data, dict):
        raise InputValidationError(f"{filename} does not contain a platform -> content mapping")
    return data


def parse_platform_args(pairs: Iterable[str]) -> Dict[str, str]:
    """Parse ``LABEL=TEXT`` command-line pairs."""
    content = {}
    for pair in pairs:
        label, sep, text = pair.partition("=")
        if not sep or not label.strip():
            raise InputValidationError(f"Expected LABEL=TEXT, got {pair!r}")
        content[label.strip()] = text
    return content


def prepare_export(report: AnalysisReport) -> Dict[str, Any]:
    """Prepare a report for JSON export."""
    export_data = report.to_dict()
    export_data["metadata"] = {
        "export_timestamp": None,  # Will be set by export_to_json
        "score_band": score_band(report.overall_score),
        "already_consistent": report.is_already_consistent,
        "version": __version__,
    }
    return export_data


def export_to_json(data: Dict[str, Any], filename: str, indent: Optional[int] = None) -> None:
    """Export data to JSON file."""
    metadata = data.setdefault("metadata", {})
    metadata["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=settings.export_indent if indent is None else indent, ensure_ascii=False)
