#!/usr/bin/env python3
"""
Report Generator for SeedFuzz

Writes end-of-campaign summaries (Markdown-style text and JSON), the list of
accepted inputs, and crash metadata.
"""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_REPORT_DIR = "artifacts/reports"
DEFAULT_SAMPLE_SIZE = 20


def _campaign_name(campaign: Optional[Any]) -> str:
    if campaign is None:
        return "campaign"
    return getattr(campaign, "name", None) or campaign.__class__.__name__


def _default_path(campaign: Optional[Any], report_dir: Union[str, Path], suffix: str, extension: str) -> Path:
    directory = Path(report_dir)
    directory.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    safe_name = _campaign_name(campaign).lower().replace(" ", "_").replace("/", "_")
    stem = f"{safe_name}_{suffix}_{timestamp}"
    path = directory / f"{stem}{extension}"
    counter = 1
    while path.exists():
        path = directory / f"{stem}_{counter}{extension}"
        counter += 1
    return path


def escape_input(candidate: str) -> str:
    """Escape a candidate so it fits on one line (reversible with unicode_escape decoding)."""
    return candidate.encode("unicode_escape").decode("ascii")


def write_campaign_summary(
    campaign: Optional[Any],
    result: Any,
    campaign_context: Optional[Any] = None,
    file_path: Optional[Union[str, Path]] = None,
    report_dir: Union[str, Path] = DEFAULT_REPORT_DIR,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> Path:
    """
    Write a concise end-of-campaign summary log.

    Inputs accepted (based on fuzzing_framework):
    - campaign: FuzzingCampaign instance (for name/seed). Optional.
    - result: FuzzResult for the run.
    - campaign_context: CampaignContext with .stats dict. Optional.
    - file_path: Optional explicit path. If not provided, a file is created under `report_dir`.
    - sample_size: Maximum number of accepted inputs listed.

    Returns: Path to the written summary file.
    """
    if file_path is None:
        path = _default_path(campaign, report_dir, "summary", ".log")
    else:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    lines.append("# SeedFuzz Campaign Summary")
    lines.append(f"Campaign: {_campaign_name(campaign)}")
    lines.append(f"Seed: {result.seed!r}")
    if campaign is not None:
        corpus = getattr(campaign, "corpus", None) or []
        if corpus:
            lines.append(f"Corpus: {len(corpus)} additional seed(s)")
        mutations = getattr(campaign, "mutations", None)
        max_mutations = getattr(campaign, "max_mutations", None)
        if max_mutations is not None:
            lines.append(f"Mutations per trial: {mutations}-{max_mutations}")
        elif mutations is not None:
            lines.append(f"Mutations per trial: {mutations}")
    lines.append("")
    lines.append("## Stats")
    lines.append(f"- Trials: {result.trials}")
    lines.append(f"- Accepted trials: {result.accepted_trials}")
    lines.append(f"- Rejected trials: {result.rejected_trials}")
    lines.append(f"- Unique accepted inputs: {len(result.accepted)}")
    lines.append(f"- Acceptance ratio: {result.acceptance_ratio:.2f}%")
    lines.append(f"- Unique acceptance ratio: {result.unique_acceptance_ratio:.2f}%")
    lines.append(f"- Elapsed: {result.elapsed:.3f}s")
    if campaign_context is not None and getattr(campaign_context, "stats", None):
        lines.append(f"- Raw stats: {dict(campaign_context.stats)}")
    if result.mutator_usage:
        lines.append("")
        lines.append("## Mutator Usage")
        # Sort by count desc
        for name, count in sorted(result.mutator_usage.items(), key=lambda kv: kv[1], reverse=True):
            lines.append(f"- {name}: {count}")
    if result.crash is not None:
        lines.append("")
        lines.append("## Crash")
        for key, value in result.crash.to_dict().items():
            lines.append(f"- {key}: {value}")
    if result.accepted:
        lines.append("")
        lines.append(f"## Accepted Inputs (first {min(sample_size, len(result.accepted))} of {len(result.accepted)})")
        for candidate in sorted(result.accepted)[:sample_size]:
            lines.append(f"- {escape_input(candidate)}")

    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_json_report(
    campaign: Optional[Any],
    result: Any,
    campaign_context: Optional[Any] = None,
    file_path: Optional[Union[str, Path]] = None,
    report_dir: Union[str, Path] = DEFAULT_REPORT_DIR,
) -> Path:
    """Write the full result (and trial history, if available) as JSON."""
    if file_path is None:
        path = _default_path(campaign, report_dir, "report", ".json")
    else:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

    data: Dict[str, Any] = {
        "campaign": _campaign_name(campaign),
        "generated": datetime.now().isoformat(),
        "result": result.to_dict(),
    }
    if campaign_context is not None:
        data["stats"] = dict(getattr(campaign_context, "stats", {}) or {})
        data["history"] = [record.to_dict() for record in getattr(campaign_context, "history", [])]

    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=str)
    return path


def write_accepted_inputs(
    campaign: Optional[Any],
    result: Any,
    file_path: Optional[Union[str, Path]] = None,
    report_dir: Union[str, Path] = DEFAULT_REPORT_DIR,
) -> Path:
    """Write accepted inputs one per line, sorted, with control characters escaped."""
    if file_path is None:
        path = _default_path(campaign, report_dir, "accepted", ".txt")
    else:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        for candidate in sorted(result.accepted):
            f.write(escape_input(candidate) + "\n")
    return path


def write_crash_report(
    crash_info: Any,
    crash_dir: Union[str, Path],
    campaign_name: Optional[str] = None,
    seed: Optional[str] = None,
    stats: Optional[Dict[str, Any]] = None,
) -> Path:
    """
    Write crash metadata as ``<crash_id>_metadata.json`` under crash_dir.

    Returns: Path to the metadata file.
    """
    directory = Path(crash_dir)
    directory.mkdir(parents=True, exist_ok=True)
    metadata = crash_info.to_dict()
    metadata["campaign_name"] = campaign_name or "unnamed"
    metadata["seed"] = seed
    metadata["stats"] = dict(stats or {})

    path = directory / f"{crash_info.crash_id}_metadata.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(metadata, f, indent=2, default=str)
    logger.debug(f"Crash metadata written to {path}")
    return path
