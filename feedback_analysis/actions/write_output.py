# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Spreadsheet report action.

`write-output` turns the work files of the last `analyze` run into one `.ods`
file:

- `Summary`: one row per feedback document with the number of findings per
  category, the most critical issue and the executive summary.
- One sheet per document listing every pain point, emotional pattern,
  behavioral theme, cognitive bias, persona and recommendation.
"""

import argparse
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from feedback_analysis.actions.base import resolve_from_base
from feedback_analysis.cli_io import prompt_overwrite
from feedback_analysis.config import ConfigError, ProjectConfig
from feedback_analysis.ods import append_sheet, finish_spreadsheet, new_spreadsheet, unique_sheet_name
from feedback_analysis.yaml_io import read_yaml_mapping


SUMMARY_SHEET = "Summary"

SUMMARY_COLUMNS = [
    ("document", "Document"),
    ("source", "Source"),
    ("pain_points", "Pain Points"),
    ("emotional_patterns", "Emotional Patterns"),
    ("behavioral_themes", "Behavioral Themes"),
    ("cognitive_biases", "Cognitive Biases"),
    ("recommendations", "Recommendations"),
    ("top_pain_point", "Most Critical Issue"),
    ("executive_summary", "Executive Summary"),
]

DOCUMENT_COLUMNS = [
    ("section", "Section"),
    ("label", "Label"),
    ("level", "Level"),
    ("detail", "Detail"),
    ("evidence", "Evidence / Notes"),
]

FINDING_KEYS = ("pain_points", "emotional_patterns", "behavioral_themes", "cognitive_biases", "recommendations")

_DOC_ID_HASH_RE = re.compile(r"-[0-9a-f]{10}$")


@dataclass(frozen=True)
class WriteOutputAction:
    """
    `write-output` subcommand.

    Requires the analysis index written by `analyze`.
    """

    name: str = "write-output"
    help: str = "Write the analysis results to the output file (.ods)"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Replace an existing output file without asking",
        )

    def run(self, args: argparse.Namespace, config: ProjectConfig | None) -> None:
        """
        Build and save the spreadsheet.

        Raises:
            ConfigError:
                If no analysis index exists, a work file is unreadable, or the
                output file exists and may not be replaced.
        """

        if config is None:
            raise RuntimeError("WriteOutputAction requires a config, but none was provided")

        outfile = config.outfile
        if outfile.exists() and not prompt_overwrite(outfile, force=bool(args.force)):
            print(f"Keeping existing file: {outfile}")
            return

        index_path = config.workdir / "analysis" / "index.yaml"
        if not index_path.is_file():
            raise ConfigError(f"No analysis index found at {index_path}. Run the 'analyze' command first.")

        print(f"Reading analysis index: {index_path}")
        documents = read_yaml_mapping(index_path).get("documents") or []
        work_files = list(self._load_work_files(documents, base_dir=config.base_dir))
        if not work_files:
            print("The analysis index lists no documents. Nothing to write.")
            return

        doc = new_spreadsheet()
        sheets = [append_sheet(doc, SUMMARY_SHEET, SUMMARY_COLUMNS, [self._summary_row(w) for w in work_files])]

        used = {SUMMARY_SHEET}
        for work in work_files:
            sheet = unique_sheet_name(self._document_label(work), used)
            used.add(sheet)
            print(f"Writing sheet: {sheet}")
            sheets.append(append_sheet(doc, sheet, DOCUMENT_COLUMNS, self._finding_rows(work["report"])))

        finish_spreadsheet(doc, sheets)

        outfile.parent.mkdir(parents=True, exist_ok=True)
        doc.save(outfile)
        print(f"Wrote ODS report with {len(work_files)} document(s): {outfile}")

    def _load_work_files(self, documents: Any, *, base_dir: Path) -> Iterable[dict[str, Any]]:
        """Yield the work files referenced by the index that contain a report."""

        if not isinstance(documents, list):
            raise ConfigError("Analysis index is corrupt: 'documents' must be a list")

        for entry in documents:
            relpath = entry.get("analysis_file") if isinstance(entry, dict) else None
            if not isinstance(relpath, str) or not relpath:
                continue

            path = resolve_from_base(base_dir, relpath)
            if not path.exists():
                print(f"Skipping missing work file: {path}")
                continue

            work = read_yaml_mapping(path)
            if not isinstance(work.get("report"), dict):
                print(f"Skipping work file without report: {path}")
                continue
            yield work

    def _document_label(self, work: dict[str, Any]) -> str:
        """Use the file stem as label, or the document id without its hash."""

        source = work.get("source")
        source_path = source.get("path") if isinstance(source, dict) else None
        if isinstance(source_path, str) and Path(source_path).stem.strip():
            return Path(source_path).stem.strip()
        return _DOC_ID_HASH_RE.sub("", str(work.get("document_id") or "")) or "Feedback"

    def _summary_row(self, work: dict[str, Any]) -> dict[str, Any]:
        report = work["report"]
        source = work.get("source")
        pain_points = _records(report, "pain_points")

        row: dict[str, Any] = {
            "document": self._document_label(work),
            "source": source.get("path", "") if isinstance(source, dict) else "",
            "top_pain_point": pain_points[0].get("issue", "") if pain_points else "",
            "executive_summary": report.get("executive_summary", ""),
        }
        for key in FINDING_KEYS:
            row[key] = len(_records(report, key))
        return row

    def _finding_rows(self, report: dict[str, Any]) -> list[dict[str, Any]]:
        """Flatten one report into `DOCUMENT_COLUMNS` rows, in report order."""

        rows: list[dict[str, Any]] = []

        for p in _records(report, "pain_points"):
            rows.append(_row("Pain point", p.get("issue"), p.get("severity"), p.get("frequency"), p.get("quotes")))

        for e in _records(report, "emotional_patterns"):
            quotes = e.get("quotes") or [e.get("trigger")]
            rows.append(_row("Emotional pattern", e.get("emotion"), e.get("intensity"), e.get("sentiment"), quotes))

        for t in _records(report, "behavioral_themes"):
            rows.append(
                _row("Behavioral theme", t.get("theme"), t.get("user_segment"), t.get("description"), t.get("evidence"))
            )

        for b in _records(report, "cognitive_biases"):
            rows.append(_row("Cognitive bias", b.get("bias"), "", b.get("impact"), [b.get("evidence")]))

        for persona in _records(report, "personas"):
            goals = "; ".join(persona.get("goals") or [])
            frustrations = "; ".join(persona.get("frustrations") or [])
            detail = f"Goals: {goals} | Frustrations: {frustrations}"
            rows.append(_row("Persona", persona.get("name"), persona.get("role"), detail, [persona.get("quote")]))

        for r in _records(report, "recommendations"):
            rows.append(
                _row("Recommendation", r.get("category"), r.get("priority"), r.get("action"), [r.get("expected_impact")])
            )

        return rows


def _records(report: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = report.get(key)
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def _row(section: str, label: Any, level: Any, detail: Any, evidence: Any) -> dict[str, Any]:
    return {
        "section": section,
        "label": label or "",
        "level": level or "",
        "detail": detail or "",
        "evidence": " | ".join(str(q) for q in evidence or [] if q),
    }
