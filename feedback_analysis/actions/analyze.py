# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Feedback analysis action.

This action discovers the configured feedback files, runs the analysis
pipeline on each of them and writes one YAML work file per document plus an
index into `workdir/analysis`.

Work files record the source file hash, the taxonomy hash and the analysis
options. Unchanged documents are skipped on the next run unless `--force` is
given.
"""

import argparse
import fnmatch
import glob
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from feedback_analysis.actions.base import rel_posix
from feedback_analysis.config import AnalysisOptions, ProjectConfig
from feedback_analysis.hash_utils import md5_file, md5_text
from feedback_analysis.pipeline import analyze
from feedback_analysis.sources import read_feedback_text
from feedback_analysis.taxonomy import Taxonomy, default_taxonomy, load_taxonomy, taxonomy_hash
from feedback_analysis.text import split_sentences
from feedback_analysis.yaml_io import read_yaml_mapping, write_yaml


SCHEMA_VERSION = 1


@dataclass(frozen=True)
class AnalyzeAction:
    """
    `analyze` subcommand.

    Runs the feedback analysis pipeline over every configured feedback file.
    """

    name: str = "analyze"
    help: str = "Analyze the configured feedback files"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `analyze` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Re-analyze documents even if their work files are up to date",
        )

    def run(self, args: argparse.Namespace, config: ProjectConfig | None) -> None:
        """
        Execute the analysis.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            None

        Raises:
            ConfigError:
                If the taxonomy or a feedback file cannot be read.
        """

        if config is None:
            raise RuntimeError("AnalyzeAction requires a config, but none was provided")

        force = bool(getattr(args, "force", False))

        input_files = self._discover_input_files(config)
        if not input_files:
            print("No input feedback files found.")
            return

        taxonomy = self._load_taxonomy(config)
        tx_hash = taxonomy_hash(taxonomy)
        options = config.analysis

        analysis_dir = config.workdir / "analysis"
        analysis_dir.mkdir(parents=True, exist_ok=True)

        index: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "config": {
                "path": rel_posix(config.base_dir, config.config_path),
            },
            "taxonomy_hash": tx_hash,
            "analysis": asdict(options),
            "documents": [],
        }

        updated = 0
        skipped = 0
        total = len(input_files)
        for doc_idx, input_path in enumerate(input_files, start=1):
            source_file = rel_posix(config.base_dir, input_path)
            doc_id = self._document_id(source_file)
            out_path = analysis_dir / f"{doc_id}.yaml"
            source_md5 = md5_file(input_path)

            if not force and out_path.exists():
                existing = read_yaml_mapping(out_path)
                if self._analysis_up_to_date(
                    existing,
                    source_md5=source_md5,
                    taxonomy_hash=tx_hash,
                    options=options,
                ):
                    print(f"[{doc_idx}/{total}] Skipping unchanged analysis: {doc_id}")
                    index["documents"].append(self._index_entry(existing, config=config, out_path=out_path))
                    skipped += 1
                    continue

            print(f"[{doc_idx}/{total}] Analyzing: {source_file}")
            text = read_feedback_text(input_path)
            report = analyze(text, taxonomy=taxonomy, options=options)

            payload: dict[str, Any] = {
                "schema_version": SCHEMA_VERSION,
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "document_id": doc_id,
                "source": {"path": source_file},
                "input": {
                    "source_md5": source_md5,
                    "taxonomy_hash": tx_hash,
                },
                "analysis": asdict(options),
                "stats": {
                    "characters": len(text),
                    "sentences": len(split_sentences(text)),
                },
                "report": report.to_dict(),
            }
            write_yaml(out_path, payload)

            print(
                f"  - {len(report.pain_points)} pain point(s), "
                f"{len(report.emotional_patterns)} emotional pattern(s), "
                f"{len(report.behavioral_themes)} theme(s), "
                f"{len(report.cognitive_biases)} bias(es)"
            )
            index["documents"].append(self._index_entry(payload, config=config, out_path=out_path))
            updated += 1

        index_path = analysis_dir / "index.yaml"
        write_yaml(index_path, index)
        print(f"Processed {total} feedback file(s): updated {updated}, skipped {skipped}. Wrote index: {index_path}")

    def _load_taxonomy(self, config: ProjectConfig) -> Taxonomy:
        if config.taxonomy_path is not None:
            print(f"Loading taxonomy: {config.taxonomy_path}")
            return load_taxonomy(config.taxonomy_path)
        return default_taxonomy()

    def _discover_input_files(self, config: ProjectConfig) -> list[Path]:
        """
        Find feedback files based on include/exclude patterns.

        Patterns are resolved relative to the directory containing the YAML
        configuration.

        Returns:
            Sorted list of paths to feedback files.
        """

        base_dir = config.base_dir

        paths: list[Path] = []
        for pattern in config.include:
            include_glob = (base_dir / self._normalize_glob_pattern(pattern)).as_posix()
            paths.extend(Path(p) for p in glob.glob(include_glob, recursive=True))

        if config.exclude:
            exclude_norms = [self._normalize_glob_pattern(p) for p in config.exclude]
            paths = [
                p
                for p in paths
                if not any(fnmatch.fnmatch(rel_posix(base_dir, p), ex) for ex in exclude_norms)
            ]

        paths = [p for p in paths if p.is_file()]
        return sorted({p.resolve() for p in paths})

    def _normalize_glob_pattern(self, pattern: str) -> str:
        """Normalize a user pattern to POSIX separators without a leading `./`."""

        pattern = pattern.replace("\\", "/")
        while pattern.startswith("./"):
            pattern = pattern[2:]
        return pattern

    def _document_id(self, source_file: str) -> str:
        """
        Build a stable document id from the relative source path.

        The file stem keeps the id readable; the short path hash keeps it unique
        across directories.
        """

        stem = Path(source_file).stem.strip() or "feedback"
        safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in stem)
        return f"{safe}-{md5_text(source_file)[:10]}"

    def _analysis_up_to_date(
        self,
        existing: dict[str, Any],
        *,
        source_md5: str,
        taxonomy_hash: str,
        options: AnalysisOptions,
    ) -> bool:
        """Return True if an existing work file matches the current inputs."""

        if existing.get("schema_version") != SCHEMA_VERSION:
            return False

        inp = existing.get("input")
        if not isinstance(inp, dict):
            return False
        if str(inp.get("source_md5") or "") != source_md5:
            return False
        if str(inp.get("taxonomy_hash") or "") != taxonomy_hash:
            return False

        if existing.get("analysis") != asdict(options):
            return False

        return isinstance(existing.get("report"), dict)

    def _index_entry(self, payload: dict[str, Any], *, config: ProjectConfig, out_path: Path) -> dict[str, Any]:
        report = payload.get("report")
        if not isinstance(report, dict):
            report = {}
        source = payload.get("source")

        return {
            "document_id": payload.get("document_id"),
            "analysis_file": rel_posix(config.base_dir, out_path),
            "source_file": source.get("path") if isinstance(source, dict) else None,
            "pain_points": len(report.get("pain_points") or []),
        }
