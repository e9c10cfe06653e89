"""
Feed validation pipeline orchestration.

Coordinates the flow: read → build entities → (barrier) → run rules → report
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, NamedTuple

from feed_validator.batch.readers import FeedReader
from feed_validator.core.builders import BUILDER_REGISTRY
from feed_validator.core.models import Entity, FeedGraph, RawRecord, ValidationReport
from feed_validator.core.notices import Notice, NoticeCollector
from feed_validator.core.rules import RuleConfigLoader, RuleEngine
from feed_validator.observability.logger import get_logger, log_operation
from feed_validator.observability.metrics import (
    increment_counter,
    phase_duration_seconds,
    record_entity_counts,
    record_notice_counts,
    records_skipped_total,
    track_duration,
)

logger = get_logger(__name__)


class FileBuildResult(NamedTuple):
    filename: str
    entities: list[Entity]
    notices: list[Notice]
    skipped_records: int


class FeedValidationPipeline:
    """
    Orchestrates feed validation.

    Flow:
    1. Build entities from the raw records of every file (one worker per file)
    2. Wait until every file is built
    3. Run cross-entity rules on the complete entity graph
    4. Assemble the validation report
    """

    def __init__(
        self,
        validation_rules_path: str | None = None,
        rules: list[dict[str, Any]] | None = None,
        max_workers: int = 1,
    ):
        """
        Initialize the pipeline.

        Args:
            validation_rules_path: Path to rule configuration YAML file
            rules: Rule configuration list, takes precedence over the YAML file
            max_workers: Threads used for building files and running rules
        """
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.max_workers = max_workers

        if rules is None:
            rules = self._load_rules(validation_rules_path)
        self.rule_engine = RuleEngine(rules, max_workers=max_workers)

    @staticmethod
    def _load_rules(validation_rules_path: str | None) -> list[dict[str, Any]]:
        if validation_rules_path is None:
            return []
        if not Path(validation_rules_path).exists():
            logger.warning(f"Validation rules file not found, using defaults: {validation_rules_path}")
            return []
        return RuleConfigLoader(validation_rules_path).load_rules()

    def build_file(self, filename: str, records: Iterable[RawRecord]) -> FileBuildResult:
        """
        Build every record of one file.

        Args:
            filename: Feed filename selecting the entity builder
            records: Raw records of the file

        Returns:
            FileBuildResult with entities and notices in row order
        """
        builder_class = BUILDER_REGISTRY.get(filename)
        if builder_class is None:
            skipped = sum(1 for _ in records)
            logger.warning(
                f"No entity builder for {filename}, skipping {skipped} records",
                extra={"feed_file": filename},
            )
            return FileBuildResult(filename, [], [], skipped)

        entities: list[Entity] = []
        notices: list[Notice] = []
        with log_operation("Building entities", logger=logger, feed_file=filename):
            for record in records:
                result = builder_class.from_record(record).build()
                entities.append(result.entity)
                notices.extend(result.notices)

        return FileBuildResult(filename, entities, notices, 0)

    def build(
        self,
        records_by_file: Mapping[str, Iterable[RawRecord]],
        collector: NoticeCollector | None = None,
    ) -> tuple[FeedGraph, NoticeCollector]:
        """
        Build phase: turn every raw record into an entity.

        All files are complete when this returns. Results are merged in the
        order of records_by_file regardless of which worker finished first.

        Returns:
            Tuple of (entity graph, collector holding the build notices)
        """
        if collector is None:
            collector = NoticeCollector()
        graph = FeedGraph()
        items = list(records_by_file.items())

        with track_duration(phase_duration_seconds, phase="build"):
            if self.max_workers == 1 or len(items) <= 1:
                results = [self.build_file(filename, records) for filename, records in items]
            else:
                with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                    futures = [
                        executor.submit(self.build_file, filename, records)
                        for filename, records in items
                    ]
                    results = [future.result() for future in futures]

        for result in results:
            graph.add_all(result.entities)
            collector.extend(result.notices)
            if result.skipped_records:
                increment_counter(records_skipped_total, result.skipped_records, filename=result.filename)

        return graph, collector

    def validate(
        self,
        records_by_file: Mapping[str, Iterable[RawRecord]],
        feed_path: str | None = None,
    ) -> ValidationReport:
        """
        Validate a feed given as raw records per file.

        Args:
            records_by_file: Feed filename -> raw records
            feed_path: Location of the feed, copied into the report

        Returns:
            ValidationReport with every notice found
        """
        with log_operation("Validating feed", logger=logger, feed_path=feed_path):
            graph, collector = self.build(records_by_file)
            logger.info(
                f"Built {len(graph)} entities with {len(collector)} notices",
                extra={"entity_counts": graph.entity_counts()},
            )

            with track_duration(phase_duration_seconds, phase="rules"):
                rule_notice_count = self.rule_engine.run_into(graph, collector)
            logger.info(f"Rules emitted {rule_notice_count} notices")

            report = ValidationReport.from_results(collector, graph, feed_path=feed_path)

        record_entity_counts(report.entity_counts)
        record_notice_counts(
            Counter((notice.code, notice.severity.value) for notice in collector.notices)
        )
        return report

    def validate_directory(self, feed_path: str | Path) -> ValidationReport:
        """Read an unzipped feed directory and validate it."""
        reader = FeedReader(feed_path)
        return self.validate(reader.read(), feed_path=str(feed_path))
