"""
pipeline results - laid-out graph plus build diagnostics.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from datetime import datetime

from ..core.models import Graph
from ..graph.layout import LayoutStrategy


@dataclass
class PipelineResult:
    """output of one full pipeline run over a corpus snapshot."""
    graph: Graph
    strategy: Optional[LayoutStrategy] = None

    # diagnostics
    record_count: int = 0
    duplicate_ids: List[str] = field(default_factory=list)
    skipped_records: int = 0
    unresolved_references: int = 0

    # timing
    built_at: datetime = field(default_factory=datetime.now)
    duration_seconds: float = 0.0

    def summary(self) -> str:
        """generate a brief summary."""
        stats = self.graph.stats()
        lines = [
            f"Citation network: {self.record_count} records",
            f"  Papers: {stats['node_count']}",
            f"  Citations: {stats['edge_count']}",
            f"  Connected: {stats['connected_count']}, isolated: {stats['isolated_count']}",
        ]

        if self.strategy:
            lines.append(f"  Layout: {self.strategy.value}")

        if self.duplicate_ids:
            lines.append(f"  Duplicate ids: {len(self.duplicate_ids)}")

        if self.skipped_records:
            lines.append(f"  Skipped (no id): {self.skipped_records}")

        if self.unresolved_references:
            lines.append(f"  References outside corpus: {self.unresolved_references}")

        return "\n".join(lines)
