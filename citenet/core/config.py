"""
configuration for citenet.
all settings in one place, easily tunable.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger("citenet")


@dataclass
class LayoutConfig:
    """layout canvas and placement settings."""
    # logical canvas
    width: float = 800.0
    height: float = 600.0

    # strategy switch: circular up to this many nodes, grid above
    circular_max_nodes: int = 12

    # circular layout
    edge_padding: float = 100.0   # keep the circle this far from the canvas edge
    max_radius: float = 250.0

    # grid layout
    grid_padding: float = 100.0   # subtracted from canvas size before splitting into cells
    grid_margin: float = 50.0     # offset of the first cell from the canvas origin
    jitter_fraction: float = 0.15  # max jitter as a fraction of the cell size


@dataclass
class LinkConfig:
    """node label and url fallbacks."""
    paper_url_template: str = "https://www.semanticscholar.org/paper/{id}"
    search_url_template: str = "https://scholar.google.com/scholar?q={query}"
    search_fallback_phrase: str = "research paper"
    placeholder_url: str = "#"
    untitled_label: str = "Untitled"


@dataclass
class ExportConfig:
    """export settings."""
    output_dir: str = "output"
    json_filename: str = "citation_network.json"
    graphml_filename: str = "citation_network.graphml"
    indent: int = 2


@dataclass
class CitenetConfig:
    """master configuration for citenet."""
    # sub-configs
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    links: LinkConfig = field(default_factory=LinkConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    # global settings
    corpus_path: str = "papers.json"
    seed: Optional[int] = None  # layout jitter seed, None = fresh randomness
    verbose: bool = False

    @classmethod
    def default(cls) -> 'CitenetConfig':
        """return default configuration."""
        return cls()

    @classmethod
    def reproducible(cls, seed: int = 42) -> 'CitenetConfig':
        """fixed jitter seed, for snapshots and tests."""
        config = cls()
        config.seed = seed
        return config

    @classmethod
    def from_env(cls) -> 'CitenetConfig':
        """
        defaults overridden by environment:
        CITENET_CORPUS, CITENET_SEED, CITENET_OUTPUT_DIR.
        """
        config = cls()
        config.corpus_path = os.environ.get("CITENET_CORPUS", config.corpus_path)

        seed = os.environ.get("CITENET_SEED")
        if seed:
            try:
                config.seed = int(seed)
            except ValueError:
                logger.warning(f"ignoring non-integer CITENET_SEED={seed!r}")

        output_dir = os.environ.get("CITENET_OUTPUT_DIR")
        if output_dir:
            config.export.output_dir = output_dir
        return config
