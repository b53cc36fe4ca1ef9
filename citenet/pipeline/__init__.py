# pipeline - corpus to laid-out citation network
from .orchestrator import CitationPipeline, ExplorerSession, build_citation_network
from .results import PipelineResult
