from .models import PaperRecord, Node, Edge, Graph
from .config import CitenetConfig, LayoutConfig, LinkConfig, ExportConfig
from .logs import setup_logging
