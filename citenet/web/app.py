"""
citenet web application - serves the citation network to the UI.

run:
    CITENET_CORPUS=papers.json uvicorn citenet.web.app:app --port 8765

endpoints:
    GET  /api/citation-network          → full laid-out graph
    POST /api/citation-network/filter   → title-filtered subgraph
    POST /api/citation-network/reset    → full graph, query cleared
    GET  /api/citation-network/stats    → node/edge/connectivity counts
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.config import CitenetConfig
from ..providers.base import CorpusProvider, CorpusUnavailableError
from ..providers.json_file import JsonCorpusProvider
from ..pipeline import ExplorerSession

logger = logging.getLogger("citenet.web")


# models
class FilterRequest(BaseModel):
    query: str = ""


def create_app(
    provider: Optional[CorpusProvider] = None,
    config: Optional[CitenetConfig] = None
) -> FastAPI:
    """app bound to one explorer session; the corpus loads on first request."""
    config = config or CitenetConfig.from_env()
    provider = provider or JsonCorpusProvider(config.corpus_path)
    session = ExplorerSession(provider, config)

    app = FastAPI(title="citenet", description="Citation network explorer")
    app.state.session = session

    @app.exception_handler(CorpusUnavailableError)
    async def corpus_unavailable(request: Request, exc: CorpusUnavailableError):
        logger.error(f"corpus fetch failed: {exc}")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/api/citation-network")
    def citation_network():
        """full graph, built once per session."""
        return session.graph.to_dict()

    @app.post("/api/citation-network/filter")
    def filter_network(req: FilterRequest):
        """induced subgraph of papers whose title contains the query."""
        # echo this request's query, not the shared session state
        graph = session.filter(req.query)
        data = graph.to_dict()
        data["query"] = req.query if req.query.strip() else ""
        return data

    @app.post("/api/citation-network/reset")
    def reset_network():
        graph = session.reset()
        data = graph.to_dict()
        data["query"] = ""
        return data

    @app.get("/api/citation-network/stats")
    def network_stats():
        return session.graph.stats()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8765)
