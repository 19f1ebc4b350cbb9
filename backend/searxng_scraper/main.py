"""
SearXNG scraper API: web search over public SearXNG instances.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, ValidationError

from searxng_scraper import __version__
from searxng_scraper.config import Settings
from searxng_scraper.logging_config import configure_logging
from searxng_scraper.search import ConfigurationError, RetryBudgetExhausted, run_search


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(Settings().log_level)
    yield


app = FastAPI(title="SearXNGScraper", version=__version__, lifespan=lifespan)


class SearchRequest(BaseModel):
    query: str
    time_range: Optional[str] = None
    language: Optional[str] = None
    detailed: Optional[str] = None


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/v1/search")
def search(body: SearchRequest):
    """
    Performs a web search for a given query using the public SearXNG search servers.

    Returns an array of result objects with 'url' and 'summary' for each result.
    time_range is one of day, week, month, year. Set detailed to "true" to
    collect several pages from several servers.
    """
    try:
        payload = run_search(body.model_dump(exclude_none=True))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except RetryBudgetExhausted as e:
        raise HTTPException(status_code=502, detail=str(e))
    return Response(content=payload, media_type="application/json")
