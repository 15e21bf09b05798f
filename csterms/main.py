import logging
import time
from typing import Optional

from fastapi import FastAPI, Request

from csterms import __version__
from csterms.api.errors import TermsAPIError, terms_api_error_handler
from csterms.api.routers.terms import router as terms_router
from csterms.services.glossary_store import GlossaryStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[GlossaryStore] = None) -> FastAPI:
    """Build the read-only glossary API around an already populated store."""
    app = FastAPI(title="CS Terms Glossary", version=__version__)
    app.state.store = store if store is not None else GlossaryStore()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s %.3fms", request.method, request.url.path, elapsed_ms)
        return response

    app.add_exception_handler(TermsAPIError, terms_api_error_handler)
    app.include_router(terms_router)
    return app
