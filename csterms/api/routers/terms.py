from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query, Request

from csterms.api.errors import TermsAPIError
from csterms.models.terms import ErrorResponse
from csterms.services.glossary_store import GlossaryStore

router = APIRouter(prefix="/api", tags=["terms"])


def get_store(request: Request) -> GlossaryStore:
    return request.app.state.store


@router.get("/terms")
def api_get_all_terms(store: GlossaryStore = Depends(get_store)) -> Dict[str, str]:
    return store.get_all()


# Declared before /terms/{term} so "search" is not taken for a term.
@router.get("/terms/search", responses={400: {"model": ErrorResponse}})
def api_search_terms(
    q: Optional[str] = Query(None, description="Case-insensitive substring of a term or definition"),
    store: GlossaryStore = Depends(get_store),
) -> Dict[str, str]:
    if not q:
        raise TermsAPIError(400, "search query is required")
    return store.search(q)


@router.get("/terms/{term:path}", responses={404: {"model": ErrorResponse}})
def api_get_term(term: str, store: GlossaryStore = Depends(get_store)) -> Dict[str, str]:
    definition, found = store.get(term)
    if not found:
        raise TermsAPIError(404, "term not found")
    return {term: definition}
