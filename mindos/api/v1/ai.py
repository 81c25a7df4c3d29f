"""Semantic search, RAG chat, and digest endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from mindos.core.dependencies import get_retrieval_orchestrator
from mindos.core.exceptions import ServiceUnavailableError
from mindos.rag.orchestrator import RetrievalOrchestrator
from mindos.schemas.common import ErrorMessage
from mindos.schemas.notes import ChatRequest, ChatResponse, SearchRequest, SearchResultItem, SummaryResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["ai"],
    responses={
        400: {"model": ErrorMessage},
        500: {"model": ErrorMessage},
        503: {"model": ErrorMessage},
    },
)


@router.post("/search", response_model=list[SearchResultItem])
def search_notes(
    payload: SearchRequest,
    orchestrator: RetrievalOrchestrator = Depends(get_retrieval_orchestrator),
) -> list[SearchResultItem]:
    try:
        results = orchestrator.search(payload.query)
    except ServiceUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("api.search.failed", extra={"event": "api.search.failed"})
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Search failed") from exc
    return [SearchResultItem.from_ranked(item) for item in results]


@router.post("/chat", response_model=ChatResponse)
def chat(
    payload: ChatRequest,
    orchestrator: RetrievalOrchestrator = Depends(get_retrieval_orchestrator),
) -> ChatResponse:
    try:
        result = orchestrator.chat(payload.message)
    except ServiceUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("api.chat.failed", extra={"event": "api.chat.failed"})
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Chat failed") from exc
    return ChatResponse(answer=result.answer)


@router.post("/summary", response_model=SummaryResponse)
def summary(orchestrator: RetrievalOrchestrator = Depends(get_retrieval_orchestrator)) -> SummaryResponse:
    try:
        text = orchestrator.summarize()
    except ServiceUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("api.summary.failed", extra={"event": "api.summary.failed"})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Summary generation failed",
        ) from exc
    return SummaryResponse(summary=text)
