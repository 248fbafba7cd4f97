"""Assemble one renderable search result from an upstream response payload."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from medsearch.models import ApiResponse, DetailItem, SearchResult, SummaryObj
from medsearch.normalize import (
    build_cards,
    is_nil_token,
    normalize_summary,
    resolve_lines,
    resolve_text,
    summary_items,
    summary_lines,
)
from medsearch.settings import get_settings

logger = logging.getLogger(__name__)


def coerce_response(payload: Any) -> ApiResponse:
    """Validate a raw response, wrapping a lone detail record into a list."""
    if isinstance(payload, ApiResponse):
        return payload
    if not isinstance(payload, Mapping):
        logger.warning("Ignoring response payload of type %s", type(payload).__name__)
        return ApiResponse()

    sql_command = payload.get("sql_command")
    if not isinstance(sql_command, str):
        sql_command = None

    details = payload.get("details")
    if isinstance(details, Mapping):
        details = [details]
    elif isinstance(details, (list, tuple)):
        details = [detail for detail in details if isinstance(detail, Mapping)]
    else:
        details = None

    try:
        return ApiResponse.model_validate({"sql_command": sql_command, "details": details})
    except ValidationError as exc:
        logger.warning("Response details failed validation: %s", exc)
        return ApiResponse(sql_command=sql_command)


def first_detail(response: ApiResponse) -> Optional[DetailItem]:
    if not response.details:
        return None
    return response.details[0]


def _without_nil(value: Any) -> Any:
    if is_nil_token(value):
        return None
    if isinstance(value, list):
        kept = [element for element in value if not is_nil_token(element)]
        if len(kept) == len(value):
            return value
        return kept or None
    return value


def _scrub_summary(field: Any) -> Any:
    if isinstance(field, SummaryObj):
        scrubbed = _without_nil(field.summary)
        if scrubbed is field.summary:
            return field
        return field.model_copy(update={"summary": scrubbed})
    return _without_nil(field)


def scrub_nil_tokens(detail: DetailItem) -> DetailItem:
    """Return a copy of ``detail`` with sentinel summaries replaced by None."""
    updates = {}
    for name in ("summary_csv", "summary_pdf"):
        current = getattr(detail, name)
        scrubbed = _scrub_summary(current)
        if scrubbed is not current:
            logger.debug("Scrubbed sentinel value from %s", name)
            updates[name] = scrubbed
    if not updates:
        return detail
    return detail.model_copy(update=updates)


def _summary_value(field: Any) -> Any:
    if isinstance(field, SummaryObj):
        return field.summary
    return field


def _source(field: Any) -> Optional[str]:
    return field.source if isinstance(field, SummaryObj) else None


def has_summary(field: Any) -> bool:
    """True when the summary field resolves to renderable text."""
    return resolve_text(_summary_value(field)) is not None


def pdf_pages(field: Optional[SummaryObj]) -> List[Union[int, str]]:
    """Page references of a PDF summary, empty when there is no summary."""
    if field is None or not has_summary(field):
        return []

    pages = field.pages
    if isinstance(pages, (list, tuple)):
        return [page if isinstance(page, int) and not isinstance(page, bool) else str(page) for page in pages]
    if pages is not None:
        return [str(pages)]
    return []


def build_result(query: str, payload: Any) -> SearchResult:
    """Turn an upstream response into a SearchResult for the rendering layer."""
    settings = get_settings()
    query = (query or "").strip()
    response = coerce_response(payload)
    detail = first_detail(response)
    if detail is not None:
        detail = scrub_nil_tokens(detail)

    if detail is None or not (has_summary(detail.summary_csv) or has_summary(detail.summary_pdf)):
        logger.info("No renderable summary for query %r", query)
        return SearchResult(query=query, error=settings.no_results_message, sql_command=response.sql_command)

    csv_value = _summary_value(detail.summary_csv)
    items = summary_items(csv_value)

    return SearchResult(
        query=query,
        message=f'Results loaded for: "{query}".',
        sql_command=response.sql_command,
        disease_name=detail.disease_name,
        pdf_text=resolve_text(_summary_value(detail.summary_pdf)),
        pdf_source=_source(detail.summary_pdf),
        pdf_pages=pdf_pages(detail.summary_pdf),
        csv_text=resolve_text(csv_value),
        csv_source=_source(detail.summary_csv),
        csv_lines=summary_lines(csv_value),
        csv_list=resolve_lines(csv_value),
        csv_summary=normalize_summary(csv_value),
        csv_items=items or None,
        test_cards=build_cards(detail.tests_details),
        related_images=detail.related_images,
        details_chunks=detail.details_chunks,
    )
