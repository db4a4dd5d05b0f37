"""Ranking and filtering of candidates by similarity to a query."""

import logging
import time
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union

import structlog
from pydantic import ValidationError

from ..exceptions import InvalidInputError, InvalidOptionError, ensure_str
from ..models.options import SearchOptions
from ..models.result import SearchResult
from .normalizer import TextNormalizer
from .scorer import similarity

logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

OptionsLike = Union[SearchOptions, Mapping, None]


def resolve_options(options: OptionsLike = None, **overrides: Any) -> SearchOptions:
    """
    Turn ``options`` plus keyword overrides into a validated SearchOptions.

    Raises:
        InvalidOptionError: If any option is unknown or fails validation.
    """
    if isinstance(options, SearchOptions) and not overrides:
        return options

    if options is None:
        values = {}
    elif isinstance(options, SearchOptions):
        values = options.model_dump()
    elif isinstance(options, Mapping):
        values = dict(options)
    else:
        raise InvalidOptionError(
            f"options must be SearchOptions or a mapping, got {type(options).__name__}"
        )

    # An override in either spelling replaces an earlier value in the other
    for key in overrides:
        if key in ("ignore_case", "ignoreCase"):
            values.pop("ignore_case", None)
            values.pop("ignoreCase", None)
    values.update(overrides)

    try:
        return SearchOptions.model_validate(values)
    except ValidationError as e:
        raise InvalidOptionError(str(e)) from e


def search(
    query: str,
    candidates: Iterable[str],
    options: OptionsLike = None,
    **overrides: Any,
) -> List[SearchResult]:
    """
    Rank candidates by similarity to a query.

    Args:
        query: Search query, may be empty
        candidates: Strings to search, in order
        options: SearchOptions, a mapping of option names, or None for defaults
        **overrides: Individual options applied on top of ``options``

    Returns:
        Results with score >= threshold, best first; equal scores keep
        their input order. Truncated to ``limit`` when set.

    Raises:
        InvalidInputError: If the query or any candidate is not a string.
        InvalidOptionError: If the options fail validation.

    Example:
        >>> [r.item for r in search("aple", ["apple", "grape", "maple"], limit=2)]
        ['apple', 'maple']
    """
    start_time = time.time()

    opts = resolve_options(options, **overrides)
    ensure_str(query, "query")
    if isinstance(candidates, (str, bytes)):
        raise InvalidInputError(
            "candidates must be a collection of strings, not a single string"
        )

    normalizer = TextNormalizer(ignore_case=opts.ignore_case, strip_accents=opts.normalize)
    comparison_query = normalizer.normalize(query)

    results = []
    total_candidates = 0
    for index, candidate in enumerate(candidates):
        total_candidates += 1
        if not isinstance(candidate, str):
            raise InvalidInputError(
                f"candidates[{index}] must be str, got {type(candidate).__name__}"
            )

        score = similarity(comparison_query, normalizer.normalize(candidate))
        if score >= opts.threshold:
            results.append(SearchResult(item=candidate, score=score, index=index))

    # list.sort is stable, ties keep input order
    results.sort(key=lambda r: r.score, reverse=True)

    total_matches = len(results)
    if opts.limit is not None:
        results = results[:opts.limit]

    execution_time = (time.time() - start_time) * 1000
    logger.debug(
        "search_completed",
        query=query,
        total_candidates=total_candidates,
        total_matches=total_matches,
        returned=len(results),
        execution_time_ms=round(execution_time, 3),
    )

    return results


def best_match(
    query: str,
    candidates: Iterable[str],
    options: OptionsLike = None,
    **overrides: Any,
) -> Optional[SearchResult]:
    """
    Find the single best match for a query.

    Returns:
        The top-ranked SearchResult, or None if nothing passes the threshold
    """
    overrides["limit"] = 1
    results = search(query, candidates, options, **overrides)
    return results[0] if results else None
