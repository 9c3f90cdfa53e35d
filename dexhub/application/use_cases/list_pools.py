from __future__ import annotations

import logging
from typing import Sequence

from dexhub.application.dto.pools import ListPoolsOutput
from dexhub.application.ports.pool_listing_port import PoolListingSourcePort
from dexhub.domain.services.fallback import guarded_attempt, run_fallback_chain


logger = logging.getLogger(__name__)

FAILED_TO_FETCH_POOLS = "Failed to fetch pools"


class ListPoolsUseCase:
    def __init__(self, *, sources: Sequence[PoolListingSourcePort]):
        self._sources = tuple(sources)

    def execute(self) -> ListPoolsOutput:
        last = len(self._sources) - 1
        outcome = run_fallback_chain(
            [
                guarded_attempt(source.source, source.fetch_pools, empty_is_failure=index < last)
                for index, source in enumerate(self._sources)
            ],
            label="pools",
        )
        if not outcome.ok:
            logger.warning("list_pools: all_sources_failed error=%s", outcome.error)
            return ListPoolsOutput(pools=[], error=FAILED_TO_FETCH_POOLS, details=outcome.error)
        return ListPoolsOutput(pools=list(outcome.value), source=outcome.source)
