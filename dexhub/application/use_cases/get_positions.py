from __future__ import annotations

from functools import partial
import logging
from typing import Sequence

from dexhub.application.dto.positions import GetPositionsInput, GetPositionsOutput
from dexhub.application.ports.position_source_port import LpPoolSourcePort, PositionSourcePort
from dexhub.domain.entities.chain import LiquidityModel
from dexhub.domain.exceptions import PositionsInputError, UnsupportedChainError
from dexhub.domain.registry.chains import get_chain
from dexhub.domain.registry.position_managers import get_position_manager, is_evm_nft_position_chain
from dexhub.domain.services.fallback import guarded_attempt, run_fallback_chain


logger = logging.getLogger(__name__)


class GetPositionsUseCase:
    """Liquidity held by a wallet, read from the chain's DEX data sources.

    Upstream failures never raise: when every source fails the output carries
    empty data and an ``error`` string.
    """

    def __init__(
        self,
        *,
        bin_position_sources: Sequence[PositionSourcePort],
        lp_pool_sources: Sequence[LpPoolSourcePort],
    ):
        self._bin_position_sources = tuple(bin_position_sources)
        self._lp_pool_sources = tuple(lp_pool_sources)

    def execute(self, command: GetPositionsInput) -> GetPositionsOutput:
        address = (command.address or "").strip()
        if not command.chain_id or not address:
            raise PositionsInputError("Missing chain or address")
        chain = get_chain(command.chain_id)

        if chain.liquidity_model is LiquidityModel.BIN_BASED:
            return self._bin_positions(chain.id, address)
        if chain.liquidity_model is LiquidityModel.SIMPLE_LP:
            return self._lp_pools(chain.id)
        message = f"Position lookup is not supported for chain: {chain.id}"
        if is_evm_nft_position_chain(chain.id):
            manager = get_position_manager(chain.id)
            message += f" ({manager.dex_name} positions live in NFT manager {manager.address})"
        raise UnsupportedChainError(message)

    def _bin_positions(self, chain_id: str, address: str) -> GetPositionsOutput:
        last = len(self._bin_position_sources) - 1
        attempts = [
            guarded_attempt(
                source.source,
                partial(source.fetch_positions, address=address),
                empty_is_failure=index < last,
            )
            for index, source in enumerate(self._bin_position_sources)
        ]
        outcome = run_fallback_chain(attempts, label=f"positions chain={chain_id}")
        if not outcome.ok:
            logger.warning("get_positions: degraded chain=%s error=%s", chain_id, outcome.error)
            return GetPositionsOutput(chain_id=chain_id, positions=[], error=outcome.error)
        return GetPositionsOutput(
            chain_id=chain_id,
            positions=list(outcome.value),
            source=outcome.source,
        )

    def _lp_pools(self, chain_id: str) -> GetPositionsOutput:
        last = len(self._lp_pool_sources) - 1
        attempts = [
            guarded_attempt(source.source, source.fetch_pools, empty_is_failure=index < last)
            for index, source in enumerate(self._lp_pool_sources)
        ]
        outcome = run_fallback_chain(attempts, label=f"lp_pools chain={chain_id}")
        if not outcome.ok:
            logger.warning("get_positions: degraded chain=%s error=%s", chain_id, outcome.error)
            return GetPositionsOutput(chain_id=chain_id, pools=[], error=outcome.error)
        return GetPositionsOutput(chain_id=chain_id, pools=list(outcome.value), source=outcome.source)
