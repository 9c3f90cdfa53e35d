from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from dexhub.api.deps import get_wallet_transactions_use_case
from dexhub.api.schemas.wallet_transactions import (
    WalletTransactionResponse,
    WalletTransactionsRequest,
    WalletTransactionsResponse,
)
from dexhub.application.dto.wallet_transactions import GetWalletTransactionsInput
from dexhub.application.use_cases.get_wallet_transactions import GetWalletTransactionsUseCase
from dexhub.domain.exceptions import ClientError, UpstreamUnavailableError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/v1/wallet-transactions", response_model=WalletTransactionsResponse)
def post_wallet_transactions(
    payload: WalletTransactionsRequest,
    use_case: GetWalletTransactionsUseCase = Depends(get_wallet_transactions_use_case),
):
    try:
        result = use_case.execute(GetWalletTransactionsInput(wallet_address=payload.wallet_address or ""))
    except ClientError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UpstreamUnavailableError as exc:
        logger.error("wallet_transactions: upstream_failed error=%s", exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch transactions", "details": str(exc)},
        )

    return WalletTransactionsResponse(
        transactions=[
            WalletTransactionResponse(
                id=row.hash,
                hash=row.hash,
                from_token=row.from_token,
                to_token=row.to_token,
                from_amount=row.from_amount,
                to_amount=row.to_amount,
                status=row.status,
                timestamp=row.timestamp,
                block_number=row.block_number,
            )
            for row in result.transactions
        ]
    )
