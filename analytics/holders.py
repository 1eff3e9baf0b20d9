# analytics/holders.py
"""
Walk the top holders of a mint and report what each owning wallet holds.

Everything runs sequentially: owner lookup, SOL, then each stablecoin, with
every line emitted as soon as its value is known.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from analytics.balances import fetch_wallet_balances
from ingestion.holders import get_owner
from ingestion.models import DEFAULT_STABLECOINS, BalanceResult, TokenAccount

logger = logging.getLogger(__name__)

SEPARATOR = "-------------------"


def format_amount(value: Optional[float]) -> str:
    return "unavailable" if value is None else f"{value}"


def balance_line(label: str, value: Optional[float]) -> str:
    return f"{label} Balance: {format_amount(value)} {label}"


def process_top_holders(
    client,
    holders: Sequence[TokenAccount],
    stablecoins: Optional[Dict[str, str]] = None,
    emit: Callable[[str], None] = print,
) -> List[BalanceResult]:
    coins = stablecoins if stablecoins is not None else DEFAULT_STABLECOINS
    emit("Processing top holders:")
    results: List[BalanceResult] = []

    for holder in holders:
        emit(SEPARATOR)
        try:
            owner = get_owner(client, holder.address)
            if owner is None:
                logger.error("Skipping token account %s: owner not resolved", holder.address)
                continue
            emit(owner)
            emit(f"Token Balance: {holder.amount}")
            res = fetch_wallet_balances(
                client, owner, coins,
                on_balance=lambda label, value: emit(balance_line(label, value)),
            )
            results.append(res)
        except Exception:
            # keep going, one bad holder must not end the report
            logger.exception("Error fetching balances for token account %s", holder.address)

    return results
