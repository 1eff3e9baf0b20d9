from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ingestion.models import DEFAULT_STABLECOINS, LAMPORTS_PER_SOL, BalanceResult
from ingestion.parser import parse_first_ui_amount, parse_lamports

logger = logging.getLogger(__name__)


def get_native_balance(client, wallet: str) -> Optional[float]:
    """SOL balance of a wallet, None if it could not be fetched."""
    result = client.call("getBalance", [wallet])
    if result is None:
        return None
    try:
        return parse_lamports(result) / LAMPORTS_PER_SOL
    except ValueError as e:
        logger.error("Unexpected getBalance result for %s: %s", wallet, e)
        return None


def get_token_balance(client, wallet: str, mint: str) -> Optional[float]:
    """
    uiAmount of the wallet's first token account for `mint`.

    0 when the wallet holds no account for the mint. Further accounts for
    the same mint are ignored.
    """
    result = client.call(
        "getTokenAccountsByOwner",
        [wallet, {"mint": mint}, {"encoding": "jsonParsed"}],
    )
    if result is None:
        return None
    try:
        return parse_first_ui_amount(result)
    except ValueError as e:
        logger.error("Unexpected getTokenAccountsByOwner result for %s mint=%s: %s", wallet, mint, e)
        return None


def fetch_wallet_balances(
    client,
    owner: str,
    stablecoins: Optional[Dict[str, str]] = None,
    on_balance: Optional[Callable[[str, Optional[float]], None]] = None,
) -> BalanceResult:
    """
    SOL first, then each stablecoin in mapping order. on_balance(label, value)
    fires as soon as each value is known.
    """
    coins = stablecoins if stablecoins is not None else DEFAULT_STABLECOINS
    res = BalanceResult(owner=owner, sol=get_native_balance(client, owner))
    if on_balance:
        on_balance("SOL", res.sol)
    for label, mint in coins.items():
        res.tokens[label] = get_token_balance(client, owner, mint)
        if on_balance:
            on_balance(label, res.tokens[label])
    return res
