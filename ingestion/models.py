from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDT_MINT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"

LAMPORTS_PER_SOL = 1e9

DEFAULT_STABLECOINS: Dict[str, str] = {"USDC": USDC_MINT, "USDT": USDT_MINT}


@dataclass(frozen=True)
class TokenAccount:
    """One entry of getTokenLargestAccounts."""
    address: str
    amount: str


@dataclass
class BalanceResult:
    owner: str
    sol: Optional[float] = None
    tokens: Dict[str, Optional[float]] = field(default_factory=dict)
