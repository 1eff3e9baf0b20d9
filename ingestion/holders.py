# ingestion/holders.py
from __future__ import annotations

import logging
from typing import List, Optional

from ingestion.models import TokenAccount
from ingestion.parser import parse_largest_accounts, parse_owner

logger = logging.getLogger(__name__)


def get_top_holders(client, token_mint: str) -> List[TokenAccount]:
    """
    Largest token accounts of a mint, in the order the node returns them
    (the node caps the list at 20). Empty list if the lookup failed.
    """
    result = client.call("getTokenLargestAccounts", [token_mint, {"commitment": "finalized"}])
    if result is None:
        logger.error("Could not fetch largest accounts for mint %s", token_mint)
        return []
    try:
        return parse_largest_accounts(result)
    except ValueError as e:
        logger.error("Unexpected getTokenLargestAccounts result for %s: %s", token_mint, e)
        return []


def get_owner(client, token_account: str) -> Optional[str]:
    result = client.call("getAccountInfo", [token_account, {"encoding": "jsonParsed"}])
    if result is None:
        logger.error("Error fetching owner for token account %s", token_account)
        return None
    try:
        return parse_owner(result)
    except ValueError as e:
        logger.error("No owner for token account %s: %s", token_account, e)
        return None


__all__ = ["get_top_holders", "get_owner"]
