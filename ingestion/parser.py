# ingestion/parser.py
"""
ingestion.parser
Pull the fields we use out of Solana JSON-RPC results.

Every function raises ValueError when the result does not have the
expected shape; callers decide what sentinel to fall back to.
"""
from typing import Any, List, Optional

from ingestion.models import TokenAccount


def _value(result: Any) -> Any:
    if not isinstance(result, dict) or "value" not in result:
        raise ValueError("RPC result has no 'value' member")
    return result["value"]


def parse_largest_accounts(result: Any) -> List[TokenAccount]:
    value = _value(result)
    if not isinstance(value, list):
        raise ValueError("getTokenLargestAccounts value is not a list")
    out = []
    for item in value:
        if not isinstance(item, dict) or "address" not in item:
            raise ValueError(f"Invalid largest account entry: {item!r}")
        out.append(TokenAccount(
            address=item["address"],
            amount=str(item.get("amount", "0")),
        ))
    return out


def parse_owner(result: Any) -> Optional[str]:
    """Owner wallet of a jsonParsed token account, None if the account is missing."""
    value = _value(result)
    if value is None:
        return None
    try:
        owner = value["data"]["parsed"]["info"]["owner"]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Account data is not a parsed token account: {e!r}") from e
    return owner or None


def parse_lamports(result: Any) -> int:
    value = _value(result)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"getBalance value is not an integer: {value!r}")
    return value


def parse_first_ui_amount(result: Any) -> float:
    value = _value(result)
    if not isinstance(value, list):
        raise ValueError("getTokenAccountsByOwner value is not a list")
    if not value:
        return 0
    try:
        token_amount = value[0]["account"]["data"]["parsed"]["info"]["tokenAmount"]
    except (KeyError, TypeError, IndexError) as e:
        raise ValueError(f"Token account is not jsonParsed: {e!r}") from e
    if not isinstance(token_amount, dict):
        raise ValueError(f"tokenAmount is not an object: {token_amount!r}")
    ui = token_amount.get("uiAmount")
    return ui if ui is not None else 0
