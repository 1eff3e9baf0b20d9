from analytics.holders import process_top_holders
from ingestion.holders import get_top_holders
from ingestion.models import USDC_MINT


def _handler(rpc_shapes, owners, fail_owner=None):
    def handler(method, params):
        if method == "getTokenLargestAccounts":
            return {"value": [{"address": "A1", "amount": "100"}, {"address": "A2", "amount": "50"}]}
        if method == "getAccountInfo":
            return rpc_shapes["parsed_account"](owners[params[0]])
        if params[0] == fail_owner:
            raise RuntimeError("boom")
        if method == "getBalance":
            return {"value": 1_000_000_000 if params[0] == "OwnerA" else 500_000_000}
        if method == "getTokenAccountsByOwner":
            return rpc_shapes["token_accounts"](5.0 if params[1]["mint"] == USDC_MINT else 6.0)
        raise AssertionError(f"unexpected method {method}")
    return handler


def test_end_to_end_owner_a_before_owner_b(fake_client, rpc_shapes):
    c = fake_client(_handler(rpc_shapes, {"A1": "OwnerA", "A2": "OwnerB"}))
    lines = []

    holders = get_top_holders(c, "TokenMintXYZ")
    results = process_top_holders(c, holders, emit=lines.append)

    assert lines == [
        "Processing top holders:",
        "-------------------",
        "OwnerA",
        "Token Balance: 100",
        "SOL Balance: 1.0 SOL",
        "USDC Balance: 5.0 USDC",
        "USDT Balance: 6.0 USDT",
        "-------------------",
        "OwnerB",
        "Token Balance: 50",
        "SOL Balance: 0.5 SOL",
        "USDC Balance: 5.0 USDC",
        "USDT Balance: 6.0 USDT",
    ]
    assert [r.owner for r in results] == ["OwnerA", "OwnerB"]

    # every OwnerA call is issued before the first OwnerB call
    wallets = [p[0] for m, p in c.calls if m in ("getBalance", "getTokenAccountsByOwner")]
    assert wallets == ["OwnerA"] * 3 + ["OwnerB"] * 3


def test_one_holder_failure_does_not_stop_batch(fake_client, rpc_shapes):
    c = fake_client(_handler(rpc_shapes, {"A1": "OwnerA", "A2": "OwnerB"}, fail_owner="OwnerA"))
    lines = []

    results = process_top_holders(c, get_top_holders(c, "TokenMintXYZ"), emit=lines.append)

    assert [r.owner for r in results] == ["OwnerB"]
    assert "OwnerB" in lines
    assert lines[-1] == "USDT Balance: 6.0 USDT"


def test_unresolved_owner_is_skipped(fake_client, rpc_shapes):
    def handler(method, params):
        if method == "getAccountInfo":
            return None if params[0] == "A1" else rpc_shapes["parsed_account"]("OwnerB")
        if method == "getBalance":
            return None
        return rpc_shapes["token_accounts"]()

    c = fake_client(handler)
    holders = get_top_holders(fake_client(_handler(rpc_shapes, {})), "TokenMintXYZ")
    lines = []

    results = process_top_holders(c, holders, emit=lines.append)

    assert [r.owner for r in results] == ["OwnerB"]
    assert "SOL Balance: unavailable SOL" in lines
    assert "USDC Balance: 0 USDC" in lines


def test_no_holders_prints_header_only(fake_client):
    lines = []
    assert process_top_holders(fake_client(lambda m, p: None), [], emit=lines.append) == []
    assert lines == ["Processing top holders:"]
