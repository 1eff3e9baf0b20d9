import pytest


class FakeClient:
    """Stands in for RpcClient: answers from a handler and records every call."""

    def __init__(self, handler):
        self.handler = handler
        self.calls = []

    def call(self, method, params):
        self.calls.append((method, params))
        return self.handler(method, params)


def parsed_account(owner):
    return {"value": {"data": {"parsed": {"info": {"owner": owner}}, "program": "spl-token"}}}


def token_accounts(*ui_amounts):
    return {"value": [
        {"pubkey": f"TA{i}", "account": {"data": {"parsed": {"info": {"tokenAmount": {"uiAmount": ui}}}}}}
        for i, ui in enumerate(ui_amounts)
    ]}


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def rpc_shapes():
    return {"parsed_account": parsed_account, "token_accounts": token_accounts}
