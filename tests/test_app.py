import json

from pixeltraders.app import init_space_traders_data, main


class _FakeClient:
    def __init__(self):
        self.calls = []

    def get(self, parts):
        self.calls.append(("GET", tuple(parts)))
        if parts == ["my", "agent"]:
            return json.dumps({"data": {"symbol": "ROGER2", "headquarters": "X1-AB-C3",
                                        "credits": 100, "startingFaction": "COBALT",
                                        "shipCount": 2}}).encode()
        if parts[0] == "systems":
            return json.dumps({"data": {"symbol": parts[3],
                                        "orbitals": [{"symbol": "X1-AB-C4"}]}}).encode()
        return json.dumps({"meta": {"total": 1, "page": 1, "limit": 10}}).encode()

    def post(self, parts, body=None):
        self.calls.append(("POST", tuple(parts)))
        return b"{}"


def test_init_loads_state_through_client():
    client = _FakeClient()
    state = init_space_traders_data(client)
    assert state.agent.symbol == "ROGER2"
    assert state.position.symbol == "X1-AB-C3"
    assert len(state.position.orbitals) == 1
    assert state.contracts.meta.total == 1
    assert client.calls[0] == ("GET", ("my", "agent"))
    assert client.calls[-1][0] == "POST"


def test_main_fails_without_token_file(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert main([]) == 1