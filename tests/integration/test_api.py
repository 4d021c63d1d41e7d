"""
Integration tests for the HTTP API: parse, metrics, assessment and the
combined analyze flow, exercised through FastAPI's TestClient.
"""

import pytest

from tradebuddy.pipeline.risk_engine.constants import MSG_INSUFFICIENT_DATA


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

class TestHealth:
    def test_api_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "service": "TradeBuddy"}

    def test_detailed_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.0.0"


# ---------------------------------------------------------------------------
# /api/parse
# ---------------------------------------------------------------------------

class TestParseEndpoint:
    def test_expired_notice(self, client, expired_notice):
        resp = client.post("/api/parse", json={"text": expired_notice})
        assert resp.status_code == 200
        body = resp.json()
        assert body["count"] == 1
        t = body["trades"][0]
        assert t["action"] == "expired"
        assert t["ticker"] == "IREN"
        assert t["instrument_type"] == "put"
        assert t["strike"] == 45
        assert t["expiry"] == "2026-01-16"
        assert t["date"] == "2026-01-16"
        assert t["contracts"] == 1
        assert t["open_close"] is None

    def test_multiple_blocks_in_order(self, client, processing_block, detailed_ticket):
        text = f"{processing_block}\n-----\n{detailed_ticket}"
        body = client.post("/api/parse", json={"text": text}).json()
        assert body["count"] == 2
        assert body["trades"][0]["expiry"] == "2026-01-16"
        assert body["trades"][1]["expiry"] == "2026-01-09"

    def test_empty_text(self, client):
        body = client.post("/api/parse", json={"text": "   "}).json()
        assert body == {"trades": [], "count": 0}

    def test_gibberish_returns_empty_record(self, client):
        body = client.post("/api/parse", json={"text": "hello world"}).json()
        assert body["count"] == 1
        assert body["trades"][0]["is_empty"] is True

    def test_missing_text_is_rejected(self, client):
        assert client.post("/api/parse", json={}).status_code == 422


# ---------------------------------------------------------------------------
# /api/metrics
# ---------------------------------------------------------------------------

class TestMetricsEndpoint:
    def test_call_debit_spread(self, client):
        payload = {
            "legs": [
                {"instrument_type": "call", "side": "buy", "strike": 100, "expiry": "2026-03-20"},
                {"instrument_type": "call", "side": "sell", "strike": 105, "expiry": "2026-03-20"},
            ],
            "entry_price": 2,
            "quantity": 1,
        }
        resp = client.post("/api/metrics", json=payload)
        assert resp.status_code == 200
        body = resp.json()
        assert body["max_risk"] == 200
        assert body["max_reward"] == 300
        assert body["risk_reward"] == pytest.approx(1.5)
        assert body["breakeven"] == [102]
        assert body["probability_of_profit"] is None

    def test_naked_short_reports_unbounded(self, client):
        payload = {
            "legs": [{"instrument_type": "put", "side": "sell", "strike": 50}],
            "entry_price": -2,
            "quantity": 1,
        }
        body = client.post("/api/metrics", json=payload).json()
        assert body["max_risk"] == "unbounded"
        assert body["max_reward"] == 200
        assert body["risk_reward"] == 0

    def test_market_context_yields_pop(self, client):
        payload = {
            "legs": [{"instrument_type": "call", "side": "buy", "strike": 100}],
            "entry_price": 2,
            "quantity": 1,
            "current_price": 100,
            "implied_volatility": 0.3,
            "days_to_expiry": 30,
        }
        body = client.post("/api/metrics", json=payload).json()
        assert 0.0 < body["probability_of_profit"] < 0.5

    def test_empty_legs(self, client):
        body = client.post("/api/metrics", json={"legs": [], "entry_price": 0, "quantity": 0}).json()
        assert body["max_risk"] == 0
        assert body["max_reward"] == 0
        assert body["risk_reward"] == 0
        assert body["breakeven"] == []

    @pytest.mark.parametrize("leg", [
        {"instrument_type": "future", "side": "buy", "strike": 100},
        {"instrument_type": "call", "side": "hold", "strike": 100},
        {"instrument_type": "call", "side": "buy", "strike": -5},
        {"instrument_type": "call", "side": "buy", "strike": 100, "quantity": 0},
    ])
    def test_invalid_leg_is_rejected(self, client, leg):
        payload = {"legs": [leg], "entry_price": 1, "quantity": 1}
        assert client.post("/api/metrics", json=payload).status_code == 422


# ---------------------------------------------------------------------------
# /api/assessment
# ---------------------------------------------------------------------------

class TestAssessmentEndpoint:
    def test_risk_heavy(self, client):
        payload = {"metrics": {"risk_reward": 1.67, "probability_of_profit": 0.4}}
        body = client.post("/api/assessment", json=payload).json()
        assert body["text"].startswith("Risk-heavy")
        assert body["risk_level"] == "high"
        assert body["color"] == "red"
        assert body["factors"]["risk_reward"] == 1.67

    def test_no_metrics(self, client):
        body = client.post("/api/assessment", json={"metrics": {}}).json()
        assert body["text"] == MSG_INSUFFICIENT_DATA
        assert body["risk_level"] == "unknown"
        assert body["color"] == "gray"

    def test_unbounded_risk_round_trips(self, client):
        payload = {"metrics": {"max_risk": "unbounded", "risk_reward": 0, "probability_of_profit": 0.8}}
        body = client.post("/api/assessment", json=payload).json()
        assert body["risk_level"] == "low"
        assert body["factors"]["max_risk"] == "unbounded"
        assert "$5,000" not in body["text"]


# ---------------------------------------------------------------------------
# /api/analyze
# ---------------------------------------------------------------------------

class TestAnalyzeEndpoint:
    def test_detailed_ticket(self, client, detailed_ticket):
        resp = client.post("/api/analyze", json={"text": detailed_ticket})
        assert resp.status_code == 200
        body = resp.json()
        assert body["count"] == 1
        result = body["results"][0]
        assert result["parsed"]["ticker"] == "IREN"
        assert result["trade"]["entry_price"] == 1.08
        assert result["trade"]["legs"][0]["side"] == "buy"
        assert result["metrics"]["max_risk"] == pytest.approx(108)
        assert result["metrics"]["max_reward"] == "unbounded"
        assert result["metrics"]["breakeven"] == [pytest.approx(41.92)]
        assert result["assessment"]["risk_level"] in ("low", "medium", "high", "unknown")

    def test_expired_notice_has_no_metrics(self, client, expired_notice):
        body = client.post("/api/analyze", json={"text": expired_notice}).json()
        result = body["results"][0]
        assert result["parsed"]["action"] == "expired"
        assert result["trade"] is None
        assert result["metrics"] is None
        assert result["assessment"] is None

    def test_market_context_is_applied(self, client, detailed_ticket):
        payload = {
            "text": detailed_ticket,
            "current_price": 45,
            "implied_volatility": 0.8,
            "days_to_expiry": 10,
        }
        body = client.post("/api/analyze", json=payload).json()
        pop = body["results"][0]["metrics"]["probability_of_profit"]
        assert pop is not None
        assert 0.0 <= pop <= 1.0
        assert "POP estimate unavailable" not in body["results"][0]["assessment"]["text"]

    def test_empty_text(self, client):
        body = client.post("/api/analyze", json={"text": ""}).json()
        assert body == {"results": [], "count": 0}
