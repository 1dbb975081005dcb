"""Tests for IPv6 endpoints."""

import os


class TestParseEndpoint:
    """Tests for /api/v1/ipv6/parse endpoint."""

    def test_valid_prefix(self, client):
        """Test parsing a documentation prefix."""
        response = client.post("/api/v1/ipv6/parse", json={"address": "2001:db8::/32"})
        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["classification"] == "Documentation"
        assert data["scope"] == "Global"
        assert data["compressed"] == "2001:db8::"
        assert data["network"] == "2001:db8::/32"
        assert data["word128"] == [0x2001, 0x0DB8, 0, 0, 0, 0, 0, 0]
        assert data["integer"] == "42540766411282592856903984951653826560"
        assert [note["rfc"] for note in data["compliance_notes"]] == ["RFC 4291", "RFC 5952"]

    def test_invalid_address_is_not_http_error(self, client):
        """Invalid input returns 200 with valid=false."""
        response = client.post("/api/v1/ipv6/parse", json={"address": "2001:db8::1::2"})
        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert data["error"] == "MultipleCompressionMarkers"
        assert data["error_detail"]
        assert data["classification"] is None

    def test_oversized_prefix_suffix(self, client):
        """A prefix suffix too long for int conversion is an ordinary invalid record."""
        response = client.post("/api/v1/ipv6/parse", json={"address": "2001:db8::/" + "1" * 5000})
        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert data["error"] == "InvalidPrefix"

    def test_allocation_prefix_from_environment(self, client):
        """total_subnets uses ALLOCATION_PREFIX_LENGTH."""
        os.environ["ALLOCATION_PREFIX_LENGTH"] = "56"
        response = client.post("/api/v1/ipv6/parse", json={"address": "2001:db8::/64"})
        assert response.json()["total_subnets"] == "256"

    def test_missing_address_field(self, client):
        response = client.post("/api/v1/ipv6/parse", json={})
        assert response.status_code == 422


class TestPlanEndpoint:
    """Tests for /api/v1/ipv6/plan endpoint."""

    def test_full_plan(self, client):
        response = client.post(
            "/api/v1/ipv6/plan", json={"network": "2001:db8::/32", "target_prefix_length": 34}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total_possible_subnets"] == "4"
        assert [subnet["network"] for subnet in data["subnets"]] == [
            "2001:db8::/34",
            "2001:db8:4000::/34",
            "2001:db8:8000::/34",
            "2001:db8:c000::/34",
        ]

    def test_limit(self, client):
        response = client.post(
            "/api/v1/ipv6/plan",
            json={"network": "2001:db8::/32", "target_prefix_length": 64, "limit": 8},
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["subnets"]) == 8
        assert data["total_possible_subnets"] == str(2**32)

    def test_no_limit_capped_by_ceiling(self, client):
        """Without a limit, PLAN_MAX_SUBNETS caps generation."""
        os.environ["PLAN_MAX_SUBNETS"] = "3"
        response = client.post(
            "/api/v1/ipv6/plan", json={"network": "2001:db8::/32", "target_prefix_length": 48}
        )
        assert response.status_code == 200
        assert len(response.json()["subnets"]) == 3

    def test_limit_above_ceiling(self, client):
        os.environ["PLAN_MAX_SUBNETS"] = "2"
        response = client.post(
            "/api/v1/ipv6/plan",
            json={"network": "2001:db8::/32", "target_prefix_length": 48, "limit": 10},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "LimitExceeded"

    def test_invalid_target(self, client):
        response = client.post(
            "/api/v1/ipv6/plan", json={"network": "2001:db8::/48", "target_prefix_length": 32}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "InvalidTarget"

    def test_invalid_network(self, client):
        response = client.post(
            "/api/v1/ipv6/plan", json={"network": "not-an-ip", "target_prefix_length": 64}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "InvalidPrefix"

    def test_oversized_prefix_suffix_network(self, client):
        response = client.post(
            "/api/v1/ipv6/plan", json={"network": "::/" + "9" * 5000, "target_prefix_length": 64}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "InvalidPrefix"

    def test_negative_limit_rejected(self, client):
        response = client.post(
            "/api/v1/ipv6/plan",
            json={"network": "2001:db8::/32", "target_prefix_length": 48, "limit": -1},
        )
        assert response.status_code == 422


class TestSummarizeEndpoint:
    """Tests for /api/v1/ipv6/summarize endpoint."""

    def test_summarize(self, client):
        prefixes = ["2001:db8:8000::/33", "2001:db8::/33", "bogus"]
        response = client.post("/api/v1/ipv6/summarize", json={"prefixes": prefixes})
        assert response.status_code == 200
        data = response.json()
        assert data["prefixes"] == prefixes
        assert data["summarized"] == ["2001:db8::/32"]

    def test_missing_prefixes(self, client):
        response = client.post("/api/v1/ipv6/summarize", json={})
        assert response.status_code == 422


class TestBatchEndpoint:
    """Tests for /api/v1/ipv6/batch endpoints."""

    def test_batch_addresses_and_text(self, client):
        response = client.post(
            "/api/v1/ipv6/batch",
            json={"addresses": ["::1", "bogus"], "text": "fe80::1/64\n\nff02::1\n"},
        )
        assert response.status_code == 200
        data = response.json()
        assert [record["raw_input"] for record in data["results"]] == ["::1", "bogus", "fe80::1/64", "ff02::1"]
        assert data["valid_count"] == 3
        assert data["invalid_count"] == 1
        assert data["classification_counts"] == {"Loopback": 1, "LinkLocal": 1, "Multicast": 1}

    def test_batch_too_large(self, client):
        os.environ["BATCH_MAX_ADDRESSES"] = "2"
        response = client.post("/api/v1/ipv6/batch", json={"addresses": ["::1", "::2", "::3"]})
        assert response.status_code == 400

    def test_batch_export(self, client):
        response = client.post("/api/v1/ipv6/batch/export", json={"text": "2001:db8::/32\nbogus"})
        assert response.status_code == 200
        rows = response.json()
        assert rows[0]["classification"] == "Documentation"
        assert rows[0]["network"] == "2001:db8::/32"
        assert rows[1]["valid"] is False
