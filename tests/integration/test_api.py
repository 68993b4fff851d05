"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient
from search_lab.config import Settings
from search_lab.main import create_app


class TestAPI:
    """Integration tests for API endpoints."""
    
    @pytest.fixture
    def client(self):
        """Create a test client over a seeded application."""
        app = create_app(Settings(seed_sample_data=True, max_word_length=20))
        with TestClient(app) as client:
            yield client
    
    def test_root_endpoint(self, client):
        """Test the root endpoint."""
        response = client.get("/")
        assert response.status_code == 200
        
        data = response.json()
        assert data["name"] == "Search Lab"
        assert data["status"] == "running"
    
    def test_api_info_endpoint(self, client):
        """Test the API info endpoint."""
        response = client.get("/api")
        assert response.status_code == 200
        
        data = response.json()
        assert "endpoints" in data
        assert data["complexity"]["binary_search"]["search"] == "O(log n)"
        assert data["complexity"]["substring"]["kmp"] == "O(n+m)"
    
    def test_binary_search(self, client):
        """Test binary search over the sample sequence."""
        response = client.get("/api/v1/binary-search/search/7")
        assert response.status_code == 200
        
        data = response.json()
        assert data["found"] is True
        assert data["index"] == 3
        assert len(data["steps"]) == 2
        assert data["steps"][-1]["found"] is True
    
    def test_binary_search_insert_and_clear(self, client):
        """Test inserting into and clearing the sequence."""
        client.delete("/api/v1/binary-search")
        for value in [9, 1, 7, 3, 5]:
            response = client.post("/api/v1/binary-search/insert", json={"value": value})
            assert response.status_code == 200
        
        assert response.json()["values"] == [1, 3, 5, 7, 9]
        
        data = client.get("/api/v1/binary-search/search/9").json()
        assert data["index"] == 4
        assert [step["mid"] for step in data["steps"]] == [2, 3, 4]
    
    def test_binary_search_rejects_non_numeric(self, client):
        """Test input validation for the sequence."""
        response = client.post("/api/v1/binary-search/insert", json={"value": "abc"})
        assert response.status_code == 422
        
        response = client.get("/api/v1/binary-search/search/abc")
        assert response.status_code == 422
    
    def test_hash_table(self, client):
        """Test inserting and looking up entries."""
        response = client.post("/api/v1/hash-table/insert", json={"key": "fig", "value": "무화과"})
        assert response.status_code == 200
        assert response.json()["size"] == 6
        
        data = client.get("/api/v1/hash-table/search/fig").json()
        assert data == {"found": True, "value": "무화과", "steps": 1}
        
        data = client.get("/api/v1/hash-table/search/kiwi").json()
        assert data["found"] is False
        
        operations = client.get("/api/v1/hash-table/operations").json()["operations"]
        assert operations[-1] == 'NOT FOUND: "kiwi"'
    
    def test_hash_table_rejects_blank_key(self, client):
        """Test that blank keys are rejected."""
        response = client.post("/api/v1/hash-table/insert", json={"key": "   ", "value": "x"})
        assert response.status_code == 422
    
    def test_trie(self, client):
        """Test trie search and autocomplete over the sample words."""
        data = client.get("/api/v1/trie/search/apple").json()
        assert data["found"] is True
        assert data["steps"] == 5
        
        data = client.get("/api/v1/trie/autocomplete/car").json()
        assert data["suggestions"] == ["car", "card", "care", "career", "careful"]
        
        data = client.get("/api/v1/trie/autocomplete/a?max_results=2").json()
        assert data["total_results"] == 2
    
    def test_trie_insert(self, client):
        """Test inserting a word."""
        response = client.post("/api/v1/trie/insert", json={"word": "Apricot"})
        assert response.status_code == 200
        
        data = client.get("/api/v1/trie/autocomplete/apr").json()
        assert "Apricot" in data["suggestions"]
        assert "Apricot" in client.get("/api/v1/trie/words").json()["words"]
    
    def test_trie_word_too_long(self, client):
        """Test the configured word length bound."""
        response = client.post("/api/v1/trie/insert", json={"word": "a" * 21})
        assert response.status_code == 400
    
    def test_pattern_too_long(self):
        """Test that an over-length pattern is rejected with 400, not 422."""
        app = create_app(Settings(seed_sample_data=True, max_pattern_length=3))
        with TestClient(app) as client:
            response = client.post("/api/v1/substring/kmp", json={"pattern": "abcd"})
            assert response.status_code == 400
            assert "Pattern too long" in response.json()["detail"]
            
            response = client.post("/api/v1/substring/naive", json={"pattern": "abc"})
            assert response.status_code == 200
    
    def test_hash_table_key_with_slash(self, client):
        """Test that keys containing slashes can be looked up."""
        client.post("/api/v1/hash-table/insert", json={"key": "a/b", "value": "slash"})
        
        data = client.get("/api/v1/hash-table/search/a/b").json()
        assert data == {"found": True, "value": "slash", "steps": 1}
        
        operations = client.get("/api/v1/hash-table/operations").json()["operations"]
        assert operations[-1] == 'FOUND: "a/b" -> slash'
    
    def test_health_and_metrics_do_not_create_sessions(self):
        """Test that monitoring endpoints leave the session registry alone."""
        app = create_app(Settings(seed_sample_data=True, max_sessions=1))
        with TestClient(app) as client:
            assert client.get("/api/v1/health").json()["status"] == "healthy"
            data = client.get("/api/v1/metrics").json()
            assert data["active_sessions"] == 0
            assert data["total_queries"] == 0
            assert data["engines"] == {}
            
            headers = {"X-Session-ID": "client-a"}
            client.post("/api/v1/binary-search/insert", json={"value": 2}, headers=headers)
            
            client.get("/api/v1/health")
            client.get("/api/v1/metrics")
            
            assert app.state.registry.session_ids() == ["client-a"]
            values = client.get("/api/v1/binary-search", headers=headers).json()["values"]
            assert 2 in values
    
    def test_substring_search(self, client):
        """Test naive and KMP search over the sample texts."""
        naive = client.post("/api/v1/substring/naive", json={"pattern": "world"}).json()
        kmp = client.post("/api/v1/substring/kmp", json={"pattern": "world"}).json()
        
        assert [m["index"] for m in naive["matches"]] == [6, 33]
        assert [m["index"] for m in kmp["matches"]] == [6, 33]
        assert kmp["lps_array"] == [0, 0, 0, 0, 0]
        assert naive["lps_array"] is None
        assert kmp["operations"][0] == 'KMP SEARCH: Pattern "world"'
    
    def test_substring_add_text(self, client):
        """Test adding a text and searching it."""
        client.delete("/api/v1/substring")
        response = client.post("/api/v1/substring/texts", json={"text": "abcabcabc"})
        assert response.json()["texts"] == ["abcabcabc"]
        
        naive = client.post("/api/v1/substring/naive", json={"pattern": "abc"}).json()
        kmp = client.post("/api/v1/substring/kmp", json={"pattern": "abc"}).json()
        
        assert naive["total_matches"] == kmp["total_matches"] == 3
        assert naive["total_comparisons"] >= kmp["total_comparisons"]
    
    def test_sessions_are_isolated(self, client):
        """Test that the session header selects independent engines."""
        headers = {"X-Session-ID": "other"}
        client.delete("/api/v1/hash-table", headers=headers)
        
        assert client.get("/api/v1/hash-table", headers=headers).json()["size"] == 0
        assert client.get("/api/v1/hash-table").json()["size"] == 5
    
    def test_session_reset(self, client):
        """Test clearing every engine of a session."""
        response = client.delete("/api/v1/session")
        assert response.status_code == 200
        
        data = client.get("/api/v1/session").json()
        assert data["session_id"] == "default"
        assert data["sizes"] == {"binary_search": 0, "hash_table": 0, "trie": 0, "substring": 0}
    
    def test_health(self, client):
        """Test the health endpoints."""
        data = client.get("/api/v1/health").json()
        assert data["status"] == "healthy"
        assert set(data["dependencies"]) == {"binary_search", "hash_table", "trie", "substring"}
        
        assert client.get("/api/v1/health/live").json()["status"] == "alive"
        assert client.get("/api/v1/health/ready").json()["status"] == "ready"
    
    def test_metrics(self, client):
        """Test the metrics endpoint."""
        client.get("/api/v1/binary-search/search/7")
        client.get("/api/v1/trie/search/zzz")
        
        data = client.get("/api/v1/metrics").json()
        assert data["total_queries"] == 2
        assert data["active_sessions"] == 1
        assert data["engines"]["trie"]["misses"] == 1
        assert data["memory_usage_mb"] > 0
