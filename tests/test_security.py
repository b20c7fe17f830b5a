"""
Tests for the rate limiter and client IP detection
"""

import threading
import time

import pytest
from starlette.requests import Request

from app.utils.security import rate_limiter, rate_limit_check, get_client_ip

@pytest.fixture(autouse=True)
def clean_rate_limiter():
    rate_limiter.clear()
    yield
    rate_limiter.clear()

def make_request(headers=None, client=("127.0.0.1", 50000)):
    """Bare HTTP request carrying the given headers"""
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": raw_headers,
        "client": client,
    })

def test_rate_limit_check_concurrent_calls_all_recorded():
    """Test no request is lost when many threads hit the same client"""
    threads_count = 8
    calls_per_thread = 200
    
    def hammer():
        for _ in range(calls_per_thread):
            rate_limit_check("1.1.1.1", limit=10**9)
    
    threads = [threading.Thread(target=hammer) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    
    assert len(rate_limiter["1.1.1.1"]) == threads_count * calls_per_thread

def test_rate_limit_check_concurrent_limit_enforced():
    """Test concurrent callers never exceed the limit"""
    allowed = []
    
    def attempt():
        for _ in range(50):
            if rate_limit_check("2.2.2.2", limit=25):
                allowed.append(True)
    
    threads = [threading.Thread(target=attempt) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    
    assert len(allowed) == 25

def test_idle_clients_are_forgotten():
    """Test clients with only stale requests drop out of the limiter"""
    stale = time.time() - 120
    rate_limiter["10.0.0.9"] = [stale, stale + 1]
    
    assert rate_limit_check("10.0.0.1", limit=5)
    
    assert "10.0.0.9" not in rate_limiter
    assert list(rate_limiter.keys()) == ["10.0.0.1"]

def test_old_requests_do_not_count():
    rate_limiter["10.0.0.1"] = [time.time() - 61]
    
    assert rate_limit_check("10.0.0.1", limit=1)
    assert len(rate_limiter["10.0.0.1"]) == 1

def test_get_client_ip_prefers_forwarded_for():
    request = make_request({
        "X-Forwarded-For": "203.0.113.5, 10.0.0.1",
        "X-Real-IP": "198.51.100.7",
    })
    
    assert get_client_ip(request) == "203.0.113.5"

def test_get_client_ip_real_ip():
    request = make_request({"X-Real-IP": "198.51.100.7"})
    
    assert get_client_ip(request) == "198.51.100.7"

def test_get_client_ip_falls_back_to_peer():
    assert get_client_ip(make_request()) == "127.0.0.1"
    assert get_client_ip(make_request(client=None)) == "unknown"
