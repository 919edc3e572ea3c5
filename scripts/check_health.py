"""
Poll the running server's health endpoint.
Usage: python scripts/check_health.py [base_url]
"""
import httpx
import sys
import os

sys.path.append(os.getcwd())
from crm.core import settings

def check(base_url: str) -> bool:
    print(f"Checking {base_url}/api/health...")
    try:
        resp = httpx.get(f"{base_url}/api/health", timeout=5)
    except httpx.HTTPError as e:
        print(f"Health Check Failed: {e}")
        return False
    
    print(f"Health Status: {resp.status_code}")
    print(resp.json())
    return resp.status_code == 200

if __name__ == "__main__":
    base_url = sys.argv[1] if len(sys.argv) > 1 else f"http://localhost:{settings.APP_PORT}"
    sys.exit(0 if check(base_url.rstrip("/")) else 1)
