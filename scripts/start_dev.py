#!/usr/bin/env python3
"""
Development startup script.

Starts the mock catalog API in development mode.
"""

import os
import sys
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

MOCK_CATALOG_PORT = os.getenv("MOCK_CATALOG_PORT", "8001")


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import httpx
        import pydantic_settings
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def start_mock_catalog():
    """Run the mock catalog until interrupted."""
    print(f"\n🏪 Starting Mock Catalog on http://localhost:{MOCK_CATALOG_PORT} ...")
    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "mock_catalog.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", MOCK_CATALOG_PORT,
        ],
        cwd=PROJECT_ROOT,
    )

    print("\n" + "=" * 60)
    print(f"📍 Products API: http://localhost:{MOCK_CATALOG_PORT}/products")
    print(f"📍 API docs:     http://localhost:{MOCK_CATALOG_PORT}/docs")
    print("\nBrowse it with: python scripts/browse_products.py")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Mock Catalog stopped.")


def main():
    print("=" * 60)
    print("PowerPlay - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")
    if not check_dependencies():
        sys.exit(1)

    print("\n✓ All checks passed!")
    start_mock_catalog()


if __name__ == "__main__":
    main()
