#!/usr/bin/env python3
"""
Development server runner with automatic reload.

Copies env.example to .env on first run so the GitHub credentials can be
filled in before any upload is attempted.
"""

import os
import sys
import subprocess
from pathlib import Path

REQUIRED_KEYS = ("GITHUB_TOKEN", "GITHUB_USERNAME")


def check_env_file():
    """Make sure a .env file exists and names the GitHub credentials."""
    env_file = Path(".env")
    env_example = Path("env.example")

    if not env_file.exists():
        if not env_example.exists():
            print("No .env file found. Please create one with GITHUB_TOKEN and GITHUB_USERNAME.")
            return False
        print("Creating .env file from env.example...")
        env_file.write_text(env_example.read_text())
        print("Please fill in GITHUB_TOKEN and GITHUB_USERNAME in .env.")
        return False

    configured = {
        line.split("=", 1)[0].strip()
        for line in env_file.read_text().splitlines()
        if "=" in line and line.split("=", 1)[1].strip()
    }
    missing = [key for key in REQUIRED_KEYS if key not in configured and not os.environ.get(key)]
    if missing:
        # Server still starts; uploads answer "Server configuration error"
        print(f"Warning: {', '.join(missing)} not set, uploads will fail.")

    return True


def main():
    """Run the development server."""
    if not check_env_file():
        sys.exit(1)

    os.environ.setdefault("ENVIRONMENT", "development")
    port = os.environ.get("PORT", "8000")

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "app.main:app",
            "--host", "0.0.0.0",
            "--port", port,
            "--reload"
        ])
    except KeyboardInterrupt:
        print("\nShutting down development server...")


if __name__ == "__main__":
    main()
