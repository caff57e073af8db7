"""Shared test configuration.

Loads backend/.env and backend/.env.test (when present) so integration
tests see the same settings as local runs.
"""

from pathlib import Path

from dotenv import load_dotenv

# Load .env first (default environment variables)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Load .env.test for integration tests (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)
