# Root conftest.py - loads .env before test collection so TRUTHTABLE_*
# variables are visible to modules imported by the tests.
from dotenv import load_dotenv
load_dotenv()

# Note: fixtures from tests/conftest.py are discovered automatically since
# tests/ is a subdirectory.
