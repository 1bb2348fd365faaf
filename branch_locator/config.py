# branch_locator/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# API Keys
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# Fallback resolver
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
FALLBACK_TIMEOUT = float(os.getenv("FALLBACK_TIMEOUT", "30"))
OPENAI_MAX_RETRIES = int(os.getenv("OPENAI_MAX_RETRIES", "2"))

# Runtime parameters
BATCH_SIZE = 15
CONCURRENCY = 50
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# File names
BRANCHES_CSV = os.getenv("BRANCHES_CSV", "branches.csv")
INPUT_CSV = os.getenv("INPUT_CSV", "customer_addresses.csv")
OUTPUT_CSV = os.getenv("OUTPUT_CSV", "nearest_branches.csv")
