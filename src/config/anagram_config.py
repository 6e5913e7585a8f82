"""Centralized configuration for the anagram engine: dictionary location, word limits and logging."""

import os

# ============================================================================
# PATH SETTINGS
# ============================================================================
DATA_DIR = "assets/data"
DICTIONARY_PATH = os.environ.get("ANAGRAMS_DICTIONARY", os.path.join(DATA_DIR, "linuxwords.txt"))

# ============================================================================
# DICTIONARY SETTINGS
# ============================================================================
MIN_LETTERS = 1  # Shorter entries would let the search recurse without consuming letters
MAX_LETTERS = None  # No upper bound on word length

# ============================================================================
# LOGGING SETTINGS
# ============================================================================
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
