"""
Configuration constants for brand-signals.

This module contains global constants used across the application
to avoid tight coupling between modules.
"""

# Characters of context captured on each side of a target-brand mention
DEFAULT_CONTEXT_WINDOW = 50

# Whether the analysis record echoes the raw response text back
DEFAULT_INCLUDE_ORIGINAL = True

# Category assigned to configured competitors without an explicit category
UNCATEGORIZED_CATEGORY = "Uncategorized"

# Category assigned to competitors proposed by heuristic discovery
DETECTED_CATEGORY = "Detected"

# Accepted length range (inclusive) for a heuristic candidate name
MIN_CANDIDATE_LENGTH = 2
MAX_CANDIDATE_LENGTH = 20

# Table cells parsing to an integer below this value are read as a rank column
TABLE_RANK_LIMIT = 100
