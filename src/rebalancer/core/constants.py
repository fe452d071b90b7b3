"""
Core constants and limits.

Defines system-wide defaults and calculation constants.
"""

# Strategy defaults
DEFAULT_INITIAL_CAPITAL = 10000.0
DEFAULT_BITCOIN_RATIO = 50.0  # percent
DEFAULT_REBALANCE_THRESHOLD = 5.0  # percent

# Performance metrics
DAYS_PER_YEAR = 365.25
MIN_YEARS_FOR_CAGR = 0.01  # Shorter windows report simple return

# Synthetic price generator
SYNTHETIC_START_DATE = "2015-01-01"
SYNTHETIC_START_PRICE = 300.0
SYNTHETIC_PRICE_FLOOR = 200.0
SYNTHETIC_CYCLE_AMPLITUDE = 0.1
SYNTHETIC_GROWTH_BASE = 1.5  # trend multiplier per year
SYNTHETIC_NOISE_AMPLITUDE = 0.05
DEFAULT_SYNTHETIC_SEED = 42

# Remote price source
DEFAULT_REMOTE_BASE_URL = "https://api.coingecko.com/api/v3"
REMOTE_TIMEOUT_SECONDS = 30
REMOTE_MAX_RETRIES = 3

# Presentation
DEFAULT_DEBOUNCE_MS = 300
DISPLAY_DATE_FORMAT = "%b %Y"
ISO_DATE_FORMAT = "%Y-%m-%d"
