# Global configuration for verishare
import os
import logging

class Config:
    # Field parameters
    SHAMIR_PRIME = 2**127 - 1  # Mersenne prime M127
    DEMO_PRIME = 32416190071
    SMALL_PRIME = 97

    # Scheme defaults
    DEFAULT_THRESHOLD = 3
    DEFAULT_TOTAL_SHARES = 5
    SECRET_LENGTH = 15  # longest byte secret split_bytes accepts under SHAMIR_PRIME

    # Logging
    LOG_LEVEL = os.environ.get("VERISHARE_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Research parameters
    PERFORMANCE_SAMPLES = 100  # For benchmarking
    PERFORMANCE_RESULTS = "performance_results.json"

    @classmethod
    def log_level(cls):
        level = logging.getLevelName(cls.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.WARNING
