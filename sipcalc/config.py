"""Runtime settings, overridable through environment variables."""

import os
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# --- API ---
CORS_ORIGINS = _split_origins(
    os.environ.get(
        "SIPCALC_CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173",
    )
)

LOG_LEVEL = os.environ.get("SIPCALC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"

# --- Display ---
CURRENCY_SYMBOL = os.environ.get("SIPCALC_CURRENCY_SYMBOL", "₹")

ANIMATION_STEPS = 20
ANIMATION_DURATION_MS = 1000

# Initial values of each calculator form
DEFAULT_PARAMETERS = {
    "basic": {
        "mode": "basic",
        "monthly_investment": 5000,
        "years": 10,
        "annual_return_rate_percent": 12,
        "annual_inflation_rate_percent": 6,
    },
    "step_up": {
        "mode": "step_up",
        "initial_monthly_investment": 5000,
        "years": 10,
        "annual_return_rate_percent": 12,
        "annual_step_up_percent": 10,
    },
    "goal": {
        "mode": "goal",
        "target_amount": 1000000,
        "years": 10,
        "annual_return_rate_percent": 12,
        "annual_inflation_rate_percent": 6,
    },
}
