# bikeflow/constants.py

MINUTES_PER_DAY = 1440

# window is [center - 60, center + 60], 121 minutes
WINDOW_HALF_WIDTH = 60

# raw slider value for "any time"
UNFILTERED_SENTINEL = -1

UNFILTERED_RADIUS_RANGE = (0.0, 25.0)
FILTERED_RADIUS_RANGE = (3.0, 50.0)

# departure-heavy / balanced / arrival-heavy
FLOW_LEVELS = (0, 0.5, 1)
