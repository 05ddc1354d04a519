import sys
import os

# Ensure crucible can be imported if this config is used standalone or imported from elsewhere
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crucible.planning.policies import BOUNDED, COMBINED_BOUND

class BenchmarkConfig:
    # --- Experiment Settings ---
    GRID_SIZES = [20, 40, 80, 141]    # Square grid side lengths to test
    NUM_TRIALS = 5                    # Number of generated grids per size
    RANDOM_SEED_BASE = 1000           # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "benchmarks")

    # --- Grid Generation ---
    MIN_COST = 1
    MAX_COST = 9
    SMOOTHING_SIGMA = 1.5

    # --- Policies & Heuristics ---
    POLICIES = [BOUNDED, COMBINED_BOUND]
    HEURISTICS = ["zero", "manhattan"]
