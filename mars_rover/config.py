# config.py
import os

MAP_SIZE = 128
HEADER_SIZE = 2
MAX_GOALS = 100

# Terrain class 3 can never be entered
IMPASSABLE = 3
# Largest height difference allowed between two adjacent cells
MAX_SLOPE = 1

TERRAIN_ENERGY = {0: 1, 1: 2, 2: 4}
SLOPE_ENERGY_FACTOR = 10

INPUT_ERROR_MESSAGE = "Input error: unable to process data/commands."

MAP_PATH = os.environ.get("ROVER_MAP_PATH")
API_HOST = os.environ.get("ROVER_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("ROVER_API_PORT", "8081"))
