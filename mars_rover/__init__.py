from mars_rover.models import GridMap, Heading, Command, SimulationResult
from mars_rover.decoder import decode_bytes, decode_map
from mars_rover.connectivity import is_reachable
from mars_rover.simulator import simulate_path
