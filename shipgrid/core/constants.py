# shipgrid/core/constants.py

DEFAULT_TICK_MS = 1

# Fusion reactor
DEFAULT_REACTOR_SIZING = 100.0
REACTOR_IDLE_LOAD = 0.01            # load fraction burned every tick while running
REACTOR_SUPPLY_FRACTION = 0.2       # share of sizing offered as power per tick
REACTOR_HEAT_FACTOR = 5.0           # heat per unit of power output
REACTOR_FUEL_FACTOR = -0.001        # fuel per unit of power output
REACTOR_START_POWER = 0.2           # power needed to self-start, times sizing
REACTOR_START_HEAT = 10.0
REACTOR_START_FUEL = 0.1
REACTOR_DEMAND_MARGIN = 0.99        # cover slightly less than the full deficit

# Capacitor
DEFAULT_CAPACITOR_CAPACITY = 500.0

# Battery
DEFAULT_BATTERY_CAPACITY = 200.0
DEFAULT_BATTERY_CHARGE = 0.0        # fraction of capacity
BATTERY_CHARGE_RATE = 0.01          # fraction of capacity per tick
BATTERY_DISCHARGE_RATE = 0.05

# Radiator
DEFAULT_RADIATOR_DISSIPATION = 9001.0
RADIATOR_AMBIENT_DECAY = 0.9
RADIATOR_MAX_DUMP = 0.5             # dump at most 50% of heat above ambient
RADIATOR_LOCAL_HEATING = 0.1

# Fuel tank
DEFAULT_FUEL_STORAGE = 100.0

# Laser
DEFAULT_LASER_POWER_COST = 500.0
DEFAULT_LASER_HEAT_OUTPUT = 5.0     # laser is 99% efficient
