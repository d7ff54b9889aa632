"""Default material parameters and physical clamp limits."""

# Initial state (SI-like units)
DEFAULT_INITIAL_POLARIZATION = 0.1       # Polarization [C/m^2]
DEFAULT_INITIAL_MAGNETIZATION = 1e-6     # Magnetization [A/m, scaled]
DEFAULT_INITIAL_STRAIN = 0.0             # Strain (dimensionless)
DEFAULT_COUPLING_STRENGTH = 1e-8         # Magnetoelectric coupling coefficient

# Steady field seeds. Stored on the configuration only; the drive signals are
# recomputed from position/time on every energy query.
DEFAULT_ELECTRIC_FIELD = 0.0             # [V/m]
DEFAULT_MAGNETIC_FIELD = 0.0             # [T]
DEFAULT_MECHANICAL_STRESS = 0.0          # [Pa]

# Physical limits for clamping (closed intervals)
POLARIZATION_LIMITS = (-1e-2, 1e-2)
MAGNETIZATION_LIMITS = (-1e-5, 1e-5)
STRAIN_LIMITS = (-0.1, 0.1)

# Drive-signal shape
DEFAULT_SPATIAL_FREQUENCY = 0.1          # [rad per unit position]
DEFAULT_TEMPORAL_FREQUENCY = 0.05        # [rad per unit time]
DEFAULT_ELECTRIC_FIELD_AMPLITUDE = 1e3   # [V/m]
DEFAULT_MAGNETIC_FIELD_AMPLITUDE = 1e-3  # [T]
DEFAULT_MECHANICAL_STRESS_AMPLITUDE = 1e6  # [Pa]

# Sweep driver defaults
DEFAULT_SWEEP_STEPS = 100
DEFAULT_POSITION_STEP = 0.1
DEFAULT_TIME_STEP = 0.01
DEFAULT_REPORT_EVERY = 20
