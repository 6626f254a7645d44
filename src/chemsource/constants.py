"""Physical constants (SI, mole basis)."""

from scipy import constants

R_GAS = constants.gas_constant  # J/mol/K
P_STANDARD = constants.bar  # Pa, standard-state pressure for equilibrium constants
