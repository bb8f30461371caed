"""IAPWS-IF97 constants and region limits.

Values in IF97 units: MPa, K, kg/m³, kJ/kg, kJ/(kg·K).
"""

# Fluid constants
R_WATER = 0.461526  # kJ/(kg·K) — specific gas constant of water
T_CRITICAL = 647.096  # K
P_CRITICAL = 22.064  # MPa
RHO_CRITICAL = 322.0  # kg/m³

# Temperature limits
T_MIN = 273.15  # K — lower limit of regions 1, 2 and 4
T_13 = 623.15  # K — boundary between regions 1 and 3
T_B23_MAX = 863.15  # K — upper end of the B23 boundary (p = 100 MPa)
T_MAX = 1073.15  # K — upper limit of regions 1-3
T_MAX_R5 = 2273.15  # K — upper limit of region 5

# Pressure limits
P_MIN = 611.212677e-6  # MPa — saturation pressure at 273.15 K
P_MAX = 100.0  # MPa — upper limit of regions 1-3
P_MAX_R5 = 50.0  # MPa — upper limit of region 5

# Entropy landmarks of the h-s plane, kJ/(kg·K)
S_13 = 3.397782955  # s(623.15 K, 100 MPa) — upper end of the B13 curve
S_LIQUID_623 = 3.778281340  # s'(623.15 K)
S_CRITICAL = 4.41202148223476  # s at the critical point
S_B23_MIN = 5.048096828  # lower entropy limit of the B23 zone
S_VAPOUR_623 = 5.210887825  # s''(623.15 K)
S_B23_MAX = 5.260578707  # upper entropy limit of the B23 zone
S_2BC = 5.85  # boundary between the 2b and 2c backward subregions
S_VAPOUR_TRIPLE = 9.155759395  # s''(273.15 K)
S_LIQUID_TRIPLE = -1.545495919e-4  # s'(273.15 K)

# Enthalpy limits of the B23 zone, kJ/kg
H_B23_MIN = 2.563592004e3
H_B23_MAX = 2.812942061e3
