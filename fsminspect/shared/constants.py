# Table geometry
MAX_ROWS = 45
MAX_AUX_CHECKS = 5

# Spec-row columns (0-based tokens of a table line)
COL_PRESS = 1
COL_SEL_ID = 2
COL_REF = 3
COL_X = 4
COL_SPEC_YZ = 5
COL_SPEC_DIA = 6

# Size tolerance (mm)
SMALL_HOLE_LIMIT_MM = 10.7
SMALL_HOLE_ALLOWANCE_MM = 0.4
HOLE_ALLOWANCE_MM = 0.5
SLOT_ALLOWANCE_MM = 0.5

# Offset tolerance (mm)
NOMINAL_TOLERANCE_MM = 1.0
EDGE_TOLERANCE_MM = 1.5
EDGE_ZONE_MM = 200.0

# float comparisons at band edges (10.7 + 0.4 must equal 11.1)
EPS = 1e-9

# Operator marks for binary checks
OK_MARKS = {"Y", "OK", "YES", "PASS"}
NOK_MARKS = {"N", "NOK", "NO", "FAIL"}
