"""Unit constants for splittime.

Scales are expressed as sub-units per whole unit (second).
Every resolution-specific value type takes its scale from here.
"""

# Sub-second scales
NS_IN_SECOND = 1_000_000_000
US_IN_SECOND = 1_000_000
MS_IN_SECOND = 1000

# Cross-unit factors
NS_IN_US = NS_IN_SECOND // US_IN_SECOND
