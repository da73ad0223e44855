"""Constants for the filter analysis engine and report driver."""

import torch

# Number of points sampled from DC to Nyquist
NUM_FREQUENCIES: int = 100

# Working precision when coefficients are given as Python scalars
DEFAULT_DTYPE: torch.dtype = torch.float64

# Directory the report driver writes into when none is given
DEFAULT_OUTPUT_DIRECTORY: str = "."
