import os

# Plots in tests must never open a window.
os.environ.setdefault("MPLBACKEND", "Agg")
