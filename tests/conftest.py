import matplotlib

# Plot tests must not need a display.
matplotlib.use("Agg")
