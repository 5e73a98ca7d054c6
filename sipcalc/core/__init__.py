"""Pure calculation logic: projections and chart series."""
