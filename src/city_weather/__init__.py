"""City weather lookup: current conditions plus a grouped 5-day forecast."""

__version__ = "0.1.0"
