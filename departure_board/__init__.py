"""In-memory departure board: stops per station, sliced by time window."""
