"""Table-tennis league schedule sync: file-backed persistence core."""
