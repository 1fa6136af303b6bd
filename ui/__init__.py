"""Console front-end for Indigo."""
