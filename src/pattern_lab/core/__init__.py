"""Console narration, exceptions and services shared by the examples."""
