"""config.yaml models and loading."""
