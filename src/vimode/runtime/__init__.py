"""Runtime services: telemetry and configuration."""
