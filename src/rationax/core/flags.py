"""Default pause between two dots of the demo's loading animation. Tests and scripts set it to 0."""

DEMO_DELAY_SECONDS: float = 0.3
