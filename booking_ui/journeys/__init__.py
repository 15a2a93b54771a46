"""
Live booking journeys against the configured TEST_ENV.

These drive a real browser through the holiday funnel and are skipped unless
UI_LIVE=1 is set:

    UI_LIVE=1 SEED=42 HEADLESS=false pytest booking_ui/journeys

Each run logs its seed; repeat it with the same SEED to replay the journey.
"""
