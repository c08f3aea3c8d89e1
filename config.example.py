# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use a local, gitignored .env for overrides.

This file exists to make the repo self-documenting even without opening the code.
"""

ENV_VARS = {
    # App / logging
    "TASKDASH_APP_NAME": "App display name, also sent as User-Agent (default: task-dashboard).",
    "TASKDASH_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKDASH_DATA_DIR": "Local data directory for logs (default: .local/task_dashboard).",
    # Location / news
    "TASKDASH_LATITUDE": "Weather latitude (default: 59.3294).",
    "TASKDASH_LONGITUDE": "Weather longitude (default: 18.0687).",
    "TASKDASH_LOCATION_NAME": "Location label shown on the dashboard (default: Stockholm).",
    "TASKDASH_STORY_COUNT": "How many top Hacker News stories to show (default: 3).",
    # Suggestions
    "TASKDASH_WARM_THRESHOLD_C": "Above this temperature (C) it counts as warm (default: 15.0).",
    "TASKDASH_RAIN_THRESHOLD_MM": "At or above this precipitation (mm) it counts as rainy (default: 1.0).",
    # HTTP providers
    "TASKDASH_WEATHER_BASE_URL": "Open-Meteo base URL (default: https://api.open-meteo.com).",
    "TASKDASH_NEWS_BASE_URL": "Hacker News API base URL (default: https://hacker-news.firebaseio.com).",
    "TASKDASH_HTTP_TIMEOUT_SECONDS": "Per-request HTTP timeout (default: 10.0, minimum 0.5).",
    # Presentation
    "TASKDASH_PACING": "Pause between dashboard sections (true/false, default: true).",
}
