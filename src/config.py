"""Configuration settings for the dengue case management service."""

import os


def get_database_uri():
    """Get database connection URI from environment variables."""
    uri = os.environ.get("DATABASE_URL")
    if uri:
        return uri
    db_path = os.environ.get("DB_PATH", "dengue_pro.db")
    return f"sqlite:///{db_path}"


def get_login_delay_seconds():
    """Get the artificial delay applied before a login attempt is evaluated."""
    return float(os.environ.get("LOGIN_DELAY_SECONDS", "0.8"))


def get_default_password():
    """Get the password given to new staff members and used for resets."""
    return os.environ.get("DEFAULT_PASSWORD", "password123")


def seed_sample_data():
    """Whether empty tables get the sample staff and cases on startup."""
    return os.environ.get("SEED_SAMPLE_DATA", "true").lower() == "true"


def get_gemini_config():
    """Get Gemini API configuration from environment variables."""
    api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
    model = os.environ.get("GEMINI_MODEL", "gemini-3-flash-preview")
    base_url = os.environ.get(
        "GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    timeout = float(os.environ.get("GEMINI_TIMEOUT", "30"))

    return dict(
        api_key=api_key,
        model=model,
        base_url=base_url,
        timeout=timeout,
    )


def get_api_url():
    """Get API URL from environment variables."""
    host = os.environ.get("API_HOST", "localhost")
    port = os.environ.get("API_PORT", "8000")
    return f"http://{host}:{port}"
