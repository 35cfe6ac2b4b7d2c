import os


def get_settings_module() -> str:
    """Pick the settings module from APP_ENV (default: development)."""
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        name = "production"
    elif env in {"test", "testing"}:
        name = "testing"
    else:
        name = "development"

    return f"{__name__}.{name}"
