import os

SETTINGS_MODULES = {
    "production": "config.production",
    "testing": "config.testing",
    "development": "config.development",
}


def get_settings_module() -> str:
    # APP_ENV chọn bộ cấu hình, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return SETTINGS_MODULES["production"]

    if env in {"test", "testing"}:
        return SETTINGS_MODULES["testing"]

    # Mọi giá trị khác dùng cấu hình development
    return SETTINGS_MODULES["development"]
