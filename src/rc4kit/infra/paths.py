from platformdirs import user_config_path

PACKAGE_NAME = "rc4kit"  # Python package name

# -----------------------------------------------------------------------------
# User-writable directories & files
# -----------------------------------------------------------------------------

# Base config directory (e.g. ~/.config/rc4kit/)
USER_CONFIG_DIR = user_config_path(PACKAGE_NAME, appauthor=False)

SETTING_PATH = USER_CONFIG_DIR / "settings.json"

# Default config filename looked up in the working directory
DEFAULT_CONFIG_FILENAME = "settings.toml"
