from pathlib import Path

# Repo-root conventional directories/files (overrideable via load_client_config arguments)
CONFIG_DIR = Path("configs")
CLIENT_FILE = CONFIG_DIR / "terra.yaml"

# Environment overrides applied on top of terra.yaml
ENV_URL = "TERRA_URL"
ENV_LOGIN = "TERRA_LOGIN"
ENV_PASSWORD = "TERRA_PASSWORD"
ENV_TIMEOUT = "TERRA_TIMEOUT"

CLIENT_VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"terra-client/{CLIENT_VERSION}"
