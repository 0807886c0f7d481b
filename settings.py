from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# HMRC API hosts (hardcoded - select with HMRC_USE_SANDBOX or override with HMRC_BASE_URL)
PRODUCTION_BASE_URL = "https://api.service.hmrc.gov.uk"
SANDBOX_BASE_URL = "https://test-api.service.hmrc.gov.uk"

HMRC_USE_SANDBOX = config.get("HMRC_USE_SANDBOX", True)
HMRC_BASE_URL = config.get(
    "HMRC_BASE_URL",
    SANDBOX_BASE_URL if HMRC_USE_SANDBOX else PRODUCTION_BASE_URL,
)

# Application credentials issued by the HMRC Developer Hub
HMRC_CLIENT_ID = config.get("HMRC_CLIENT_ID", None)
HMRC_CLIENT_SECRET = config.get("HMRC_CLIENT_SECRET", None)
# Server token is only needed for application-restricted endpoints
HMRC_SERVER_TOKEN = config.get("HMRC_SERVER_TOKEN", None)

# Out-of-band redirect: HMRC shows the authorisation code to the user
DEFAULT_REDIRECT_URI = config.get("HMRC_REDIRECT_URI", "urn:ietf:wg:oauth:2.0:oob")

# Timeout configuration (HMRC_CONNECT_TIMEOUT / HMRC_REQUEST_TIMEOUT, or unprefixed)
# Connection timeout: Time to establish TCP connection
CONNECT_TIMEOUT = config.get("CONNECT_TIMEOUT", 10.0)
# Request timeout: Total timeout for a single request
REQUEST_TIMEOUT = config.get("REQUEST_TIMEOUT", 30.0)

LOG_LEVEL = config.get("LOG_LEVEL", "info")
