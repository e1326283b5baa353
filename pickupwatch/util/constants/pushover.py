PUSHOVER_MESSAGES_URL = "https://api.pushover.net/1/messages.json"

# Environment keys
TOKEN_ENV_KEY = "PUSHOVER_TOKEN"
USER_KEY_ENV_KEY = "PUSHOVER_USER_KEY"

HTML_ENABLED = "1"
