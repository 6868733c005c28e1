DEFAULT_BASE_URL = "https://api-public.cs-prod.leetify.com"
API_KEY_HEADER = "_leetify_key"
DEFAULT_TIMEOUT_S = 30.0
