import os

# Delimiter marking a literal (unconverted) region of a search query
QUOTE_CHAR = '"'

# Small tsu emitted for a doubled consonant
SOKUON = "っ"

# Dictionary API the submitted query is sent to
API_BASE_URL = os.getenv("KANASEARCH_API_URL", "/api")
SEARCH_ENDPOINT = "/v1/search"

# Conversion mode used by the command line tool when none is given
DEFAULT_MODE = os.getenv("KANASEARCH_MODE", "preview")
