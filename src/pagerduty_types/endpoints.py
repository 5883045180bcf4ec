"""
Endpoint metadata for API routes.

Paths are relative to the API base URL and shared by the client and CLI.
"""

EXTENSIONS_ENDPOINT = "extensions"

# Root field wrapping singular responses, keyed by endpoint
ROOT_NODES = {
    EXTENSIONS_ENDPOINT: "extension",
}
