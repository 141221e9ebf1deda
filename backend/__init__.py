"""Open auth backend: signup, login and a token-gated home endpoint."""
