"""Application layer: authentication flows, account commands and queries."""
