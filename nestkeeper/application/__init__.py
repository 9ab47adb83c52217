"""Request/response workflows consumed by the UI and business layers."""
