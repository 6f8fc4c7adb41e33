"""Questions API - read-only listing of a fixed question collection."""
