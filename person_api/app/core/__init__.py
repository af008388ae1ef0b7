"""Settings, logging and storage primitives shared by the application."""
