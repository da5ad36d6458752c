"""Presentation glue: console loop, rendering, announcements."""
