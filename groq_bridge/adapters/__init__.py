"""Adapters — Discord client and Groq completion backend."""
