"""Ollama-backed thinker: client, prompts, response adapter."""
