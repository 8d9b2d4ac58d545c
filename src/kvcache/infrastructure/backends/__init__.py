"""KV namespace backends."""
