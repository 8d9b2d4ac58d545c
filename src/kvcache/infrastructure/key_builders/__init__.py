"""Cache key builders."""
