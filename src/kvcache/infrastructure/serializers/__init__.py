"""Cache value serializers."""
