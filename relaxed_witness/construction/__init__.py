"""Witness complex construction: active witness pool, naive and incremental expansion."""
