"""
Ingestion — raw pipeline events to scored, stored transactions.

normalizer: explicit field rules (raw body -> NormalizedEvent).
service: owned stores and the normalize -> score -> append -> update sequence.
"""
