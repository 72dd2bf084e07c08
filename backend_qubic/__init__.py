"""
Backend Qubic — fraud-risk backend for Qubic transaction events.

Receives single transaction events from an automation pipeline, scores them
with a fixed rule table, tracks per-wallet behavior, and serves dashboard
read endpoints. Modular layout: analytics (scoring), behavioral_memory
(wallet stats), ingestion, database (in-memory log), api_server.
"""

__version__ = "0.1.0"
