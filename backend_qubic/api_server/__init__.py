"""
API server package — HTTP/JSON interface.

Accepts transaction events from the automation pipeline and exposes
transactions, summary and wallet profiles to the dashboard. Delegates all
decisions to the ingestion service.
"""
