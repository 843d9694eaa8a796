"""
Profile data ingestion: row sources, bucket parsing and profile validation.
"""
